"""Translation key extraction pipeline.

Two passes over the same file list: declarations first, so that an alias
declared in one component resolves correctly where another file only calls
it, then call sites.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from metadev.config import I18nSettings
from metadev.i18n.declarations import AliasConflict, collect_project_declarations
from metadev.i18n.resolver import TranslationKey, extract_project_keys
from metadev.i18n.walk import iter_source_paths, read_source
from metadev.i18n.writer import (
    group_by_namespace,
    setup_output_dir,
    update_gitignore,
    write_namespace_files,
)
from metadev.runtime.echo import EchoFn, echo as _default_echo, warn as _default_warn


@dataclass(frozen=True)
class ExtractionResult:
    keys: list[TranslationKey]
    aliases: dict[str, str]
    conflicts: tuple[AliasConflict, ...]
    paths: list[Path]


@dataclass(frozen=True)
class ExtractionRun:
    result: ExtractionResult
    written: list[Path]


def extract_translation_keys(
    root: Path,
    *,
    settings: I18nSettings | None = None,
    read_text: Callable[[Path], str] = read_source,
    warn: EchoFn = _default_warn,
) -> ExtractionResult:
    settings = settings or I18nSettings()
    paths = iter_source_paths(
        root,
        suffixes=settings.source_suffixes,
        skip_dirs=settings.skip_dirs,
    )
    index = collect_project_declarations(paths, read_text=read_text, warn=warn)
    for conflict in index.conflicts:
        warn(f"Warning: {conflict.render()}")
    keys = extract_project_keys(paths, index.aliases, read_text=read_text, warn=warn)
    return ExtractionResult(
        keys=keys,
        aliases=index.aliases,
        conflicts=index.conflicts,
        paths=paths,
    )


def run_extraction(
    root: Path,
    *,
    settings: I18nSettings | None = None,
    read_text: Callable[[Path], str] = read_source,
    echo: EchoFn = _default_echo,
    warn: EchoFn = _default_warn,
) -> ExtractionRun:
    """Extract keys under ``root`` and write one dictionary per namespace.

    Namespace files are replaced wholesale. Hand-filled values survive only
    if merged back in with the merge command.
    """
    settings = settings or I18nSettings()
    result = extract_translation_keys(root, settings=settings, read_text=read_text, warn=warn)
    output_dir = setup_output_dir(root, settings.output_dir)
    update_gitignore(root, settings.gitignore_entry, echo=echo)
    written = write_namespace_files(output_dir, group_by_namespace(result.keys), echo=echo)
    return ExtractionRun(result=result, written=written)
