from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Iterable, Mapping

from metadev.config import DEFAULT_OUTPUT_DIR
from metadev.exceptions import OutputWriteError
from metadev.i18n.resolver import TranslationKey
from metadev.json_types import TranslationMap
from metadev.runtime.echo import EchoFn, echo as _default_echo
from metadev.runtime.json_io import dump_json_pretty

GITIGNORE_NAME = ".gitignore"


def group_by_namespace(entries: Iterable[TranslationKey]) -> dict[str, TranslationMap]:
    """Group entries into one dictionary per namespace.

    Keys repeat freely across call sites; each appears once per namespace
    with an empty value to be filled in by translators.
    """
    tables: dict[str, TranslationMap] = defaultdict(dict)
    for entry in entries:
        tables[entry.namespace].setdefault(entry.key, "")
    return dict(tables)


def setup_output_dir(root: Path, output_dir: str = DEFAULT_OUTPUT_DIR) -> Path:
    target = root / output_dir
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(target, f"cannot create directory: {exc}") from exc
    return target


def write_namespace_files(
    output_dir: Path,
    tables: Mapping[str, TranslationMap],
    *,
    echo: EchoFn = _default_echo,
) -> list[Path]:
    """Write ``<namespace>.json`` for every table, replacing existing files."""
    written: list[Path] = []
    for namespace in sorted(tables):
        table = tables[namespace]
        path = output_dir / f"{namespace}.json"
        try:
            path.write_text(dump_json_pretty(table), encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(path, str(exc)) from exc
        echo(f"Generated {path} with {len(table)} keys")
        written.append(path)
    return written


def update_gitignore(
    root: Path,
    entry: str = f"{DEFAULT_OUTPUT_DIR}/",
    *,
    echo: EchoFn = _default_echo,
) -> bool:
    """Append ``entry`` to the ignore file unless it already mentions it.

    Returns True when the file was created or changed.
    """
    path = root / GITIGNORE_NAME
    try:
        content = path.read_text(encoding="utf-8")
        exists = True
    except FileNotFoundError:
        content = ""
        exists = False
    except OSError as exc:
        raise OutputWriteError(path, f"cannot read: {exc}") from exc

    if entry in content:
        return False

    if content and not content.endswith("\n"):
        content += "\n"
    content += f"{entry}\n"

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(path, str(exc)) from exc

    if exists:
        echo(f"Added {entry} to {GITIGNORE_NAME}")
    else:
        echo(f"Created {GITIGNORE_NAME} and added {entry}")
    return True
