"""Second extraction pass: call sites resolved to namespaces."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Mapping

from metadev.i18n.walk import read_source
from metadev.runtime.echo import EchoFn, warn as _default_warn

FALLBACK_NAMESPACE = "common"

# Broader than the declaration pattern: aliases are often used in files that
# do not declare them.
CALL_RE = re.compile(r"""\b(t\w+)\s*\(\s*['"]([^'"]+)['"]\s*\)""", re.ASCII)


@dataclass(frozen=True)
class TranslationKey:
    key: str
    namespace: str
    path: Path


def resolve_namespace(alias: str, aliases: Mapping[str, str]) -> str:
    namespace = aliases.get(alias)
    if namespace is not None:
        return namespace
    if alias.startswith("t") and len(alias) > 1:
        return alias[1:].lower()
    return FALLBACK_NAMESPACE


def extract_keys(
    content: str,
    aliases: Mapping[str, str],
    *,
    path: Path,
) -> list[TranslationKey]:
    return [
        TranslationKey(
            key=match.group(2),
            namespace=resolve_namespace(match.group(1), aliases),
            path=path,
        )
        for match in CALL_RE.finditer(content)
    ]


def extract_project_keys(
    paths: Iterable[Path],
    aliases: Mapping[str, str],
    *,
    read_text: Callable[[Path], str] = read_source,
    warn: EchoFn = _default_warn,
) -> list[TranslationKey]:
    keys: list[TranslationKey] = []
    for path in paths:
        try:
            content = read_text(path)
        except OSError as exc:
            warn(f"Warning: Error parsing file {path}: {exc}")
            continue
        keys.extend(extract_keys(content, aliases, path=path))
    return keys
