"""First extraction pass: alias-to-namespace declarations.

A declaration binds the translation function under a local alias::

    const { t: tUser } = useTranslation('user')

Matching is purely textual. Nesting, indentation and scoping are ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from metadev.i18n.walk import read_source
from metadev.runtime.echo import EchoFn, warn as _default_warn

DECLARATION_RE = re.compile(
    r"""const\s*{\s*t:\s*(\w+)\s*}\s*=\s*useTranslation\s*\(\s*['"]([^'"]+)['"]\s*\)""",
    re.ASCII,
)


@dataclass(frozen=True)
class AliasConflict:
    alias: str
    previous_namespace: str
    previous_path: Path
    namespace: str
    path: Path

    def render(self) -> str:
        return (
            f"alias {self.alias!r} rebound from {self.previous_namespace!r} "
            f"({self.previous_path}) to {self.namespace!r} ({self.path})"
        )


@dataclass(frozen=True)
class DeclarationIndex:
    aliases: dict[str, str]
    conflicts: tuple[AliasConflict, ...] = ()


def collect_declarations(content: str) -> dict[str, str]:
    aliases: dict[str, str] = {}
    for match in DECLARATION_RE.finditer(content):
        aliases[match.group(1)] = match.group(2)
    return aliases


def collect_project_declarations(
    paths: Iterable[Path],
    *,
    read_text: Callable[[Path], str] = read_source,
    warn: EchoFn = _default_warn,
) -> DeclarationIndex:
    """Fold per-file declarations in walk order; the last file wins per alias.

    Unreadable files are reported through ``warn`` and contribute nothing.
    Rebinding an alias to a different namespace from another file is kept
    as a conflict record alongside the winning map.
    """
    aliases: dict[str, str] = {}
    owners: dict[str, Path] = {}
    conflicts: list[AliasConflict] = []
    for path in paths:
        try:
            content = read_text(path)
        except OSError as exc:
            warn(f"Warning: Error parsing declarations in file {path}: {exc}")
            continue
        for alias, namespace in collect_declarations(content).items():
            previous = aliases.get(alias)
            if previous is not None and previous != namespace and owners[alias] != path:
                conflicts.append(
                    AliasConflict(
                        alias=alias,
                        previous_namespace=previous,
                        previous_path=owners[alias],
                        namespace=namespace,
                        path=path,
                    )
                )
            aliases[alias] = namespace
            owners[alias] = path
    return DeclarationIndex(aliases=aliases, conflicts=tuple(conflicts))
