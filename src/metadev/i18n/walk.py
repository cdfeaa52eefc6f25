from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from metadev.config import DEFAULT_SKIP_DIRS, DEFAULT_SOURCE_SUFFIXES
from metadev.exceptions import ExtractionError


def _raise_walk_error(exc: OSError) -> None:
    raise ExtractionError(f"cannot walk {exc.filename}: {exc.strerror or exc}") from exc


def iter_source_paths(
    root: Path,
    *,
    suffixes: Iterable[str] = DEFAULT_SOURCE_SUFFIXES,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> list[Path]:
    """Expand ``root`` to source files, pruning skipped directories early.

    Directory and file names are visited in sorted order at every level so
    that two walks of an unchanged tree yield the same sequence.
    """
    suffix_tuple = tuple(suffixes)
    skipped = frozenset(skip_dirs)
    out: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_raise_walk_error):
        dirnames[:] = sorted(d for d in dirnames if d not in skipped)
        for filename in sorted(filenames):
            if not filename.endswith(suffix_tuple):
                continue
            out.append(Path(dirpath) / filename)
    return out


def read_source(path: Path) -> str:
    # Undecodable bytes are replaced; the scan is lexical and tolerant.
    return path.read_text(encoding="utf-8", errors="replace")
