"""Error hierarchy for metadev commands."""

from __future__ import annotations

from pathlib import Path


class MetadevError(RuntimeError):
    """Base class for failures that abort a command.

    The CLI converts any instance into a non-zero exit after printing
    ``str(exc)`` to stderr.
    """


class ExtractionError(MetadevError):
    """Raised when extraction cannot set up or walk its working tree."""


class OutputWriteError(MetadevError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"error writing {path}: {reason}")
        self.path = path
        self.reason = reason


class MergeInputError(MetadevError):
    """Raised for a merge input that is missing, misnamed or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
