"""Exception types raised while scaffolding a plugin package."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

__all__ = [
    "DirectoryExistsError",
    "InvalidArchetypeError",
    "InvalidNameError",
    "ScaffoldError",
    "WriteFailureError",
]


class ScaffoldError(RuntimeError):
    """Base class for every error that terminates a scaffolding run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidNameError(ScaffoldError):
    """Raised when the requested plugin name fails lexical validation."""

    def __init__(self, name: object) -> None:
        super().__init__(
            f"invalid plugin name {name!r}: must start with a letter and contain only "
            "lowercase letters, digits, and hyphens"
        )
        self.name = name


class InvalidArchetypeError(ScaffoldError):
    """Raised when the requested archetype is not one of the supported values."""

    def __init__(self, archetype: object, choices: Sequence[str]) -> None:
        super().__init__(
            f"invalid plugin type {archetype!r}: must be one of: {', '.join(choices)}"
        )
        self.archetype = archetype
        self.choices = tuple(choices)


class DirectoryExistsError(ScaffoldError):
    """Raised before any write when the target directory is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"directory already exists: {path}")
        self.path = path


class WriteFailureError(ScaffoldError):
    """Raised when writing a planned file fails part way through a run.

    Files written before the failure are left in place; ``written`` lists their
    paths relative to the plugin directory.
    """

    def __init__(self, path: Path, written: Sequence[str], reason: str) -> None:
        super().__init__(f"failed to write {path}: {reason}")
        self.path = path
        self.written = tuple(written)
