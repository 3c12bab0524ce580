"""Exception types raised while collecting input and materializing projects."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

__all__ = [
    "FileConflictError",
    "MaterializationError",
    "ScaffoldError",
    "ValidationError",
]


class ScaffoldError(RuntimeError):
    """Base class for every fatal scaffolding failure."""


class ValidationError(ScaffoldError, ValueError):
    """Raised when a package name is not a valid Julia identifier."""

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class MaterializationError(ScaffoldError):
    """Raised when a directory or file cannot be written."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class FileConflictError(MaterializationError):
    """Raised when files already exist and overwriting is disabled."""

    def __init__(self, paths: Iterable[Path]) -> None:
        self.paths = tuple(paths)
        listing = ", ".join(str(path) for path in self.paths)
        super().__init__(
            f"refusing to overwrite existing files: {listing}",
            path=self.paths[0] if self.paths else None,
        )
