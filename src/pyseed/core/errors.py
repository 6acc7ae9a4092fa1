"""Exceptions and warnings raised while materializing a project."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyseed.core.types import MaterializationResult


class PyseedError(Exception):
    """Base class for every error raised by pyseed."""


class InvalidProjectName(PyseedError, ValueError):
    """The project name cannot be used as a directory name."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid project name {name!r}: {reason}.")
        self.name = name
        self.reason = reason


class PathConflict(PyseedError):
    """A path needed by the project is occupied by an entry of the wrong type."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}.")
        self.path = path
        self.reason = reason


class WriteFailure(PyseedError):
    """
    A filesystem write failed midway through materialization.

    Attributes:
        path: The path whose write failed.
        result: Everything completed before the failure.
    """

    def __init__(self, path: Path, result: MaterializationResult) -> None:
        super().__init__(f"Could not write {path}.")
        self.path = path
        self.result = result

    @property
    def written(self) -> tuple[Path, ...]:
        return self.result.written


class PermissionWarning(UserWarning):
    """The execute bit could not be set on a generated file."""
