"""Core types shared by the registry and the materializer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

PLACEHOLDER = "__PROJECT_NAME__"


class OverwritePolicy(str, Enum):
    """What to do when the project root already exists and is not empty."""

    OVERWRITE = "overwrite"
    CLEAN = "clean"
    REFUSE = "refuse"

    @property
    def label(self) -> str:
        labels: dict[OverwritePolicy, str] = {
            OverwritePolicy.OVERWRITE: "Overwrite generated files, keep everything else",
            OverwritePolicy.CLEAN: "Delete the directory contents first",
            OverwritePolicy.REFUSE: "Leave it alone and abort",
        }
        return labels[self]


@dataclass(frozen=True)
class Template:
    """
    A unit of static text and where it lands in the project.

    Attributes:
        relative_path: POSIX-style path below the project root.
        body: File content, optionally containing ``__PROJECT_NAME__``.
        executable: Whether the written file gets execute permission.
    """

    relative_path: str
    body: str
    executable: bool = False

    def render(self, project_name: str) -> str:
        return self.body.replace(PLACEHOLDER, project_name)


def _check_relative(value: str) -> PurePosixPath:
    path = PurePosixPath(value)
    if not value or path.is_absolute() or ".." in path.parts or path == PurePosixPath("."):
        raise ValueError(f"Template paths must stay inside the project root, got {value!r}.")
    return path


@dataclass(frozen=True, init=False)
class TemplateRegistry:
    """Ordered, immutable collection of templates plus empty directories to create."""

    templates: tuple[Template, ...]
    directories: tuple[str, ...] = field(default=())

    def __init__(self, templates: Iterable[Template], directories: Iterable[str] = ()) -> None:
        object.__setattr__(self, "templates", tuple(templates))
        object.__setattr__(self, "directories", tuple(directories))

        seen: set[PurePosixPath] = set()
        for template in self.templates:
            path = _check_relative(template.relative_path)
            if path in seen:
                raise ValueError(f"Duplicate template path {template.relative_path!r}.")
            seen.add(path)
        files = set(seen)

        for directory in self.directories:
            path = _check_relative(directory)
            if path in seen:
                raise ValueError(f"Directory {directory!r} collides with another entry.")
            seen.add(path)

        # A file cannot also be the parent of another entry.
        for path in seen:
            for parent in path.parents:
                if parent in files:
                    raise ValueError(f"Entry {path.as_posix()!r} is nested under the file {parent.as_posix()!r}.")

    def __iter__(self) -> Iterator[Template]:
        return iter(self.templates)

    def __len__(self) -> int:
        return len(self.templates)

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(t.relative_path for t in self.templates)


@dataclass
class MaterializationResult:
    """What a single call to ``materialize`` produced."""

    root: Path
    written: tuple[Path, ...] = ()
    directories: tuple[Path, ...] = ()
    warnings: tuple[Warning, ...] = ()
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return not self.cancelled

    def entries(self) -> list[str]:
        """Names of the created entries relative to the root, directories suffixed with ``/``."""
        files = [p.relative_to(self.root).as_posix() for p in self.written]
        dirs = [f"{p.relative_to(self.root).as_posix()}/" for p in self.directories]
        return files + dirs
