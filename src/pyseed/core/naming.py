"""Project name defaulting and validation."""

from __future__ import annotations

import re

from pyseed.core.errors import InvalidProjectName

DEFAULT_PROJECT_NAME = "python-boilerplate"

_RESERVED_DEVICE_NAMES = re.compile(r"^(CON|PRN|AUX|NUL|COM[1-9]|LPT[1-9])(\..*)?$", re.IGNORECASE)


def resolve_project_name(
    name: str | None,
    *,
    strict: bool = False,
    default: str = DEFAULT_PROJECT_NAME,
) -> str:
    """
    Return the effective project name.

    Blank or missing input falls back to ``default``. Without ``strict`` the
    name is otherwise used as given, so it may contain path separators and
    end up nested below the base directory. Null bytes are always rejected
    since no filesystem can store them.
    """
    effective = (name or "").strip() or default
    if strict:
        validate_project_name(effective)
    elif "\0" in effective:
        raise InvalidProjectName(effective, "contains a null byte")
    return effective


def validate_project_name(name: str) -> None:
    """Raise :class:`InvalidProjectName` if ``name`` is not a safe single directory name."""
    if "\0" in name:
        raise InvalidProjectName(name, "contains a null byte")
    if "/" in name or "\\" in name:
        raise InvalidProjectName(name, "contains a path separator")
    if name in (".", ".."):
        raise InvalidProjectName(name, "refers to an existing directory")
    if name != name.rstrip(". "):
        raise InvalidProjectName(name, "ends with a dot or a space")
    if _RESERVED_DEVICE_NAMES.match(name):
        raise InvalidProjectName(name, "is a reserved device name on Windows")
