"""The bundled template registry."""

from __future__ import annotations

from functools import cache
import importlib.resources as ilr

from pyseed.core.types import Template, TemplateRegistry

_SCAFFOLD_PACKAGE = "pyseed.scaffold"

# (target path, resource file, executable)
_ENTRIES: list[tuple[str, str, bool]] = [
    ("main.py", "main.py", True),
    ("install.sh", "install.sh", True),
    ("requirements.txt", "requirements.txt", False),
    ("config.json", "config.json", False),
    (".gitignore", "gitignore", False),
    ("README.md", "README.md", False),
]

AUXILIARY_DIRECTORIES: tuple[str, ...] = ("data",)


def _read(filename: str) -> str:
    return ilr.files(_SCAFFOLD_PACKAGE).joinpath(filename).read_text(encoding="utf-8")


@cache
def default_registry() -> TemplateRegistry:
    """Return the six standard project templates and the ``data/`` directory."""
    templates = [
        Template(relative_path=path, body=_read(resource), executable=executable)
        for path, resource, executable in _ENTRIES
    ]
    return TemplateRegistry(templates, AUXILIARY_DIRECTORIES)
