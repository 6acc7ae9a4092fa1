"""Writes a template registry to disk under a project root."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path, PurePosixPath
import shutil
import warnings

from pyseed.core.config import GeneratorConfig
from pyseed.core.errors import PathConflict, PermissionWarning, WriteFailure
from pyseed.core.naming import resolve_project_name
from pyseed.core.registry import default_registry
from pyseed.core.types import MaterializationResult, OverwritePolicy, TemplateRegistry

LOGGER = logging.getLogger(__name__)


def _is_empty_dir(path: Path) -> bool:
    return not any(path.iterdir())


def _clear_directory(root: Path) -> None:
    for entry in root.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def _prepare_root(root: Path, policy: OverwritePolicy) -> None:
    """Apply ``policy`` to an existing root. Only ``CLEAN`` touches the filesystem."""
    if not root.exists() and not root.is_symlink():
        for ancestor in reversed(root.parents):
            if ancestor.exists() and not ancestor.is_dir():
                raise PathConflict(ancestor, "is in the way of the project directory")
        return
    if not root.is_dir():
        raise PathConflict(root, "exists and is not a directory")
    if _is_empty_dir(root):
        return

    if policy is OverwritePolicy.REFUSE:
        raise PathConflict(root, "already exists and is not empty")
    if policy is OverwritePolicy.CLEAN:
        LOGGER.info("Clearing existing contents of %s", root)
        try:
            _clear_directory(root)
        except OSError as exc:
            raise WriteFailure(root, MaterializationResult(root=root)) from exc
    else:
        LOGGER.info("Overwriting generated files in existing directory %s", root)


def _check_path(root: Path, relative: str, *, directory: bool) -> None:
    """Fail if ``root / relative`` cannot hold a file (or a directory)."""
    parts = PurePosixPath(relative).parts
    current = root
    for part in parts[:-1]:
        current = current / part
        if current.exists() and not current.is_dir():
            raise PathConflict(current, "is in the way of a generated directory")

    target = root.joinpath(*parts)
    if directory and target.exists() and not target.is_dir():
        raise PathConflict(target, "exists and is not a directory")
    if not directory and target.is_dir():
        raise PathConflict(target, "is a directory, expected a file")


def _check_conflicts(root: Path, registry: TemplateRegistry) -> None:
    if not root.is_dir():
        return
    for template in registry:
        _check_path(root, template.relative_path, directory=False)
    for directory in registry.directories:
        _check_path(root, directory, directory=True)


def _make_executable(path: Path) -> PermissionWarning | None:
    """Grant execute wherever read is granted, like ``chmod +x``."""
    try:
        mode = path.stat().st_mode
        path.chmod(mode | ((mode & 0o444) >> 2))
    except (OSError, NotImplementedError) as exc:
        warning = PermissionWarning(f"Could not make {path} executable: {exc}")
        warnings.warn(warning, stacklevel=3)
        return warning
    return None


def materialize(
    project_name: str | None = None,
    *,
    registry: TemplateRegistry | None = None,
    config: GeneratorConfig | None = None,
    cancel: Callable[[], bool] | None = None,
) -> MaterializationResult:
    """
    Render every template of ``registry`` into a new project directory.

    The project root is ``config.base_dir / project_name``; a blank name falls
    back to ``config.default_name``. Existing files are overwritten unless
    ``config.policy`` says otherwise.

    Args:
        project_name: Name of the project directory.
        registry: Templates to write. Defaults to the bundled registry.
        config: Generation options. Defaults to :class:`GeneratorConfig()`.
        cancel: Polled between writes; returning ``True`` stops the run and
            returns a result marked ``cancelled``.

    Raises:
        InvalidProjectName: ``config.strict_names`` is set and the name is unsafe.
        PathConflict: An existing entry makes the layout impossible. Nothing
            has been written when this is raised.
        WriteFailure: A write failed. ``WriteFailure.result`` lists what
            was written before it.
    """
    config = config or GeneratorConfig()
    registry = default_registry() if registry is None else registry
    name = resolve_project_name(project_name, strict=config.strict_names, default=config.default_name)
    root = config.resolve_base_dir() / name

    _prepare_root(root, config.policy)
    _check_conflicts(root, registry)

    written: list[Path] = []
    directories: list[Path] = []
    issued: list[Warning] = []

    def snapshot(cancelled: bool = False) -> MaterializationResult:
        return MaterializationResult(
            root=root,
            written=tuple(written),
            directories=tuple(directories),
            warnings=tuple(issued),
            cancelled=cancelled,
        )

    def cancelled() -> bool:
        if cancel is not None and cancel():
            LOGGER.info("Cancelled after writing %d file(s) to %s", len(written), root)
            return True
        return False

    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteFailure(root, snapshot()) from exc

    for template in registry:
        if cancelled():
            return snapshot(cancelled=True)
        destination = root / template.relative_path
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(template.render(name), encoding="utf-8", newline="\n")
        except OSError as exc:
            raise WriteFailure(destination, snapshot()) from exc
        written.append(destination)
        LOGGER.debug("Wrote %s", destination)

    for directory in registry.directories:
        if cancelled():
            return snapshot(cancelled=True)
        path = root / directory
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteFailure(path, snapshot()) from exc
        directories.append(path)
        LOGGER.debug("Created directory %s", path)

    for template in registry:
        if template.executable and (warning := _make_executable(root / template.relative_path)):
            issued.append(warning)

    LOGGER.info("Materialized %d file(s) into %s", len(written), root)
    return snapshot()
