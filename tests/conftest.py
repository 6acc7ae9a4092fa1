"""Shared fixtures for the pyseed test suite."""

from pathlib import Path

import pytest

from pyseed.core import GeneratorConfig, Template, TemplateRegistry


@pytest.fixture
def config(tmp_path: Path) -> GeneratorConfig:
    """Generate into ``tmp_path`` instead of the working directory."""
    return GeneratorConfig(base_dir=tmp_path)


@pytest.fixture
def small_registry() -> TemplateRegistry:
    """A registry shaped differently from the bundled one."""
    return TemplateRegistry(
        [
            Template("run.sh", "#!/bin/sh\necho __PROJECT_NAME__\n", executable=True),
            Template("docs/notes.md", "# __PROJECT_NAME__ notes\n"),
            Template("legacy.cfg", "[legacy]\n"),
        ],
        directories=("cache",),
    )


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path
