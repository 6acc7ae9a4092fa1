"""Unit tests for generator configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyseed.core import DEFAULT_PROJECT_NAME, GeneratorConfig, OverwritePolicy, materialize


class TestGeneratorConfig:
    def test_defaults(self) -> None:
        config = GeneratorConfig()
        assert config.base_dir is None
        assert config.policy is OverwritePolicy.OVERWRITE
        assert config.strict_names is False
        assert config.default_name == DEFAULT_PROJECT_NAME

    def test_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            GeneratorConfig(Path("."))  # type: ignore[misc]

    def test_coerces_base_dir_and_policy(self) -> None:
        config = GeneratorConfig(base_dir="out", policy="clean")  # type: ignore[arg-type]
        assert config.base_dir == Path("out")
        assert config.policy is OverwritePolicy.CLEAN

    def test_rejects_unknown_policy(self) -> None:
        with pytest.raises(ValueError):
            GeneratorConfig(policy="merge")  # type: ignore[arg-type]

    def test_rejects_blank_default_name(self) -> None:
        with pytest.raises(ValueError, match="default_name"):
            GeneratorConfig(default_name="  ")

    def test_resolve_base_dir_falls_back_to_cwd(self, in_tmp_cwd: Path) -> None:
        assert GeneratorConfig().resolve_base_dir() == in_tmp_cwd

    def test_custom_default_name_is_used(self, tmp_path: Path) -> None:
        config = GeneratorConfig(base_dir=tmp_path, default_name="starter")
        result = materialize("", config=config)
        assert result.root == tmp_path / "starter"
