"""Configuration for project generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pyseed.core.naming import DEFAULT_PROJECT_NAME
from pyseed.core.types import OverwritePolicy


@dataclass(kw_only=True)
class GeneratorConfig:
    """
    Options controlling where and how a project is materialized.

    Attributes:
        base_dir: Directory the project root is created in. ``None`` means the
            current working directory at the time of the call.
        policy: Behaviour when the project root already exists and is not empty.
        strict_names: Reject project names that are not a single safe directory name.
        default_name: Name used when the caller supplies none.
    """

    base_dir: Path | None = None
    policy: OverwritePolicy = OverwritePolicy.OVERWRITE
    strict_names: bool = False
    default_name: str = DEFAULT_PROJECT_NAME

    def __post_init__(self) -> None:
        if self.base_dir is not None:
            self.base_dir = Path(self.base_dir)
        self.policy = OverwritePolicy(self.policy)
        if not self.default_name.strip():
            raise ValueError("default_name must not be blank.")

    def resolve_base_dir(self) -> Path:
        return self.base_dir if self.base_dir is not None else Path.cwd()
