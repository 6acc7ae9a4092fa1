"""pyseed: generate a minimal, runnable Python project skeleton."""

from importlib.metadata import PackageNotFoundError, version

from pyseed.core import (
    DEFAULT_PROJECT_NAME,
    GeneratorConfig,
    MaterializationResult,
    OverwritePolicy,
    materialize,
)

try:
    __version__ = version("pyseed")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "DEFAULT_PROJECT_NAME",
    "GeneratorConfig",
    "MaterializationResult",
    "OverwritePolicy",
    "__version__",
    "materialize",
]
