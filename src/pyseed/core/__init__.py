"""Core project materialization: templates, registry and the materializer."""

from pyseed.core.config import GeneratorConfig
from pyseed.core.errors import (
    InvalidProjectName,
    PathConflict,
    PermissionWarning,
    PyseedError,
    WriteFailure,
)
from pyseed.core.materializer import materialize
from pyseed.core.naming import DEFAULT_PROJECT_NAME, resolve_project_name, validate_project_name
from pyseed.core.registry import default_registry
from pyseed.core.types import (
    PLACEHOLDER,
    MaterializationResult,
    OverwritePolicy,
    Template,
    TemplateRegistry,
)

__all__ = [
    "DEFAULT_PROJECT_NAME",
    "PLACEHOLDER",
    "GeneratorConfig",
    "InvalidProjectName",
    "MaterializationResult",
    "OverwritePolicy",
    "PathConflict",
    "PermissionWarning",
    "PyseedError",
    "Template",
    "TemplateRegistry",
    "WriteFailure",
    "default_registry",
    "materialize",
    "resolve_project_name",
    "validate_project_name",
]
