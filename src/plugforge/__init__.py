"""Utilities for scaffolding new front-end plugin projects.

The package derives name variants from a project name, validates user input,
and copies a template tree into a fresh directory while filling in a small,
fixed set of placeholder tokens. A failed run never leaves a half-built
project behind.
"""

from __future__ import annotations

from .config import ProjectIdentity, ScaffoldSettings
from .errors import (
    DestinationExistsError,
    MaterializationError,
    ScaffoldError,
    TemplateNotFoundError,
    ValidationError,
)
from .materialize import TreeMaterializer
from .naming import to_kebab_case, to_snake_case
from .scaffold import ProjectScaffolder, provision
from .schema import MaterializeReport, Placeholder, ProvisionResult, ReplacementMap
from .template import PlaceholderSubstitutor, substitute
from .validation import validate_port, validate_project_name

__all__ = [
    "DestinationExistsError",
    "MaterializationError",
    "MaterializeReport",
    "Placeholder",
    "PlaceholderSubstitutor",
    "ProjectIdentity",
    "ProjectScaffolder",
    "ProvisionResult",
    "ReplacementMap",
    "ScaffoldError",
    "ScaffoldSettings",
    "TemplateNotFoundError",
    "TreeMaterializer",
    "ValidationError",
    "provision",
    "substitute",
    "to_kebab_case",
    "to_snake_case",
    "validate_port",
    "validate_project_name",
]

__version__ = "0.1.0"
