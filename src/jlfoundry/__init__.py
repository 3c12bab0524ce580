"""Interactive bootstrapper for new Julia packages.

The package collects a handful of parameters (name, author, Julia version,
description), validates them, and renders a fixed set of templates covering the
manifest, license, source and test stubs, documentation, build automation and
CI pipelines. Everything is usable programmatically as well as through the
``jlfoundry`` command.
"""

from __future__ import annotations

from .config import ProjectConfig
from .errors import FileConflictError, MaterializationError, ScaffoldError, ValidationError
from .identity import git_identity, static_identity
from .naming import is_valid_package_name, suggest_package_name, validate_package_name
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer, TemplateRenderingError
from .templates import TEMPLATES, render_path, render_template
from .wizard import InputCollector

__all__ = [
    "FileConflictError",
    "InputCollector",
    "MaterializationError",
    "ProjectConfig",
    "ProjectScaffolder",
    "ScaffoldError",
    "TEMPLATES",
    "TemplateRenderer",
    "TemplateRenderingError",
    "ValidationError",
    "git_identity",
    "is_valid_package_name",
    "render_path",
    "render_template",
    "static_identity",
    "suggest_package_name",
    "validate_package_name",
]

__version__ = "0.1.0"
