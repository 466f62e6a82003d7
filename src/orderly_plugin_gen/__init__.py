"""Scaffolding for Orderly SDK plugin packages.

The package turns a plugin name and archetype (widget, page or layout) into a
family of identifiers, renders the plugin's manifest, toolchain configuration
and TypeScript sources, and writes them into a new ``plugin-<name>`` directory.
"""

from __future__ import annotations

from .archetypes import ArchetypeLayout, resolve
from .config import IdentifierBundle, ScaffoldSettings
from .entropy import EntropySource, SystemEntropy, generate_plugin_id
from .errors import (
    DirectoryExistsError,
    InvalidArchetypeError,
    InvalidNameError,
    ScaffoldError,
    WriteFailureError,
)
from .naming import camel_case, is_valid_name, pascal_case
from .scaffold import FilePlan, PlannedFile, PluginScaffolder, WriteReport
from .schema import Archetype, PluginRequest
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "Archetype",
    "ArchetypeLayout",
    "DirectoryExistsError",
    "EntropySource",
    "FilePlan",
    "IdentifierBundle",
    "InvalidArchetypeError",
    "InvalidNameError",
    "PlannedFile",
    "PluginRequest",
    "PluginScaffolder",
    "ScaffoldError",
    "ScaffoldSettings",
    "SystemEntropy",
    "TemplateRenderer",
    "TemplateRenderingError",
    "WriteFailureError",
    "WriteReport",
    "camel_case",
    "generate_plugin_id",
    "is_valid_name",
    "pascal_case",
    "resolve",
]

__version__ = "0.1.0"
