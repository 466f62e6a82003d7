"""Configuration and derived identifiers shared by the renderers and scaffolder."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from .entropy import EntropySource, generate_plugin_id
from .naming import camel_case, hyphen_case, pascal_case

__all__ = ["DEFAULT_SETTINGS", "IdentifierBundle", "ScaffoldSettings"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScaffoldSettings:
    """Toolchain constants embedded in every generated plugin package.

    Attributes
    ----------
    package_scope:
        npm scope the generated package is published under.
    plugin_version:
        Initial version written to ``package.json`` and the plugin record.
    host_version:
        Minimum Orderly SDK version constraint declared by the plugin.
    tsconfig_base:
        Shared TypeScript configuration extended by the generated
        ``tsconfig.json``, relative to the plugin directory.
    """

    package_scope: str = "@orderly.network"
    plugin_version: str = "0.1.0"
    host_version: str = ">=2.9.0"
    tsconfig_base: str = "../tsconfig/base.json"


DEFAULT_SETTINGS = ScaffoldSettings()


@dataclass(frozen=True, slots=True)
class IdentifierBundle:
    """Identifiers derived from a single validated plugin name.

    Attributes
    ----------
    hyphen_name:
        The validated name, unchanged (``pnl-card``).
    camel_name:
        camelCase form used for component file names (``pnlCard``).
    pascal_name:
        PascalCase form used for component, type and function names
        (``PnlCard``).
    plugin_id:
        Runtime identifier registered with the host. A new value is minted on
        every derivation.
    package_name:
        Scoped npm package name (``@orderly.network/plugin-pnl-card``).
    directory_name:
        Name of the directory created under the target parent path.
    """

    hyphen_name: str
    camel_name: str
    pascal_name: str
    plugin_id: str
    package_name: str
    directory_name: str

    @classmethod
    def derive(
        cls,
        name: str,
        *,
        entropy: EntropySource | None = None,
        settings: ScaffoldSettings = DEFAULT_SETTINGS,
    ) -> "IdentifierBundle":
        """Build the bundle for ``name``.

        ``name`` must already be validated; no further checks are made here.
        """

        hyphen_name = hyphen_case(name)
        directory_name = f"plugin-{hyphen_name}"
        bundle = cls(
            hyphen_name=hyphen_name,
            camel_name=camel_case(name),
            pascal_name=pascal_case(name),
            plugin_id=generate_plugin_id(name, entropy),
            package_name=f"{settings.package_scope}/{directory_name}",
            directory_name=directory_name,
        )
        LOGGER.debug("derived identifiers for %s: %s", name, bundle)
        return bundle

    @property
    def register_function(self) -> str:
        return f"register{self.pascal_name}Plugin"

    @property
    def options_type(self) -> str:
        return f"{self.pascal_name}PluginOptions"

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "hyphen_name": self.hyphen_name,
            "camel_name": self.camel_name,
            "pascal_name": self.pascal_name,
            "plugin_id": self.plugin_id,
            "package_name": self.package_name,
            "directory_name": self.directory_name,
            "register_function": self.register_function,
            "options_type": self.options_type,
        }
