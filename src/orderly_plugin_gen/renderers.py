"""Render functions producing the text of every generated plugin file.

Each renderer takes an :class:`~orderly_plugin_gen.config.IdentifierBundle`
and the :class:`~orderly_plugin_gen.config.ScaffoldSettings` and returns the
file content. The manifest and toolchain configs are shared by every
archetype; the entry and component modules have one renderer per archetype.
"""

from __future__ import annotations

import json
from typing import Any, Callable

from .config import IdentifierBundle, ScaffoldSettings
from .naming import pascal_case
from .schema import Archetype
from .template import TemplateRenderer

__all__ = [
    "LAYOUT_TARGET",
    "Renderer",
    "WIDGET_TARGET",
    "component_file",
    "component_name",
    "render_gitkeep",
    "render_layout_component",
    "render_layout_entry",
    "render_package_json",
    "render_page_component",
    "render_page_entry",
    "render_tsconfig",
    "render_tsup_config",
    "render_widget_component",
    "render_widget_entry",
]

Renderer = Callable[[IdentifierBundle, ScaffoldSettings], str]

WIDGET_TARGET = "Trading.OrderEntry.SubmitButton"
LAYOUT_TARGET = "Trading.TradingLayout"

_RENDERER = TemplateRenderer()


def component_name(bundle: IdentifierBundle, archetype: Archetype) -> str:
    """Exported component name, e.g. ``PnlCardWidget``."""

    return f"{bundle.pascal_name}{pascal_case(archetype.value)}"


def component_file(bundle: IdentifierBundle, archetype: Archetype) -> str:
    """Component module base name without extension, e.g. ``pnlCardWidget``."""

    return f"{bundle.camel_name}{pascal_case(archetype.value)}"


def _context(
    bundle: IdentifierBundle, settings: ScaffoldSettings, archetype: Archetype | None = None
) -> dict[str, Any]:
    context: dict[str, Any] = dict(bundle.context())
    context["settings"] = settings
    if archetype is not None:
        context["archetype"] = archetype.value
        context["component_name"] = component_name(bundle, archetype)
        context["component_file"] = component_file(bundle, archetype)
    return context


def _dump_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Archetype independent files
# ---------------------------------------------------------------------------


def render_package_json(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    scope = settings.package_scope
    return _dump_json(
        {
            "name": bundle.package_name,
            "version": settings.plugin_version,
            "description": f"Orderly SDK plugin: {bundle.hyphen_name}",
            "main": "dist/index.js",
            "module": "dist/index.mjs",
            "types": "dist/index.d.ts",
            "scripts": {
                "build": "tsup",
                "dev": "tsup --watch",
            },
            "files": ["dist"],
            "peerDependencies": {
                "react": ">=18",
                "react-dom": ">=18",
                f"{scope}/plugin-core": "workspace:*",
                f"{scope}/ui": "workspace:*",
                f"{scope}/hooks": "workspace:*",
            },
            "dependencies": {},
            "devDependencies": {
                "@types/react": "^18.2.38",
                "@types/react-dom": "^18.2.17",
                "react": "^18.2.0",
                "react-dom": "^18.2.0",
                "tsconfig": "workspace:*",
                "tsup": "^8.5.1",
                "typescript": "^5.1.6",
            },
            "publishConfig": {
                "access": "public",
            },
        }
    )


def render_tsconfig(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    return _dump_json(
        {
            "extends": settings.tsconfig_base,
            "compilerOptions": {
                "outDir": "dist",
                "rootDir": "src",
                "jsx": "react-jsx",
            },
            "include": ["src"],
        }
    )


TSUP_CONFIG_TEMPLATE = """import { defineConfig } from "tsup";

export default defineConfig((options) => ({
  entry: ["src/index.tsx"],
  splitting: false,
  format: ["cjs", "esm"],
  target: "es6",
  sourcemap: true,
  clean: !options.watch,
  dts: true,
  tsconfig: "tsconfig.json",
  external: [
    "react",
    "react-dom",
    "{{ settings.package_scope }}/plugin-core",
    "{{ settings.package_scope }}/hooks",
    "{{ settings.package_scope }}/ui",
    "{{ settings.package_scope }}/trading",
  ],
}));
"""


def render_tsup_config(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    return _RENDERER.render_string(TSUP_CONFIG_TEMPLATE, _context(bundle, settings))


def render_gitkeep(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    return ""


# ---------------------------------------------------------------------------
# Entry modules: src/index.tsx
# ---------------------------------------------------------------------------

# ``interceptors`` is either empty or a block ending in a blank line.
REGISTRATION_TEMPLATE = """export function {{ register_function }}(options?: {{ options_type }}) {
  return (SDK: OrderlySDK) => {
    SDK.registerPlugin({
      id: {{ plugin_id|json }},
      name: {{ pascal_name|json }},
      version: {{ settings.plugin_version|json }},
      orderlyVersion: {{ settings.host_version|json }},

{{ interceptors }}      setup: (api) => {
        // Non-UI logic: event subscriptions, logging, etc.
      },
    });
  };
}
"""

WIDGET_INTERCEPTORS_TEMPLATE = """      interceptors: [
        // TODO: Change the target path to the component you want to intercept.
        // Use the Inspector tool to discover available paths.
        createInterceptor(
          {{ target|json }} as any,
          (Original, props, _api) => (
            <div className={options?.className}>
              <{{ component_name }} />
              <Original {...props} />
            </div>
          ),
        ),
      ],

"""

LAYOUT_INTERCEPTORS_TEMPLATE = """      interceptors: [
        // Intercept the top-level layout to rearrange child blocks
        createInterceptor(
          {{ target|json }} as any,
          (Original, props, _api) => (
            <{{ component_name }} className={options?.className}>
              <Original {...props} />
            </{{ component_name }}>
          ),
        ),
      ],

"""

WIDGET_ENTRY_TEMPLATE = """import React from "react";
import { createInterceptor } from "{{ settings.package_scope }}/plugin-core";
import type { OrderlySDK } from "{{ settings.package_scope }}/plugin-core";
import { {{ component_name }} } from "./components/{{ component_file }}";

export interface {{ options_type }} {
  /** Optional CSS class for the wrapper */
  className?: string;
}

/**
 * Register the {{ hyphen_name }} plugin.
 * Intercepts a target component and injects custom UI.
 */
{{ registration }}
export default {{ register_function }};
"""

PAGE_ENTRY_TEMPLATE = """import React from "react";
import type { OrderlySDK } from "{{ settings.package_scope }}/plugin-core";
import { {{ component_name }} } from "./components/{{ component_file }}";

export interface {{ options_type }} {
  /** Optional configuration */
  title?: string;
}

/**
 * Page plugin: {{ hyphen_name }}
 *
 * Page plugins are standalone route components.
 * Mount this via your host router; no interceptor registration needed.
 * The register function is kept for consistency and optional setup logic.
 */
{{ registration }}
/** Export the page component for host router integration */
export { {{ component_name }} } from "./components/{{ component_file }}";
export default {{ register_function }};
"""

LAYOUT_ENTRY_TEMPLATE = """import React from "react";
import { createInterceptor } from "{{ settings.package_scope }}/plugin-core";
import type { OrderlySDK } from "{{ settings.package_scope }}/plugin-core";
import { {{ component_name }} } from "./components/{{ component_file }}";

export interface {{ options_type }} {
  /** Optional CSS class for the layout wrapper */
  className?: string;
}

/**
 * Layout plugin: {{ hyphen_name }}
 *
 * Intercepts the top-level trading layout container and rearranges
 * child blocks (Chart, Orderbook, OrderEntry, etc.).
 */
{{ registration }}
export default {{ register_function }};
"""


def _render_entry(
    bundle: IdentifierBundle,
    settings: ScaffoldSettings,
    archetype: Archetype,
    template: str,
    *,
    interceptors_template: str | None = None,
    target: str | None = None,
) -> str:
    context = _context(bundle, settings, archetype)
    context["target"] = target
    interceptors = ""
    if interceptors_template is not None:
        interceptors = _RENDERER.render_string(interceptors_template, context)
    context["interceptors"] = interceptors
    context["registration"] = _RENDERER.render_string(REGISTRATION_TEMPLATE, context)
    return _RENDERER.render_string(template, context)


def render_widget_entry(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    """Entry module placing the widget beside the intercepted submit button."""

    return _render_entry(
        bundle,
        settings,
        Archetype.WIDGET,
        WIDGET_ENTRY_TEMPLATE,
        interceptors_template=WIDGET_INTERCEPTORS_TEMPLATE,
        target=WIDGET_TARGET,
    )


def render_page_entry(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    """Entry module without interceptors that re-exports the page component."""

    return _render_entry(bundle, settings, Archetype.PAGE, PAGE_ENTRY_TEMPLATE)


def render_layout_entry(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    """Entry module wrapping the trading layout inside the layout component."""

    return _render_entry(
        bundle,
        settings,
        Archetype.LAYOUT,
        LAYOUT_ENTRY_TEMPLATE,
        interceptors_template=LAYOUT_INTERCEPTORS_TEMPLATE,
        target=LAYOUT_TARGET,
    )


# ---------------------------------------------------------------------------
# Component modules: src/components/<component_file>.tsx
# ---------------------------------------------------------------------------

WIDGET_COMPONENT_TEMPLATE = """import React from "react";

export interface {{ component_name }}Props {
  className?: string;
}

export const {{ component_name }}: React.FC<{{ component_name }}Props> = ({ className }) => {
  return (
    <div className={className}>
      {/* TODO: Implement your widget UI here */}
      <p>{{ pascal_name }} Widget</p>
    </div>
  );
};
"""

PAGE_COMPONENT_TEMPLATE = """import React from "react";

export interface {{ component_name }}Props {
  className?: string;
}

/**
 * Standalone page component.
 * Mount this via the host application's router.
 * You can use {{ settings.package_scope }}/hooks directly here.
 */
export const {{ component_name }}: React.FC<{{ component_name }}Props> = ({ className }) => {
  return (
    <div className={className}>
      {/* TODO: Implement your page UI here */}
      <h1>{{ pascal_name }}</h1>
    </div>
  );
};
"""

LAYOUT_COMPONENT_TEMPLATE = """import React from "react";

export interface {{ component_name }}Props {
  className?: string;
  children?: React.ReactNode;
}

/**
 * Custom layout wrapper.
 * Rearranges trading page blocks (Chart, Orderbook, OrderEntry, etc.).
 */
export const {{ component_name }}: React.FC<{{ component_name }}Props> = ({ className, children }) => {
  return (
    <div className={className}>
      {/* TODO: Rearrange child blocks as needed */}
      {children}
    </div>
  );
};
"""


def render_widget_component(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    return _RENDERER.render_string(
        WIDGET_COMPONENT_TEMPLATE, _context(bundle, settings, Archetype.WIDGET)
    )


def render_page_component(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    return _RENDERER.render_string(
        PAGE_COMPONENT_TEMPLATE, _context(bundle, settings, Archetype.PAGE)
    )


def render_layout_component(bundle: IdentifierBundle, settings: ScaffoldSettings) -> str:
    return _RENDERER.render_string(
        LAYOUT_COMPONENT_TEMPLATE, _context(bundle, settings, Archetype.LAYOUT)
    )
