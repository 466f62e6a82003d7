"""Registry mapping each archetype to the files and renderers it produces."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from . import renderers
from .config import IdentifierBundle
from .renderers import Renderer
from .schema import Archetype

__all__ = ["ArchetypeLayout", "FileEntry", "resolve"]


FileEntry = tuple[str, Renderer]


@dataclass(frozen=True, slots=True)
class ArchetypeLayout:
    """Renderers specific to one archetype plus the shared file list."""

    archetype: Archetype
    render_entry: Renderer
    render_component: Renderer

    def component_base_name(self, bundle: IdentifierBundle) -> str:
        return renderers.component_file(bundle, self.archetype)

    def file_list(self, bundle: IdentifierBundle) -> list[FileEntry]:
        """Return ``(relative path, renderer)`` pairs in reporting order."""

        return [
            ("package.json", renderers.render_package_json),
            ("tsconfig.json", renderers.render_tsconfig),
            ("tsup.config.ts", renderers.render_tsup_config),
            ("src/index.tsx", self.render_entry),
            (f"src/components/{self.component_base_name(bundle)}.tsx", self.render_component),
            ("src/components/.gitkeep", renderers.render_gitkeep),
        ]


_REGISTRY: Mapping[Archetype, ArchetypeLayout] = MappingProxyType(
    {
        Archetype.WIDGET: ArchetypeLayout(
            Archetype.WIDGET, renderers.render_widget_entry, renderers.render_widget_component
        ),
        Archetype.PAGE: ArchetypeLayout(
            Archetype.PAGE, renderers.render_page_entry, renderers.render_page_component
        ),
        Archetype.LAYOUT: ArchetypeLayout(
            Archetype.LAYOUT, renderers.render_layout_entry, renderers.render_layout_component
        ),
    }
)

_unregistered = set(Archetype) - set(_REGISTRY)
if _unregistered:  # pragma: no cover - guards against adding an enum member only
    joined = ", ".join(sorted(member.value for member in _unregistered))
    raise RuntimeError(f"archetypes without a registered layout: {joined}")


def resolve(archetype: Archetype) -> ArchetypeLayout:
    """Return the layout for ``archetype``.

    ``archetype`` must already be a validated :class:`Archetype` member.
    """

    return _REGISTRY[archetype]
