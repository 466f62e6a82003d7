"""Validated request schema for the plugin scaffolder."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidArchetypeError, InvalidNameError
from .naming import is_valid_name

__all__ = ["Archetype", "PluginRequest"]


class Archetype(str, Enum):
    """Plugin archetypes supported by the generator."""

    WIDGET = "widget"
    PAGE = "page"
    LAYOUT = "layout"

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


class PluginRequest(BaseModel):
    """Input accepted by :class:`~orderly_plugin_gen.scaffold.PluginScaffolder`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Plugin name: a lowercase letter followed by letters, digits or hyphens.")
    archetype: Archetype = Field(default=Archetype.WIDGET, description="Kind of plugin to generate.")
    target_parent_path: Path = Field(..., description="Absolute directory the plugin directory is created in.")
    dry_run: bool = Field(default=False, description="Report the files that would be created without writing them.")

    @field_validator("name", mode="before")
    @classmethod
    def _normalize_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not is_valid_name(value):
            raise ValueError(
                "name must start with a letter and contain only lowercase letters, digits, and hyphens"
            )
        return value

    @field_validator("archetype", mode="before")
    @classmethod
    def _normalize_archetype(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("target_parent_path")
    @classmethod
    def _absolute_parent(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @classmethod
    def build(
        cls,
        name: str,
        archetype: str | Archetype = Archetype.WIDGET,
        target_parent_path: str | Path = ".",
        *,
        dry_run: bool = False,
    ) -> "PluginRequest":
        """Validate the raw inputs and return a request.

        Raises
        ------
        InvalidNameError
            If ``name`` fails lexical validation.
        InvalidArchetypeError
            If ``archetype`` is not a supported archetype.
        """

        try:
            return cls(
                name=name,
                archetype=archetype,
                target_parent_path=target_parent_path,
                dry_run=dry_run,
            )
        except ValidationError as exc:
            failed = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
            if "name" in failed:
                raise InvalidNameError(name) from exc
            if "archetype" in failed:
                raise InvalidArchetypeError(archetype, Archetype.choices()) from exc
            raise
