"""Lightweight string templating used to render plugin source files."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

from .naming import camel_case, pascal_case

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def _resolve_value(context: Mapping[str, Any], dotted_path: str) -> Any:
    value: Any = context
    for segment in dotted_path.split("."):
        if isinstance(value, Mapping):
            if segment not in value:
                raise KeyError(segment)
            value = value[segment]
            continue
        if hasattr(value, segment):
            value = getattr(value, segment)
            if callable(value):
                value = value()
            continue
        raise KeyError(segment)
    return value


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions.

    Single braces are left alone, so JSX expressions such as
    ``{...props}`` pass through untouched.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(
                {
                    "upper": lambda value: str(value).upper(),
                    "lower": lambda value: str(value).lower(),
                    "strip": lambda value: str(value).strip(),
                    "camel": lambda value: camel_case(str(value)),
                    "pascal": lambda value: pascal_case(str(value)),
                    "json": lambda value: json.dumps(value, ensure_ascii=False),
                }
            )

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: str = "error",
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template string to evaluate.
        context:
            Mapping providing values for placeholders. Dotted keys walk nested
            mappings and object attributes.
        missing:
            Controls what happens when a placeholder cannot be resolved. The
            supported policies are ``"keep"`` (return the placeholder unchanged),
            ``"empty"`` (replace with an empty string) and ``"error"`` (raise
            :class:`TemplateRenderingError`).
        """

        if missing not in {"keep", "empty", "error"}:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        def substitute(match: re.Match[str]) -> str:
            expression = match.group("expression")
            parts = [part.strip() for part in expression.split("|") if part.strip()]
            if not parts:
                return match.group(0)

            key, *filters = parts
            try:
                value = _resolve_value(context, key)
            except KeyError:
                if missing == "keep":
                    return match.group(0)
                if missing == "empty":
                    return ""
                raise TemplateRenderingError(f"missing value for '{key}'")

            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
