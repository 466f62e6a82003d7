"""Name validation and casing helpers used to derive plugin identifiers."""

from __future__ import annotations

import re

__all__ = [
    "NAME_PATTERN",
    "camel_case",
    "capitalize_segment",
    "hyphen_case",
    "is_valid_name",
    "pascal_case",
    "split_segments",
]


NAME_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")


def is_valid_name(value: str) -> bool:
    """Return ``True`` when ``value`` is an acceptable plugin name.

    A plugin name starts with a lowercase letter followed by lowercase letters,
    digits or hyphens.
    """

    return bool(NAME_PATTERN.match(value))


def split_segments(name: str) -> list[str]:
    return name.split("-")


def capitalize_segment(segment: str) -> str:
    """Upper-case the first character of ``segment`` and keep the rest as-is.

    Unlike :meth:`str.capitalize` the remainder is not lower-cased, so
    ``"pnlCard"`` becomes ``"PnlCard"`` rather than ``"Pnlcard"``.
    """

    if not segment:
        return segment
    return segment[0].upper() + segment[1:]


def hyphen_case(name: str) -> str:
    # Validated names are already hyphen-delimited.
    return name


def camel_case(name: str) -> str:
    """Return ``name`` in camelCase, e.g. ``pnl-card`` -> ``pnlCard``."""

    first, *rest = split_segments(name)
    return first + "".join(capitalize_segment(segment) for segment in rest)


def pascal_case(name: str) -> str:
    """Return ``name`` in PascalCase, e.g. ``pnl-card`` -> ``PnlCard``."""

    return "".join(capitalize_segment(segment) for segment in split_segments(name))
