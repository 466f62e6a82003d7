from __future__ import annotations

import pytest

from orderly_plugin_gen.naming import (
    camel_case,
    capitalize_segment,
    hyphen_case,
    is_valid_name,
    pascal_case,
)


@pytest.mark.parametrize("value", ["pnl-card", "a", "widget2", "x-1-y", "a--b", "trailing-"])
def test_is_valid_name_accepts(value):
    assert is_valid_name(value)


@pytest.mark.parametrize(
    "value",
    ["", "1card", "-card", "Pnl-card", "pnl_card", "pnl card", "pnl.card", "café"],
)
def test_is_valid_name_rejects(value):
    assert not is_valid_name(value)


@pytest.mark.parametrize(
    "value, camel, pascal",
    [
        ("pnl-card", "pnlCard", "PnlCard"),
        ("card", "card", "Card"),
        ("order-book-v2", "orderBookV2", "OrderBookV2"),
        ("a-1b", "a1b", "A1b"),
        ("a--b", "aB", "AB"),
    ],
)
def test_casing(value, camel, pascal):
    assert hyphen_case(value) == value
    assert camel_case(value) == camel
    assert pascal_case(value) == pascal


@pytest.mark.parametrize("value", ["pnl-card", "x", "deep-nested-name-42", "q-r-s"])
def test_camel_is_pascal_with_lowered_first_character(value):
    pascal = pascal_case(value)
    assert "-" not in pascal
    assert camel_case(value) == pascal[0].lower() + pascal[1:]
    for segment, part in zip(value.split("-"), pascal_parts(value)):
        assert part == segment[:1].upper() + segment[1:]


def pascal_parts(value: str) -> list[str]:
    return [capitalize_segment(segment) for segment in value.split("-")]


def test_capitalize_segment_keeps_remainder():
    assert capitalize_segment("pnlCard") == "PnlCard"
    assert capitalize_segment("") == ""
