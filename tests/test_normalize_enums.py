"""Unit tests for vocabulary normalization (feeding type/method, diaper contents, amounts)."""

import pytest

from buddy_assistant.normalize import (
    DiaperContents,
    describe_contents,
    normalize_diaper_contents,
    normalize_feeding_method,
    normalize_feeding_type,
    parse_amount,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Breast Milk", "breast milk"),
        ("formula", "formula"),
        ("FORMULA bottle", "formula"),
        ("Fortified Breast Milk", "fortified breast milk"),
        ("fortified", "fortified breast milk"),
        ("solid", "solid food"),
        ("baby food", "solid food"),
        ("juice", "breast milk"),
        (None, "breast milk"),
        ("", "breast milk"),
    ],
)
def test_normalize_feeding_type(raw, expected):
    assert normalize_feeding_type(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Bottle", "bottle"),
        ("left", "left breast"),
        ("Right Breast", "right breast"),
        ("both sides", "both breasts"),
        ("breast", "both breasts"),
        ("parent fed", "parent fed"),
        ("self", "self fed"),
        ("spoon", "bottle"),
        (None, "bottle"),
    ],
)
def test_normalize_feeding_method(raw, expected):
    assert normalize_feeding_method(raw) == expected


def test_method_priority_bottle_wins():
    assert normalize_feeding_method("left breast milk in a bottle") == "bottle"


@pytest.mark.parametrize(
    "raw,wet,solid",
    [
        ("wet", True, False),
        ("pee", True, False),
        ("poop", False, True),
        ("bm", False, True),
        ("BM and pee", True, True),
        ("dirty", False, True),
        ("both", True, True),
        ("wet and solid", True, True),
        ("dry", False, False),
        (None, False, False),
    ],
)
def test_normalize_diaper_contents(raw, wet, solid):
    assert normalize_diaper_contents(raw) == DiaperContents(wet=wet, solid=solid)


def test_describe_contents():
    assert describe_contents(DiaperContents(True, True)) == "wet and solid"
    assert describe_contents(DiaperContents(False, True)) == "solid"
    assert describe_contents(DiaperContents(False, False)) == "dry"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("4", 4.0),
        ("4 oz", 4.0),
        ("2.5ml", 2.5),
        (3, 3.0),
        (1.5, 1.5),
        ("", None),
        ("some", None),
        (None, None),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected
