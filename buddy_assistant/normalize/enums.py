"""Map free text onto the closed vocabularies Baby Buddy accepts.

Matching is case-insensitive substring containment, evaluated in a fixed
priority order. Unmatched feeding values fall back to a stable default
(``breast milk`` / ``bottle``) instead of blocking the user.
"""

import re
from typing import NamedTuple, Optional

from buddy_assistant.models.feeding import FeedingMethod, FeedingType

DEFAULT_FEEDING_TYPE: FeedingType = "breast milk"
DEFAULT_FEEDING_METHOD: FeedingMethod = "bottle"

_WET_WORDS = ("wet", "pee", "urine", "liquid")
_SOLID_WORDS = ("solid", "poo", "dirty", "stool", "bm")

_AMOUNT_RE = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)")


class DiaperContents(NamedTuple):
    wet: bool
    solid: bool


def normalize_feeding_type(raw: Optional[str]) -> FeedingType:
    """Return one of: breast milk, formula, fortified breast milk, solid food."""
    value = (raw or "").lower()

    # "fortified breast milk" also contains "breast" and "milk", check it first
    if "fortified" in value:
        return "fortified breast milk"
    if "breast" in value and "milk" in value:
        return "breast milk"
    if "formula" in value:
        return "formula"
    if "solid" in value or "food" in value:
        return "solid food"
    return DEFAULT_FEEDING_TYPE


def normalize_feeding_method(raw: Optional[str]) -> FeedingMethod:
    """Return one of: bottle, left breast, right breast, both breasts, parent fed, self fed."""
    value = (raw or "").lower()

    if "bottle" in value:
        return "bottle"
    if "left" in value:
        return "left breast"
    if "right" in value:
        return "right breast"
    if "both" in value:
        return "both breasts"
    if "breast" in value:
        # A bare "breast" means both sides
        return "both breasts"
    if "parent" in value:
        return "parent fed"
    if "self" in value:
        return "self fed"
    return DEFAULT_FEEDING_METHOD


def normalize_diaper_contents(raw: Optional[str]) -> DiaperContents:
    """
    Read wet / solid flags out of a description like "wet", "poop" or "both".

    Unrecognized text sets neither flag; the diaper payload then fails
    validation instead of recording a guess.
    """
    value = (raw or "").lower()
    if "both" in value:
        return DiaperContents(wet=True, solid=True)

    wet = any(w in value for w in _WET_WORDS)
    solid = any(w in value for w in _SOLID_WORDS)
    return DiaperContents(wet=wet, solid=solid)


def describe_contents(contents: DiaperContents) -> str:
    if contents.wet and contents.solid:
        return "wet and solid"
    if contents.wet:
        return "wet"
    if contents.solid:
        return "solid"
    return "dry"


def parse_amount(raw: Optional[str]) -> Optional[float]:
    """Leading number of ``raw`` as a float ("4 oz" → 4.0); blank or garbage → None."""
    if raw is None:
        return None
    match = _AMOUNT_RE.match(str(raw).strip())
    return float(match.group(0)) if match else None
