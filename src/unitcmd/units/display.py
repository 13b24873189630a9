"""Presentation helpers: unit display names and result formatting."""

from __future__ import annotations

import re
from decimal import Decimal

from unitcmd.units import table
from unitcmd.units.engine import resolve_category
from unitcmd.units.models import Category

DEFAULT_FRACTION_DIGITS = 10

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SQUARE_PREFIX = "square"


def capitalize(word: str) -> str:
    """Split camelCase into words and upper-case the first letter.

    Every key in the current table is lower-case, so only the upper-casing
    applies to them; the split keeps camelCase keys readable should any be
    added.
    """
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", word)
    return spaced[:1].upper() + spaced[1:]


def display_name(unit: str, category: Category | str) -> str:
    """Return the human-readable label for *unit* within *category*.

    Area units get a space after their ``square`` prefix
    (``squarekilometer`` -> ``Square Kilometer``).
    """
    cat = resolve_category(category)
    if cat == Category.AREA and unit.startswith(_SQUARE_PREFIX):
        return "Square " + capitalize(unit[len(_SQUARE_PREFIX) :])
    return capitalize(unit)


def units_for(category: Category | str) -> list[tuple[str, str]]:
    """Return ``(key, display name)`` pairs for *category* in table order."""
    cat = resolve_category(category)
    return [(unit, display_name(unit, cat)) for unit in table.unit_keys(cat)]


def default_units(category: Category | str) -> tuple[str, str]:
    """Return the default ``(from, to)`` selection: the first two units."""
    keys = table.unit_keys(resolve_category(category))
    return keys[0], keys[1]


def format_result(value: float, max_fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
    """Round *value* to at most *max_fraction_digits* and group thousands.

    Trailing zeros are dropped, so ``1000.0`` renders as ``1,000`` and
    ``1e-9`` as ``0.000000001``.
    """
    rounded = round(value, max_fraction_digits)
    # Decimal(repr) keeps the shortest round-tripping digits without
    # falling back to scientific notation in the f-string below.
    text = f"{Decimal(repr(rounded)):,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text
