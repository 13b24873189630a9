"""Conversion engine: a pure function over the static table."""

from __future__ import annotations

import logging
import math
from numbers import Real

from unitcmd.units import table
from unitcmd.units.errors import (
    InvalidValueError,
    ResultOutOfRangeError,
    UnknownCategoryError,
    UnknownUnitError,
)
from unitcmd.units.models import Category

logger = logging.getLogger(__name__)


def resolve_category(category: Category | str) -> Category:
    """Return the :class:`Category` for *category*, or raise :class:`UnknownCategoryError`."""
    try:
        return Category(category)
    except ValueError:
        raise UnknownCategoryError(str(category)) from None


def infer_category(from_unit: str, to_unit: str) -> Category:
    """Find the category containing both unit keys.

    Unit keys are unique across categories, so the source unit alone picks
    the category; the target unit must then belong to the same one.
    """
    for category in Category:
        if from_unit in table.unit_keys(category):
            _require_unit(to_unit, category)
            return category
    raise UnknownUnitError(from_unit)


def _require_unit(unit: str, category: Category) -> None:
    if unit not in table.unit_keys(category):
        raise UnknownUnitError(unit, category.value)


def _require_number(value: object) -> float:
    # bool is a Real subclass but never a meaningful measurement.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidValueError(value)
    number = float(value)
    if not math.isfinite(number):
        raise InvalidValueError(value)
    return number


def parse_value(text: str) -> float:
    """Parse user-entered *text* into a finite float.

    Raises :class:`InvalidValueError` for empty, non-numeric, NaN or
    infinite input.
    """
    try:
        number = float(text.strip())
    except (AttributeError, ValueError):
        raise InvalidValueError(text) from None
    if not math.isfinite(number):
        raise InvalidValueError(text)
    return number


def convert(
    value: float,
    from_unit: str,
    to_unit: str,
    category: Category | str,
) -> float:
    """Convert *value* from *from_unit* to *to_unit* within *category*.

    Linear categories scale through the base unit; temperature goes through
    Kelvin.  Identical units return *value* unchanged.  A result too large
    for a float raises :class:`ResultOutOfRangeError`.
    """
    cat = resolve_category(category)
    _require_unit(from_unit, cat)
    _require_unit(to_unit, cat)
    number = _require_number(value)

    if from_unit == to_unit:
        result = number
    elif cat == Category.TEMPERATURE:
        scales = table.scales()
        kelvin = scales[from_unit].to_reference(number)
        result = scales[to_unit].from_reference(kelvin)
    else:
        factors = table.factors(cat)
        result = number * factors[from_unit] / factors[to_unit]
        if not math.isfinite(result):
            # The intermediate product can overflow when the quotient would not.
            result = number * (factors[from_unit] / factors[to_unit])

    if not math.isfinite(result):
        raise ResultOutOfRangeError(number, from_unit, to_unit)

    logger.debug("convert %s %s -> %s (%s) = %s", number, from_unit, to_unit, cat.value, result)
    return result
