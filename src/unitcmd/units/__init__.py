from __future__ import annotations

from unitcmd.units.display import default_units, display_name, format_result, units_for
from unitcmd.units.engine import convert, infer_category, parse_value, resolve_category
from unitcmd.units.errors import (
    INVALID_INPUT_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
    InvalidArgumentError,
    InvalidValueError,
    ResultOutOfRangeError,
    UnknownCategoryError,
    UnknownUnitError,
)
from unitcmd.units.models import (
    AreaUnit,
    Category,
    ConversionResult,
    LengthUnit,
    TemperatureUnit,
    WeightUnit,
)

__all__ = [
    # engine
    "convert",
    "infer_category",
    "parse_value",
    "resolve_category",
    # display
    "default_units",
    "display_name",
    "format_result",
    "units_for",
    # errors
    "INVALID_INPUT_MESSAGE",
    "InvalidArgumentError",
    "InvalidValueError",
    "OUT_OF_RANGE_MESSAGE",
    "ResultOutOfRangeError",
    "UnknownCategoryError",
    "UnknownUnitError",
    # models
    "AreaUnit",
    "Category",
    "ConversionResult",
    "LengthUnit",
    "TemperatureUnit",
    "WeightUnit",
]
