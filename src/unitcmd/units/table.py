"""The static conversion table.

Built once at import time and exposed read-only.  Linear categories store
how many base units one unit equals; temperature stores a pair of
functions to and from Kelvin for each scale.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from unitcmd._internal.units import (
    celsius_to_kelvin,
    fahrenheit_to_kelvin,
    identity,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
)
from unitcmd.units.models import (
    AffineCategory,
    AffineScale,
    AreaUnit,
    Category,
    LengthUnit,
    LinearCategory,
    TemperatureUnit,
    WeightUnit,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

LENGTH = LinearCategory(
    base=LengthUnit.METER,
    factors={
        LengthUnit.KILOMETER: 1000,
        LengthUnit.METER: 1,
        LengthUnit.CENTIMETER: 0.01,
        LengthUnit.MICROMETER: 1e-6,
        LengthUnit.NANOMETER: 1e-9,
        LengthUnit.INCH: 0.0254,
        LengthUnit.FOOT: 0.3048,
        LengthUnit.YARD: 0.9144,
        LengthUnit.MILE: 1609.344,
        LengthUnit.NAUTICALMILE: 1852,
    },
)

AREA = LinearCategory(
    base=AreaUnit.SQUAREMETER,
    factors={
        AreaUnit.SQUAREKILOMETER: 1e6,
        AreaUnit.SQUAREMETER: 1,
        AreaUnit.SQUARECENTIMETER: 0.0001,
        AreaUnit.SQUAREMILLIMETER: 0.000001,
        AreaUnit.HECTARE: 10000,
        AreaUnit.ACRE: 4046.8564224,
        AreaUnit.SQUAREMILE: 2.59e6,
        AreaUnit.SQUAREYARD: 0.836127,
        AreaUnit.SQUAREFOOT: 0.092903,
        AreaUnit.SQUAREINCH: 0.00064516,
    },
)

WEIGHT = LinearCategory(
    base=WeightUnit.KILOGRAM,
    factors={
        WeightUnit.KILOGRAM: 1,
        WeightUnit.GRAM: 0.001,
        WeightUnit.MILLIGRAM: 1e-6,
        WeightUnit.MICROGRAM: 1e-9,
        WeightUnit.TON: 1000,
        WeightUnit.POUND: 0.453592,
        WeightUnit.OUNCE: 0.0283495,
        WeightUnit.STONE: 6.35029,
    },
)

TEMPERATURE = AffineCategory(
    reference=TemperatureUnit.KELVIN,
    scales={
        TemperatureUnit.CELSIUS: AffineScale(celsius_to_kelvin, kelvin_to_celsius),
        TemperatureUnit.FAHRENHEIT: AffineScale(fahrenheit_to_kelvin, kelvin_to_fahrenheit),
        TemperatureUnit.KELVIN: AffineScale(identity, identity),
    },
)

LINEAR_CATEGORIES: Mapping[Category, LinearCategory] = MappingProxyType(
    {
        Category.LENGTH: LENGTH,
        Category.AREA: AREA,
        Category.WEIGHT: WEIGHT,
    }
)

# Read-only views; the models above are never handed out for mutation.
_FACTORS: Mapping[Category, Mapping[str, float]] = MappingProxyType(
    {cat: MappingProxyType(dict(table.factors)) for cat, table in LINEAR_CATEGORIES.items()}
)
_SCALES: Mapping[str, AffineScale] = MappingProxyType(dict(TEMPERATURE.scales))


def factors(category: Category) -> Mapping[str, float]:
    """Return the read-only factor mapping for a linear *category*."""
    return _FACTORS[category]


def scales() -> Mapping[str, AffineScale]:
    """Return the read-only temperature scale mapping."""
    return _SCALES


def base_unit(category: Category) -> str:
    """Return the base (or reference) unit key of *category*."""
    if category == Category.TEMPERATURE:
        return str(TEMPERATURE.reference)
    return str(LINEAR_CATEGORIES[category].base)


def unit_keys(category: Category) -> tuple[str, ...]:
    """Return the unit keys of *category* in table order."""
    if category == Category.TEMPERATURE:
        return tuple(str(unit) for unit in _SCALES)
    return tuple(str(unit) for unit in _FACTORS[category])
