"""Types describing the conversion table.

Categories and unit keys are closed ``StrEnum`` sets so that every lookup
either hits a known member or fails with a named error.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator


class Category(StrEnum):
    """Supported unit categories."""

    LENGTH = "length"
    AREA = "area"
    TEMPERATURE = "temperature"
    WEIGHT = "weight"


class LengthUnit(StrEnum):
    KILOMETER = "kilometer"
    METER = "meter"
    CENTIMETER = "centimeter"
    MICROMETER = "micrometer"
    NANOMETER = "nanometer"
    INCH = "inch"
    FOOT = "foot"
    YARD = "yard"
    MILE = "mile"
    NAUTICALMILE = "nauticalmile"


class AreaUnit(StrEnum):
    SQUAREKILOMETER = "squarekilometer"
    SQUAREMETER = "squaremeter"
    SQUARECENTIMETER = "squarecentimeter"
    SQUAREMILLIMETER = "squaremillimeter"
    HECTARE = "hectare"
    ACRE = "acre"
    SQUAREMILE = "squaremile"
    SQUAREYARD = "squareyard"
    SQUAREFOOT = "squarefoot"
    SQUAREINCH = "squareinch"


class TemperatureUnit(StrEnum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"


class WeightUnit(StrEnum):
    KILOGRAM = "kilogram"
    GRAM = "gram"
    MILLIGRAM = "milligram"
    MICROGRAM = "microgram"
    TON = "ton"
    POUND = "pound"
    OUNCE = "ounce"
    STONE = "stone"


class LinearCategory(BaseModel):
    """A category whose units are plain multiples of a base unit.

    ``factors[unit]`` is how many base units one *unit* equals.
    """

    model_config = ConfigDict(frozen=True)

    base: str
    factors: dict[str, float]

    @model_validator(mode="after")
    def _validate_factors(self) -> LinearCategory:
        if self.factors.get(self.base) != 1:
            raise ValueError(f"Base unit {self.base!r} must have a factor of exactly 1")
        bad = sorted(unit for unit, factor in self.factors.items() if not factor > 0)
        if bad:
            raise ValueError(f"Factors must be positive: {', '.join(bad)}")
        return self


@dataclass(frozen=True)
class AffineScale:
    """Converts a temperature scale to and from the Kelvin reference."""

    to_reference: Callable[[float], float]
    from_reference: Callable[[float], float]


class AffineCategory(BaseModel):
    """A category whose units differ by scale *and* offset (temperature)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    reference: str
    scales: dict[str, AffineScale]

    @model_validator(mode="after")
    def _validate_reference(self) -> AffineCategory:
        if self.reference not in self.scales:
            raise ValueError(f"Reference unit {self.reference!r} has no scale")
        return self


class ConversionResult(BaseModel):
    """A completed conversion, as reported by the CLI."""

    category: Category
    from_unit: str
    to_unit: str
    value: float
    result: float
