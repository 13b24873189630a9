"""Errors raised by the conversion engine."""

from __future__ import annotations

# Fixed user-facing message shown whenever the entered value is not a number.
INVALID_INPUT_MESSAGE = "Enter a valid number"
OUT_OF_RANGE_MESSAGE = "Result is out of range"


class InvalidArgumentError(ValueError):
    """Base class for rejected conversion arguments."""

    code = "invalid_argument"


class InvalidValueError(InvalidArgumentError):
    """The value to convert is not a finite number."""

    code = "invalid_value"

    def __init__(self, value: object) -> None:
        super().__init__(f"{INVALID_INPUT_MESSAGE} (got {value!r})")
        self.value = value


class UnknownCategoryError(InvalidArgumentError):
    """The category key is not one of the known categories."""

    code = "unknown_category"

    def __init__(self, category: str) -> None:
        super().__init__(f"Unknown category: {category!r}")
        self.category = category


class UnknownUnitError(InvalidArgumentError):
    """The unit key does not belong to the given category."""

    code = "unknown_unit"

    def __init__(self, unit: str, category: str | None = None) -> None:
        if category is None:
            message = f"Unknown unit: {unit!r}"
        else:
            message = f"Unknown unit {unit!r} for category {category!r}"
        super().__init__(message)
        self.unit = unit
        self.category = category


class ResultOutOfRangeError(InvalidArgumentError):
    """The converted value does not fit in a finite float."""

    code = "out_of_range"

    def __init__(self, value: float, from_unit: str, to_unit: str) -> None:
        super().__init__(f"{OUT_OF_RANGE_MESSAGE}: {value!r} {from_unit} in {to_unit}")
        self.value = value
        self.from_unit = from_unit
        self.to_unit = to_unit
