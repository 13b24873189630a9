from __future__ import annotations

import pytest

from unitcmd.units.display import (
    capitalize,
    default_units,
    display_name,
    format_result,
    units_for,
)
from unitcmd.units.errors import UnknownCategoryError


class TestDisplayName:
    def test_plain_unit(self) -> None:
        assert display_name("kilometer", "length") == "Kilometer"

    def test_compound_name_is_not_split(self) -> None:
        assert display_name("nauticalmile", "length") == "Nauticalmile"

    def test_square_prefix_in_area(self) -> None:
        assert display_name("squarekilometer", "area") == "Square Kilometer"
        assert display_name("squareinch", "area") == "Square Inch"

    def test_non_square_area_unit(self) -> None:
        assert display_name("hectare", "area") == "Hectare"

    def test_temperature(self) -> None:
        assert display_name("fahrenheit", "temperature") == "Fahrenheit"

    def test_unknown_category(self) -> None:
        with pytest.raises(UnknownCategoryError):
            display_name("meter", "distance")

    def test_capitalize_splits_camel_case(self) -> None:
        assert capitalize("nauticalMile") == "Nautical Mile"

    def test_capitalize_leaves_table_keys_unsplit(self) -> None:
        for unit in ("nauticalmile", "micrometer", "squarefoot"):
            assert capitalize(unit) == unit.capitalize()


class TestUnitsFor:
    def test_pairs_in_table_order(self) -> None:
        units = units_for("weight")
        assert units[0] == ("kilogram", "Kilogram")
        assert ("stone", "Stone") in units
        assert len(units) == 8

    def test_default_selection_is_first_two(self) -> None:
        assert default_units("length") == ("kilometer", "meter")
        assert default_units("area") == ("squarekilometer", "squaremeter")
        assert default_units("temperature") == ("celsius", "fahrenheit")


class TestFormatResult:
    def test_integer_valued_float(self) -> None:
        assert format_result(1000.0) == "1,000"

    def test_groups_thousands(self) -> None:
        assert format_result(1609.344) == "1,609.344"

    def test_rounds_to_ten_digits(self) -> None:
        assert format_result(1 / 3) == "0.3333333333"

    def test_small_value_without_exponent(self) -> None:
        assert format_result(1e-9) == "0.000000001"

    def test_below_precision_is_zero(self) -> None:
        assert format_result(1e-12) == "0"

    def test_negative(self) -> None:
        assert format_result(-40.0) == "-40"

    def test_negative_zero(self) -> None:
        assert format_result(-1e-15) == "0"

    def test_custom_precision(self) -> None:
        assert format_result(2.0 / 3.0, 2) == "0.67"

    def test_large_value(self) -> None:
        assert format_result(2.59e6) == "2,590,000"
