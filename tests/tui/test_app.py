"""Tests for the ConverterApp Textual widget."""

from __future__ import annotations

import pytest
from textual.widgets import Button, Input, Select

from unitcmd.tui.app import ConverterApp, HelpScreen
from unitcmd.units.models import Category


def _set_value(app: ConverterApp, text: str) -> None:
    app.query_one("#input-value", Input).value = text


class TestInitialState:
    @pytest.mark.asyncio
    async def test_app_starts_and_stops(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            assert app.is_running
            await pilot.press("ctrl+q")

    @pytest.mark.asyncio
    async def test_default_selection_is_first_two_units(self) -> None:
        app = ConverterApp()
        async with app.run_test():
            assert app.category is Category.LENGTH
            assert app.from_unit == "kilometer"
            assert app.to_unit == "meter"
            assert app.output_text == ""

    @pytest.mark.asyncio
    async def test_starting_category(self) -> None:
        app = ConverterApp("temperature")
        async with app.run_test():
            assert app.from_unit == "celsius"
            assert app.to_unit == "fahrenheit"


class TestConvert:
    @pytest.mark.asyncio
    async def test_convert_shows_formatted_result(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            _set_value(app, "1.5")
            app.action_convert()
            await pilot.pause()
            assert app.output_text == "1,500"

    @pytest.mark.asyncio
    async def test_enter_in_value_field_converts(self) -> None:
        app = ConverterApp("temperature")
        async with app.run_test() as pilot:
            app.query_one("#input-value", Input).focus()
            await pilot.press("1", "0", "0", "enter")
            await pilot.pause()
            assert app.output_text == "212"

    @pytest.mark.asyncio
    async def test_invalid_value_shows_message(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            _set_value(app, "twelve")
            app.action_convert()
            await pilot.pause()
            assert app.output_text == "Enter a valid number"

    @pytest.mark.asyncio
    async def test_empty_value_shows_message(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            app.action_convert()
            await pilot.pause()
            assert app.output_text == "Enter a valid number"

    @pytest.mark.asyncio
    async def test_overflowing_result_shows_message(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            _set_value(app, "1e308")
            app.action_convert()
            await pilot.pause()
            assert app.output_text == "Result is out of range"

    @pytest.mark.asyncio
    async def test_respects_fraction_digits(self) -> None:
        app = ConverterApp(max_fraction_digits=3)
        async with app.run_test() as pilot:
            _set_value(app, "1")
            app.query_one("#from-unit", Select).value = "inch"
            await pilot.pause()
            app.action_convert()
            await pilot.pause()
            assert app.output_text == "0.025"


class TestSwap:
    @pytest.mark.asyncio
    async def test_swap_exchanges_units_and_converts(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            _set_value(app, "1000")
            app.action_swap()
            await pilot.pause()
            assert app.from_unit == "meter"
            assert app.to_unit == "kilometer"
            assert app.output_text == "1"

    @pytest.mark.asyncio
    async def test_swap_result_survives_pending_events(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            _set_value(app, "2")
            app.action_swap()
            for _ in range(3):
                await pilot.pause()
            assert app.output_text == "0.002"


class TestSelectionChanges:
    @pytest.mark.asyncio
    async def test_category_change_repopulates_and_clears(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            _set_value(app, "5")
            app.action_convert()
            await pilot.pause()
            assert app.output_text == "5,000"

            app.query_one("#category", Select).value = "weight"
            await pilot.pause()

            assert app.category is Category.WEIGHT
            assert app.from_unit == "kilogram"
            assert app.to_unit == "gram"
            assert app.query_one("#input-value", Input).value == ""
            assert app.output_text == ""

    @pytest.mark.asyncio
    async def test_unit_change_clears_output(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            _set_value(app, "1")
            app.action_convert()
            await pilot.pause()
            assert app.output_text == "1,000"

            app.query_one("#to-unit", Select).value = "mile"
            await pilot.pause()
            assert app.output_text == ""
            assert app.query_one("#input-value", Input).value == "1"


class TestKeys:
    @pytest.mark.asyncio
    async def test_question_mark_toggles_help(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            app.query_one("#convert", Button).focus()
            await pilot.press("question_mark")
            await pilot.pause()
            assert isinstance(app.screen, HelpScreen)
            await pilot.press("question_mark")
            await pilot.pause()
            assert not isinstance(app.screen, HelpScreen)

    @pytest.mark.asyncio
    async def test_escape_closes_help(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            app.query_one("#convert", Button).focus()
            await pilot.press("question_mark")
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, HelpScreen)

    @pytest.mark.asyncio
    async def test_q_quits(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            app.query_one("#convert", Button).focus()
            await pilot.press("q")
            await pilot.pause()
            assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_ctrl_q_quits_from_value_field(self) -> None:
        app = ConverterApp()
        async with app.run_test() as pilot:
            app.query_one("#input-value", Input).focus()
            await pilot.press("ctrl+q")
            await pilot.pause()
            assert app.return_code == 0
