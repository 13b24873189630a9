"""Textual converter widget.

A category selector, source and target unit selectors, a value field and
Convert / Swap buttons.  Picking a category repopulates both unit selectors
and clears the value; picking a unit clears the last result.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Footer, Header, Input, Label, Select, Static

from unitcmd.units import (
    INVALID_INPUT_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
    Category,
    InvalidValueError,
    ResultOutOfRangeError,
    convert,
    default_units,
    format_result,
    parse_value,
    units_for,
)
from unitcmd.units.display import DEFAULT_FRACTION_DIGITS

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Help modal
# ---------------------------------------------------------------------------

_HELP_TEXT = (
    "KEYBINDINGS\n"
    "\n"
    "  enter      Convert (from the value field)\n"
    "  ctrl+s     Swap source and target units\n"
    "  ?          Toggle this help screen (also f1)\n"
    "  q          Quit (ctrl+q from the value field)\n"
    "\n"
    "Changing the category resets both units and clears the value.\n"
    "Changing a unit clears the last result.\n"
)


class HelpScreen(ModalScreen[None]):
    """Modal help screen listing the keybindings."""

    BINDINGS: ClassVar[list[Binding]] = [  # type: ignore[assignment]
        Binding("escape", "dismiss", "Close"),
        Binding("question_mark", "dismiss", "Close"),
        Binding("f1", "dismiss", "Close", show=False),
    ]

    CSS = """
    HelpScreen {
        align: center middle;
    }
    #help-container {
        width: 60;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }
    #help-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
    }
    """

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="help-container"):
            yield Static("unitcmd Converter Help", id="help-title")
            yield Static(_HELP_TEXT, id="help-body")


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------


def _unit_options(category: Category) -> list[tuple[str, str]]:
    """Select options are ``(prompt, value)`` pairs."""
    return [(name, key) for key, name in units_for(category)]


class ConverterApp(App[None]):
    """Interactive unit converter."""

    TITLE = "unitcmd"

    CSS = """
    #form {
        padding: 1 2;
        height: auto;
    }
    .row {
        height: auto;
        margin-bottom: 1;
    }
    .row Label {
        width: 12;
        padding: 1 1 0 0;
    }
    .row Select, .row Input {
        width: 1fr;
    }
    #buttons Button {
        margin-right: 2;
    }
    #output-value {
        text-style: bold;
    }
    """

    BINDINGS: ClassVar[list[Binding]] = [  # type: ignore[assignment]
        Binding("q", "quit", "Quit"),
        Binding("ctrl+s", "swap", "Swap"),
        Binding("question_mark", "help", "Help"),
        # The value field swallows printable keys.
        Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
        Binding("f1", "help", "Help", show=False),
    ]

    def __init__(
        self,
        category: Category | str = Category.LENGTH,
        *,
        max_fraction_digits: int = DEFAULT_FRACTION_DIGITS,
    ) -> None:
        super().__init__()
        self._category = Category(category)
        self._max_fraction_digits = max_fraction_digits
        self._selection: tuple[str, str] = default_units(self._category)

    # -- Compose layout -------------------------------------------------------

    def compose(self) -> ComposeResult:
        from_unit, to_unit = default_units(self._category)
        options = _unit_options(self._category)

        yield Header()
        with Vertical(id="form"):
            with Horizontal(classes="row"):
                yield Label("Category")
                yield Select(
                    [(cat.value.title(), cat.value) for cat in Category],
                    value=self._category.value,
                    allow_blank=False,
                    id="category",
                )
            with Horizontal(classes="row"):
                yield Label("From")
                yield Select(options, value=from_unit, allow_blank=False, id="from-unit")
            with Horizontal(classes="row"):
                yield Label("To")
                yield Select(options, value=to_unit, allow_blank=False, id="to-unit")
            with Horizontal(classes="row"):
                yield Label("Value")
                yield Input(placeholder="Enter a value", id="input-value")
            with Horizontal(classes="row", id="buttons"):
                yield Button("Convert", variant="primary", id="convert")
                yield Button("Swap", id="swap")
            with Horizontal(classes="row"):
                yield Label("Result")
                yield Input(id="output-value", disabled=True)
        yield Footer()

    # -- Accessors ------------------------------------------------------------

    @property
    def category(self) -> Category:
        return self._category

    @property
    def from_unit(self) -> str:
        return str(self.query_one("#from-unit", Select).value)

    @property
    def to_unit(self) -> str:
        return str(self.query_one("#to-unit", Select).value)

    @property
    def output_text(self) -> str:
        return self.query_one("#output-value", Input).value

    def _set_output(self, text: str) -> None:
        self.query_one("#output-value", Input).value = text

    # -- Event handlers -------------------------------------------------------

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "category":
            self._change_category(Category(str(event.value)))
            return
        selection = (self.from_unit, self.to_unit)
        if selection != self._selection:
            self._selection = selection
            self._set_output("")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "convert":
            self.action_convert()
        elif event.button.id == "swap":
            self.action_swap()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "input-value":
            self.action_convert()

    def _change_category(self, category: Category) -> None:
        if category == self._category:
            return
        logger.debug("Category changed: %s -> %s", self._category.value, category.value)
        self._category = category
        from_unit, to_unit = default_units(category)
        options = _unit_options(category)

        from_select = self.query_one("#from-unit", Select)
        to_select = self.query_one("#to-unit", Select)
        # Repopulating is not a user unit change; keep the cleared state quiet.
        with self.prevent(Select.Changed):
            from_select.set_options(options)
            to_select.set_options(options)
            from_select.value = from_unit
            to_select.value = to_unit
        self._selection = (from_unit, to_unit)

        self.query_one("#input-value", Input).value = ""
        self._set_output("")

    # -- Actions --------------------------------------------------------------

    def action_convert(self) -> None:
        """Convert the entered value and show the formatted result."""
        text = self.query_one("#input-value", Input).value
        try:
            value = parse_value(text)
        except InvalidValueError:
            self._set_output(INVALID_INPUT_MESSAGE)
            return

        try:
            result = convert(value, self.from_unit, self.to_unit, self._category)
        except ResultOutOfRangeError:
            self._set_output(OUT_OF_RANGE_MESSAGE)
            return
        self._set_output(format_result(result, self._max_fraction_digits))

    def action_swap(self) -> None:
        """Exchange source and target units, then convert."""
        from_select = self.query_one("#from-unit", Select)
        to_select = self.query_one("#to-unit", Select)
        from_unit, to_unit = self.from_unit, self.to_unit
        with self.prevent(Select.Changed):
            from_select.value = to_unit
            to_select.value = from_unit
        self._selection = (to_unit, from_unit)
        self.action_convert()

    def action_help(self) -> None:
        if isinstance(self.screen, HelpScreen):
            self.pop_screen()
        else:
            self.push_screen(HelpScreen())
