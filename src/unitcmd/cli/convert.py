"""CLI command for a single conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from unitcmd.cli._options import global_options
from unitcmd.units import (
    ConversionResult,
    convert,
    display_name,
    format_result,
    infer_category,
    parse_value,
    resolve_category,
)
from unitcmd.units.models import Category

if TYPE_CHECKING:
    from unitcmd.cli.main import AppContext


# Negative values ("-40") must reach VALUE instead of being read as options.
@click.command("convert", context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.argument("from_unit")
@click.argument("to_unit")
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in Category]),
    default=None,
    help="Unit category (default: inferred from the units)",
)
@global_options
def convert_cmd(
    app_ctx: AppContext,
    value: str,
    from_unit: str,
    to_unit: str,
    category: str | None,
) -> None:
    """Convert VALUE from FROM_UNIT to TO_UNIT.

    Example: unitcmd convert 1 mile kilometer
    """
    formatter = app_ctx.formatter
    number = parse_value(value)
    cat = resolve_category(category) if category else infer_category(from_unit, to_unit)
    converted = convert(number, from_unit, to_unit, cat)

    result = ConversionResult(
        category=cat,
        from_unit=from_unit,
        to_unit=to_unit,
        value=number,
        result=converted,
    )

    if formatter.format == "json":
        formatter.output(result, command="convert")
        return

    digits = app_ctx.settings.max_fraction_digits
    formatter.rich.conversion(
        result,
        value_text=format_result(number, digits),
        result_text=format_result(converted, digits),
        from_label=display_name(from_unit, cat),
        to_label=display_name(to_unit, cat),
    )
