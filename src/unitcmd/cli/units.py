"""CLI commands for browsing the conversion table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from unitcmd.cli._options import global_options
from unitcmd.units import resolve_category, table, units_for
from unitcmd.units.models import Category

if TYPE_CHECKING:
    from unitcmd.cli.main import AppContext


@click.command("units")
@click.argument("category", required=False, default=None)
@global_options
def units_cmd(app_ctx: AppContext, category: str | None) -> None:
    """List the units of CATEGORY (default: every category)."""
    formatter = app_ctx.formatter
    categories = [resolve_category(category)] if category else list(Category)

    if formatter.format == "json":
        data = {
            cat.value: [{"key": key, "name": name} for key, name in units_for(cat)]
            for cat in categories
        }
        formatter.output(data, command="units")
        return

    for cat in categories:
        formatter.rich.unit_list(cat.value, units_for(cat), table.base_unit(cat))


@click.command("categories")
@global_options
def categories_cmd(app_ctx: AppContext) -> None:
    """List the unit categories and their base units."""
    formatter = app_ctx.formatter
    rows = [(cat.value, table.base_unit(cat), len(table.unit_keys(cat))) for cat in Category]

    if formatter.format == "json":
        formatter.output(
            [{"category": name, "base": base, "units": count} for name, base, count in rows],
            command="categories",
        )
    else:
        formatter.rich.category_list(rows)
