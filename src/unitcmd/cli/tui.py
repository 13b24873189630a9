"""CLI command that launches the interactive converter."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from unitcmd.cli._options import global_options
from unitcmd.units.models import Category

if TYPE_CHECKING:
    from unitcmd.cli.main import AppContext


@click.command("tui")
@click.option(
    "--category",
    "-c",
    type=click.Choice([c.value for c in Category]),
    default=None,
    help="Category selected on start (default: UNITCMD_DEFAULT_CATEGORY or length)",
)
@global_options
def tui_cmd(app_ctx: AppContext, category: str | None) -> None:
    """Open the interactive converter."""
    from unitcmd.tui.app import ConverterApp

    settings = app_ctx.settings
    app = ConverterApp(
        category or settings.default_category,
        max_fraction_digits=settings.max_fraction_digits,
    )
    app.run()
