from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from unitcmd.units.models import ConversionResult


class RichOutput:
    """Rich-based terminal output helpers for *unitcmd*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Conversion result
    # ------------------------------------------------------------------

    def conversion(
        self,
        result: ConversionResult,
        *,
        value_text: str,
        result_text: str,
        from_label: str,
        to_label: str,
    ) -> None:
        """Print a one-line panel: ``<value> <From> = <result> <To>``."""
        body = (
            f"{value_text} [cyan]{from_label}[/cyan]"
            f" = [bold green]{result_text}[/bold green] [cyan]{to_label}[/cyan]"
        )
        self._con.print(Panel(body, title=result.category.value.title(), expand=False))

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def unit_list(self, category: str, units: list[tuple[str, str]], base: str) -> None:
        """Print a table of unit keys and display names for one category."""
        table = Table(title=f"{category.title()} units")
        table.add_column("Key", style="cyan")
        table.add_column("Name")
        table.add_column("Base", justify="center")

        for key, name in units:
            table.add_row(key, name, "[green]*[/green]" if key == base else "")

        self._con.print(table)

    def category_list(self, rows: list[tuple[str, str, int]]) -> None:
        """Print a table of ``(category, base unit, unit count)`` rows."""
        table = Table(title="Categories")
        table.add_column("Category", style="cyan")
        table.add_column("Base unit")
        table.add_column("Units", justify="right")

        for category, base, count in rows:
            table.add_row(category, base, str(count))

        self._con.print(table)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._con.print(message)
