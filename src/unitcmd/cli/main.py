"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from unitcmd.models.config import AppSettings
from unitcmd.output.formatter import OutputFormatter
from unitcmd.units import table
from unitcmd.units.errors import InvalidArgumentError, UnknownCategoryError, UnknownUnitError
from unitcmd.units.models import Category

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    settings: AppSettings = dataclasses.field(default_factory=AppSettings)
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else (self.output_format or self.settings.output_format)
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter


def configure_logging(verbose: bool) -> None:
    """Route ``unitcmd`` log records through Rich on stderr."""
    pkg_logger = logging.getLogger("unitcmd")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        pkg_logger.addHandler(handler)


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert values between units of length, area, temperature and weight."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj = AppContext(
        output_format=output_format,
        quiet=quiet,
        verbose=verbose,
    )


# ---------------------------------------------------------------------------
# Register subcommands (lazy imports keep startup fast)
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from unitcmd.cli.convert import convert_cmd
    from unitcmd.cli.tui import tui_cmd
    from unitcmd.cli.units import categories_cmd, units_cmd

    cli.add_command(convert_cmd)
    cli.add_command(units_cmd)
    cli.add_command(categories_cmd)
    cli.add_command(tui_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    try:
        # Without standalone mode, ctx.exit(code) comes back as a return value.
        rv = cli(args=argv, standalone_mode=False)
        if isinstance(rv, int) and rv != 0:
            raise SystemExit(rv)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.exceptions.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except SystemExit:
        raise
    except Exception as exc:
        app_ctx = _extract_app_ctx()
        formatter = app_ctx.formatter if app_ctx else OutputFormatter()
        cmd_name = _get_command_name()

        if isinstance(exc, InvalidArgumentError):
            _handle_invalid_argument(exc, formatter, cmd_name)
            raise SystemExit(1) from exc

        logger.debug("Unhandled error in %s", cmd_name, exc_info=True)
        formatter.output_error(
            code=type(exc).__name__,
            message=str(exc),
            command=cmd_name,
        )
        raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def _extract_app_ctx() -> AppContext | None:
    """Try to extract AppContext from the current Click context."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        if isinstance(ctx.obj, AppContext):
            return ctx.obj
        ctx = ctx.parent
    return None


def _get_command_name() -> str:
    """Reconstruct a dotted command name from the Click context chain."""
    ctx = click.get_current_context(silent=True)
    parts: list[str] = []
    while ctx is not None:
        if ctx.info_name and ctx.info_name not in ("cli", "unitcmd"):
            parts.append(ctx.info_name)
        ctx = ctx.parent
    return ".".join(reversed(parts)) or "unknown"


def _handle_invalid_argument(
    exc: InvalidArgumentError,
    formatter: OutputFormatter,
    cmd_name: str,
) -> None:
    """Show a rejected value, unit or category with the valid choices."""
    extra: dict[str, str] = {}
    hint = ""
    if isinstance(exc, UnknownCategoryError):
        extra["category"] = exc.category
        hint = "Valid categories: " + ", ".join(c.value for c in Category)
    elif isinstance(exc, UnknownUnitError):
        extra["unit"] = exc.unit
        if exc.category is not None:
            extra["category"] = exc.category
            hint = "Valid units: " + ", ".join(table.unit_keys(Category(exc.category)))
        else:
            hint = "Run 'unitcmd units' to list valid units."

    if formatter.format == "json":
        formatter.output_error(code=exc.code, message=str(exc), command=cmd_name, **extra)
        return

    formatter.rich.error(str(exc))
    if hint:
        formatter.rich.info(f"[dim]{hint}[/dim]")
