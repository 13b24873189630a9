"""Shared CLI decorator that propagates global options to leaf commands."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

import click

from unitcmd.units.errors import InvalidArgumentError

if TYPE_CHECKING:
    from unitcmd.cli.main import AppContext


def global_options(f: Any) -> Any:
    """Add global CLI options to a leaf command.

    Allows ``--format``, ``--quiet`` and ``--verbose`` to be specified
    **after** the subcommand name (e.g. ``unitcmd convert 1 mile meter
    --format json``).  Command-level values override the root-group values
    stored in :class:`AppContext`.

    Rejected arguments (:class:`InvalidArgumentError`) are reported through
    the command's formatter and end the command with exit status 1.
    """

    @click.option(
        "--verbose",
        "local_verbose",
        is_flag=True,
        default=False,
        help="Enable verbose logging",
    )
    @click.option(
        "--quiet",
        "local_quiet",
        is_flag=True,
        default=False,
        help="Suppress normal output",
    )
    @click.option(
        "--format",
        "local_output_format",
        type=click.Choice(["rich", "json", "quiet"]),
        default=None,
        help="Output format (default: auto-detect)",
    )
    @click.pass_obj
    def wrapper(app_ctx: AppContext, /, **kwargs: Any) -> Any:
        local_output_format: str | None = kwargs.pop("local_output_format", None)
        local_quiet: bool = kwargs.pop("local_quiet", False)
        local_verbose: bool = kwargs.pop("local_verbose", False)

        if local_output_format is not None:
            app_ctx.output_format = local_output_format
            app_ctx._formatter = None  # reset cached formatter
        if local_quiet:
            app_ctx.quiet = True
            app_ctx._formatter = None
        if local_verbose:
            from unitcmd.cli.main import configure_logging

            app_ctx.verbose = True
            configure_logging(True)

        try:
            return f(app_ctx, **kwargs)
        except InvalidArgumentError as exc:
            from unitcmd.cli.main import _get_command_name, _handle_invalid_argument

            _handle_invalid_argument(exc, app_ctx.formatter, _get_command_name())
            click.get_current_context().exit(1)

    functools.update_wrapper(wrapper, f)
    return wrapper
