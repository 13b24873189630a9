from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from unitcmd.output.json_output import format_json_error, format_json_response
from unitcmd.output.rich_output import RichOutput

if TYPE_CHECKING:
    from io import TextIOBase


class OutputFormatter:
    """Unified output formatter that auto-detects JSON vs Rich output.

    Selection logic:

    * If *force_format* is provided, use it unconditionally.
    * Otherwise, if *stream* (default ``sys.stdout``) is a TTY, use ``"rich"``.
    * If the stream is **not** a TTY (piped / redirected), use ``"json"``.

    When the format is ``"quiet"``, a :class:`rich.console.Console` writing to
    *stderr* is used so that normal stdout stays empty.
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
    ) -> None:
        self._stream = stream or sys.stdout
        if force_format is not None:
            self._format = force_format
        elif hasattr(self._stream, "isatty") and self._stream.isatty():
            self._format = "rich"
        else:
            self._format = "json"

        if self._format == "quiet":
            self._console = Console(stderr=True)
        else:
            self._console = Console(file=self._stream)

        self._rich = RichOutput(self._console)

    @property
    def format(self) -> str:  # noqa: A003
        """Return the active output format (``"rich"``, ``"json"``, or ``"quiet"``)."""
        return self._format

    @property
    def rich(self) -> RichOutput:
        """Return the underlying :class:`RichOutput` instance."""
        return self._rich

    def output(self, data: Any, *, command: str) -> None:
        """Write *data* as a JSON envelope.

        Commands render Rich output through :attr:`rich` and call this only
        in JSON mode.
        """
        self._stream.write(format_json_response(data=data, command=command) + "\n")

    def output_error(self, *, code: str, message: str, command: str, **extra: Any) -> None:
        """Emit an error using the current format.

        * **json**: writes :func:`format_json_error` to the stream.
        * **rich** / **quiet**: prints via :meth:`RichOutput.error`.
        """
        if self._format == "json":
            self._stream.write(
                format_json_error(code=code, message=message, command=command, **extra) + "\n"
            )
        else:
            self._rich.error(message)
