"""Interactive terminal converter."""

from __future__ import annotations

from unitcmd.tui.app import ConverterApp, HelpScreen

__all__ = ["ConverterApp", "HelpScreen"]
