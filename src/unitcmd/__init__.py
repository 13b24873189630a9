"""Table-driven unit conversion for length, area, temperature and weight."""

from __future__ import annotations

__version__ = "0.1.0"
