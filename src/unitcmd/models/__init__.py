from __future__ import annotations

from unitcmd.models.config import AppSettings

__all__ = [
    "AppSettings",
]
