"""Temperature scale helpers relative to the Kelvin reference scale."""

from __future__ import annotations

KELVIN_OFFSET = 273.15


def celsius_to_kelvin(c: float) -> float:
    """Convert Celsius to Kelvin."""
    return c + KELVIN_OFFSET


def kelvin_to_celsius(k: float) -> float:
    """Convert Kelvin to Celsius."""
    return k - KELVIN_OFFSET


def fahrenheit_to_kelvin(f: float) -> float:
    """Convert Fahrenheit to Kelvin."""
    return (f - 32.0) * 5.0 / 9.0 + KELVIN_OFFSET


def kelvin_to_fahrenheit(k: float) -> float:
    """Convert Kelvin to Fahrenheit."""
    return (k - KELVIN_OFFSET) * 9.0 / 5.0 + 32.0


def identity(k: float) -> float:
    return k
