"""Argument checks shared by the calculators."""

from __future__ import annotations

from thermokin.errors import InvalidInput, InvalidTemperature


def check_temperature(temperature: float) -> float:
    # NaN fails the comparison as well
    if not temperature > 0:
        raise InvalidTemperature(temperature)
    return temperature


def check_positive(value: float, name: str) -> float:
    if not value > 0:
        raise InvalidInput(f"{name} must be positive, got {value}")
    return value
