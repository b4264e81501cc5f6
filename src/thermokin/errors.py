"""Exceptions raised by the calculation engine."""

from __future__ import annotations


class ThermoKinError(Exception):
    """Base class for every engine error."""


class UnknownSubstance(ThermoKinError, LookupError):
    def __init__(self, formula: str, side: str | None = None):
        self.formula = formula
        self.side = side
        where = f" ({side})" if side else ""
        super().__init__(f"No data found for substance{where}: {formula}")


class InvalidTemperature(ThermoKinError, ValueError):
    def __init__(self, temperature: float):
        self.temperature = temperature
        super().__init__(f"Temperature must be positive (K), got {temperature}")


class InvalidInput(ThermoKinError, ValueError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class UnsupportedOrder(ThermoKinError, ValueError):
    def __init__(self, order: object):
        self.order = order
        super().__init__(f"Unsupported reaction order: {order}")
