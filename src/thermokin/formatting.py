"""Fixed and scientific rendering of calculation results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from thermokin.errors import InvalidInput
from thermokin.models import Quantity

# auto mode switches to scientific notation outside [SCIENTIFIC_BELOW, SCIENTIFIC_FROM)
SCIENTIFIC_FROM = 1000.0
SCIENTIFIC_BELOW = 0.001


class NotationMode(str, Enum):
    FIXED = "fixed"
    SCIENTIFIC = "scientific"
    AUTO = "auto"


def _coerce_mode(mode: NotationMode | str) -> NotationMode:
    try:
        return NotationMode(mode)
    except ValueError:
        raise InvalidInput(f"Unknown notation mode: {mode!r}") from None


def _special_token(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    return None


def format_fixed(value: float, precision: int) -> str:
    # str.format rounds the exact binary value, ties to even
    return f"{value:.{precision}f}"


def format_scientific(value: float, precision: int) -> str:
    if value == 0:
        return "0"
    mantissa, exponent = f"{value:.{precision}e}".split("e")
    return f"{mantissa}×10^{int(exponent)}"


def uses_scientific(value: float) -> bool:
    magnitude = abs(value)
    return magnitude >= SCIENTIFIC_FROM or 0 < magnitude < SCIENTIFIC_BELOW


@dataclass(frozen=True)
class FormatPolicy:
    """How a number is rendered: decimal places and notation."""

    precision: int = 2
    mode: NotationMode = NotationMode.AUTO

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise InvalidInput(f"precision must be an integer, got {self.precision!r}")
        if self.precision < 0:
            raise InvalidInput(f"precision must be non-negative, got {self.precision}")
        object.__setattr__(self, "mode", _coerce_mode(self.mode))

    def format(self, value: float) -> str:
        value = float(value)
        token = _special_token(value)
        if token is not None:
            return token
        mode = self.mode
        if mode is NotationMode.AUTO:
            mode = NotationMode.SCIENTIFIC if uses_scientific(value) else NotationMode.FIXED
        if mode is NotationMode.SCIENTIFIC:
            return format_scientific(value, self.precision)
        return format_fixed(value, self.precision)


def format_number(
    value: float,
    precision: int = 2,
    mode: NotationMode | str = NotationMode.AUTO,
) -> str:
    return FormatPolicy(precision, mode).format(value)


def format_quantity(quantity: Quantity, policy: FormatPolicy | None = None) -> str:
    text = (policy or FormatPolicy()).format(quantity.value)
    return f"{text} {quantity.unit}" if quantity.unit else text
