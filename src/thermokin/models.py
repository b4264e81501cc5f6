"""Data structures for substances, reactions and computed quantities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Tuple, Union

from thermokin.errors import InvalidInput

ReactionSide = Tuple[Tuple[str, float], ...]
SideInput = Union[Mapping[str, float], Iterable[Tuple[str, float]]]


@dataclass(frozen=True)
class SubstanceRecord:
    formula: str
    delta_hf: float  # kJ/mol
    entropy: float  # J/(mol·K)
    delta_gf: float  # kJ/mol

    def to_dict(self) -> dict[str, float]:
        return {"delta_Hf": self.delta_hf, "S": self.entropy, "delta_Gf": self.delta_gf}


@dataclass(frozen=True)
class Quantity:
    value: float
    unit: str

    def __float__(self) -> float:
        return self.value

    def to_dict(self) -> dict[str, object]:
        return {"value": self.value, "unit": self.unit}


def _normalize_side(side: SideInput, label: str) -> ReactionSide:
    pairs = side.items() if isinstance(side, Mapping) else side
    normalized = []
    for formula, coefficient in pairs:
        try:
            value = float(coefficient)
        except (TypeError, ValueError):
            raise InvalidInput(
                f"Coefficient for {label} {formula!r} is not a number: {coefficient!r}"
            ) from None
        normalized.append((str(formula), value))
    return tuple(normalized)


def _format_term(formula: str, coefficient: float) -> str:
    if coefficient == 1.0:
        return formula
    return f"{coefficient:g} {formula}"


@dataclass(frozen=True)
class Reaction:
    """A reaction as ordered reactant and product sides.

    Coefficients are kept exactly as given. Mass and charge balance are not
    checked; an unbalanced reaction still evaluates to a well-defined number.
    """

    reactants: ReactionSide
    products: ReactionSide

    @classmethod
    def from_pairs(cls, reactants: SideInput, products: SideInput) -> Reaction:
        return cls(
            reactants=_normalize_side(reactants, "reactant"),
            products=_normalize_side(products, "product"),
        )

    def formulas(self) -> list[str]:
        seen: dict[str, None] = {}
        for formula, _ in self.reactants + self.products:
            seen.setdefault(formula, None)
        return list(seen)

    def __str__(self) -> str:
        left = " + ".join(_format_term(f, c) for f, c in self.reactants)
        right = " + ".join(_format_term(f, c) for f, c in self.products)
        return f"{left} -> {right}"
