"""Hess's law sums over a reaction's products and reactants."""

from __future__ import annotations

from enum import Enum

from thermokin.errors import UnknownSubstance
from thermokin.models import Reaction, ReactionSide, SubstanceRecord
from thermokin.substances import SubstanceTable


class Property(Enum):
    DELTA_HF = "delta_hf"
    ENTROPY = "entropy"
    DELTA_GF = "delta_gf"

    def of(self, record: SubstanceRecord) -> float:
        return getattr(record, self.value)


def _side_total(side: ReactionSide, table: SubstanceTable, prop: Property, label: str) -> float:
    total = 0.0
    for formula, coefficient in side:
        try:
            record = table.lookup(formula)
        except UnknownSubstance:
            raise UnknownSubstance(formula, side=label) from None
        total += coefficient * prop.of(record)
    return total


def evaluate(reaction: Reaction, table: SubstanceTable, prop: Property) -> float:
    """Return sum(coef * P(product)) - sum(coef * P(reactant)).

    Each side is accumulated separately in input order and the two totals are
    subtracted once, so identical sides cancel to exactly zero.
    """
    products = _side_total(reaction.products, table, prop, "product")
    reactants = _side_total(reaction.reactants, table, prop, "reactant")
    return products - reactants
