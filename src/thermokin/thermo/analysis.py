"""Composite reaction analyses built from the single-quantity calculators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from thermokin.constants import T_STANDARD
from thermokin.models import Quantity, Reaction, SubstanceRecord
from thermokin.substances import SubstanceTable
from thermokin.thermo.reaction import (
    equilibrium_constant,
    gibbs_energy,
    reaction_enthalpy,
    reaction_entropy,
    reaction_gibbs_from_formation,
)


@dataclass(frozen=True)
class ReactionAnalysis:
    """Thermodynamic summary of a reaction at one temperature.

    Attributes:
        reaction: The analysed reaction.
        temperature: Temperature (K).
        enthalpy: ΔH_rxn (kJ/mol).
        entropy: ΔS_rxn (J/(mol·K)).
        gibbs_energy: ΔH - T·ΔS (kJ/mol).
        equilibrium_constant: K from ``gibbs_energy`` (dimensionless).
    """

    reaction: Reaction
    temperature: float
    enthalpy: Quantity
    entropy: Quantity
    gibbs_energy: Quantity
    equilibrium_constant: Quantity

    def to_dict(self) -> dict:
        return {
            "reaction": str(self.reaction),
            "T": self.temperature,
            "delta_H": self.enthalpy.to_dict(),
            "delta_S": self.entropy.to_dict(),
            "delta_G": self.gibbs_energy.to_dict(),
            "K": self.equilibrium_constant.to_dict(),
        }


@dataclass(frozen=True)
class DetailedAnalysis:
    """A :class:`ReactionAnalysis` plus the reference data it was built from."""

    summary: ReactionAnalysis
    gibbs_from_formation: Quantity
    substances: Dict[str, SubstanceRecord]

    def to_dict(self) -> dict:
        data = self.summary.to_dict()
        data["delta_G_formation"] = self.gibbs_from_formation.to_dict()
        data["substances"] = {
            formula: record.to_dict() for formula, record in self.substances.items()
        }
        return data


def analyze_reaction(
    reaction: Reaction,
    table: SubstanceTable,
    temperature: float = T_STANDARD,
) -> ReactionAnalysis:
    enthalpy = reaction_enthalpy(reaction, table)
    entropy = reaction_entropy(reaction, table)
    delta_g = gibbs_energy(enthalpy.value, entropy.value, temperature)
    k = equilibrium_constant(delta_g.value, temperature)
    return ReactionAnalysis(
        reaction=reaction,
        temperature=temperature,
        enthalpy=enthalpy,
        entropy=entropy,
        gibbs_energy=delta_g,
        equilibrium_constant=k,
    )


def detailed_analysis(
    reaction: Reaction,
    table: SubstanceTable,
    temperature: float = T_STANDARD,
) -> DetailedAnalysis:
    summary = analyze_reaction(reaction, table, temperature)
    return DetailedAnalysis(
        summary=summary,
        gibbs_from_formation=reaction_gibbs_from_formation(reaction, table),
        substances={formula: table.lookup(formula) for formula in reaction.formulas()},
    )
