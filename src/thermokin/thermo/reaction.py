"""Reaction enthalpy, entropy, Gibbs energy and equilibrium constant."""

from __future__ import annotations

import numpy as np

from thermokin.constants import (
    J_PER_KJ,
    R_GAS,
    UNIT_DIMENSIONLESS,
    UNIT_ENERGY,
    UNIT_ENTROPY,
)
from thermokin.models import Quantity, Reaction
from thermokin.stoichiometry import Property, evaluate
from thermokin.substances import SubstanceTable
from thermokin.validation import check_temperature


def reaction_enthalpy(reaction: Reaction, table: SubstanceTable) -> Quantity:
    """ΔH_rxn = Σ ΔHf°(products) - Σ ΔHf°(reactants), in kJ/mol."""
    return Quantity(evaluate(reaction, table, Property.DELTA_HF), UNIT_ENERGY)


def reaction_entropy(reaction: Reaction, table: SubstanceTable) -> Quantity:
    """ΔS_rxn = Σ S°(products) - Σ S°(reactants), in J/(mol·K)."""
    return Quantity(evaluate(reaction, table, Property.ENTROPY), UNIT_ENTROPY)


def reaction_gibbs_from_formation(reaction: Reaction, table: SubstanceTable) -> Quantity:
    """ΔG_rxn from tabulated ΔGf° values (valid at 298.15 K only)."""
    return Quantity(evaluate(reaction, table, Property.DELTA_GF), UNIT_ENERGY)


def gibbs_energy(delta_h: float, delta_s: float, temperature: float) -> Quantity:
    """ΔG = ΔH - T·ΔS with ΔH in kJ/mol and ΔS in J/(mol·K)."""
    check_temperature(temperature)
    return Quantity(delta_h - temperature * (delta_s / J_PER_KJ), UNIT_ENERGY)


def equilibrium_constant(delta_g: float, temperature: float) -> Quantity:
    """K = exp(-ΔG / RT) with ΔG in kJ/mol.

    Extreme ΔG/T ratios overflow to ``inf`` or underflow to ``0.0``; both are
    returned unchanged.
    """
    check_temperature(temperature)
    with np.errstate(over="ignore", under="ignore"):
        k = np.exp(-delta_g * J_PER_KJ / (R_GAS * temperature))
    return Quantity(float(k), UNIT_DIMENSIONLESS)
