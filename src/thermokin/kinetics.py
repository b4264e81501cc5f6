"""Rate constants, activation energies and half-lives."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from thermokin.constants import (
    H_PLANCK,
    J_PER_KJ,
    K_BOLTZMANN,
    R_GAS,
    UNIT_CONCENTRATION,
    UNIT_ENERGY,
    UNIT_RATE,
    UNIT_TIME,
)
from thermokin.errors import InvalidInput, UnsupportedOrder
from thermokin.models import Quantity
from thermokin.validation import check_positive, check_temperature

SUPPORTED_ORDERS = (0, 1, 2)


def _exp(exponent: float) -> float:
    with np.errstate(over="ignore", under="ignore"):
        return float(np.exp(exponent))


@dataclass(frozen=True)
class ArrheniusKinetics:
    pre_exponential: float
    activation_energy: float  # kJ/mol

    def rate_constant(self, temperature: float) -> float:
        check_temperature(temperature)
        return self.pre_exponential * _exp(
            -self.activation_energy * J_PER_KJ / (R_GAS * temperature)
        )


@dataclass(frozen=True)
class EyringKinetics:
    """Transition-state theory rate constant.

    k = (kB·T / h) · exp(-ΔG‡ / RT), where ΔG‡ = ΔH‡ - T·ΔS‡
    """

    activation_enthalpy: float  # kJ/mol
    activation_entropy: float  # J/(mol·K)

    def activation_gibbs_energy(self, temperature: float) -> float:
        return self.activation_enthalpy - temperature * (self.activation_entropy / J_PER_KJ)

    def rate_constant(self, temperature: float) -> float:
        check_temperature(temperature)
        frequency = K_BOLTZMANN * temperature / H_PLANCK
        delta_g = self.activation_gibbs_energy(temperature)
        return frequency * _exp(-delta_g * J_PER_KJ / (R_GAS * temperature))


def rate_constant_arrhenius(
    pre_exponential: float,
    activation_energy: float,
    temperature: float,
    unit: str = UNIT_RATE,
) -> Quantity:
    """k = A·exp(-Ea/RT); ``unit`` is the unit of ``pre_exponential``."""
    kinetics = ArrheniusKinetics(pre_exponential, activation_energy)
    return Quantity(kinetics.rate_constant(temperature), unit)


def rate_constant_eyring(
    activation_enthalpy: float,
    activation_entropy: float,
    temperature: float,
) -> Quantity:
    kinetics = EyringKinetics(activation_enthalpy, activation_entropy)
    return Quantity(kinetics.rate_constant(temperature), UNIT_RATE)


def activation_energy(k1: float, t1: float, k2: float, t2: float) -> Quantity:
    """Two-point Arrhenius estimate: Ea = R·ln(k2/k1) / (1/T1 - 1/T2)."""
    check_positive(k1, "k1")
    check_positive(k2, "k2")
    check_positive(t1, "T1")
    check_positive(t2, "T2")
    denominator = 1.0 / t1 - 1.0 / t2
    # distinct temperatures can still have equal reciprocals
    if denominator == 0:
        raise InvalidInput("T1 and T2 must differ")
    with np.errstate(divide="ignore"):
        log_ratio = float(np.log(k2 / k1))
    ea = R_GAS * log_ratio / denominator
    return Quantity(ea / J_PER_KJ, UNIT_ENERGY)


def _check_order(order: int) -> int:
    if isinstance(order, bool) or order not in SUPPORTED_ORDERS:
        raise UnsupportedOrder(order)
    return int(order)


def half_life(k: float, order: int, initial_conc: float = 1.0) -> Quantity:
    """Half-life of an nth-order reaction, n in {0, 1, 2}.

    Zero order:   t½ = [A]0 / (2k)
    First order:  t½ = ln(2) / k
    Second order: t½ = 1 / (k·[A]0)
    """
    order = _check_order(order)
    check_positive(k, "k")
    if order == 0:
        check_positive(initial_conc, "initial_conc")
        value = initial_conc / (2.0 * k)
    elif order == 1:
        value = float(np.log(2.0)) / k
    else:
        check_positive(initial_conc, "initial_conc")
        # k·[A]0 may underflow to zero; dividing in turn gives inf instead
        value = (1.0 / k) / initial_conc
    return Quantity(value, UNIT_TIME)


def concentration_at(k: float, order: int, initial_conc: float, time: float) -> Quantity:
    """Reactant concentration after ``time`` seconds from the integrated rate law."""
    order = _check_order(order)
    check_positive(k, "k")
    check_positive(initial_conc, "initial_conc")
    if not time >= 0:
        raise InvalidInput(f"time must be non-negative, got {time}")
    if order == 0:
        # the reactant is exhausted at t = [A]0 / k
        value = max(initial_conc - k * time, 0.0)
    elif order == 1:
        value = initial_conc * _exp(-k * time)
    else:
        value = initial_conc / (1.0 + k * initial_conc * time)
    return Quantity(value, UNIT_CONCENTRATION)
