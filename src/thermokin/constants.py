"""Physical constants and fixed unit labels."""

from __future__ import annotations

from scipy import constants as _codata

R_GAS = 8.314  # J/(mol·K)
K_BOLTZMANN = _codata.k  # J/K
H_PLANCK = _codata.h  # J·s

T_STANDARD = 298.15  # K

J_PER_KJ = 1000.0

UNIT_ENERGY = "kJ/mol"
UNIT_ENTROPY = "J/(mol·K)"
UNIT_RATE = "s⁻¹"
UNIT_TIME = "s"
UNIT_CONCENTRATION = "mol/L"
UNIT_DIMENSIONLESS = ""
