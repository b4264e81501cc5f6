"""ThermoKin core package."""

from thermokin.errors import (
    InvalidInput,
    InvalidTemperature,
    ThermoKinError,
    UnknownSubstance,
    UnsupportedOrder,
)
from thermokin.formatting import FormatPolicy, NotationMode, format_number, format_quantity
from thermokin.kinetics import (
    ArrheniusKinetics,
    EyringKinetics,
    activation_energy,
    concentration_at,
    half_life,
    rate_constant_arrhenius,
    rate_constant_eyring,
)
from thermokin.models import Quantity, Reaction, SubstanceRecord
from thermokin.reference import default_table, load_reference_table
from thermokin.stoichiometry import Property, evaluate
from thermokin.substances import SubstanceTable
from thermokin.thermo import (
    analyze_reaction,
    detailed_analysis,
    equilibrium_constant,
    gibbs_energy,
    reaction_enthalpy,
    reaction_entropy,
)

__all__ = [
    "ArrheniusKinetics",
    "EyringKinetics",
    "FormatPolicy",
    "InvalidInput",
    "InvalidTemperature",
    "NotationMode",
    "Property",
    "Quantity",
    "Reaction",
    "SubstanceRecord",
    "SubstanceTable",
    "ThermoKinError",
    "UnknownSubstance",
    "UnsupportedOrder",
    "activation_energy",
    "analyze_reaction",
    "concentration_at",
    "default_table",
    "detailed_analysis",
    "equilibrium_constant",
    "evaluate",
    "format_number",
    "format_quantity",
    "gibbs_energy",
    "half_life",
    "load_reference_table",
    "rate_constant_arrhenius",
    "rate_constant_eyring",
    "reaction_enthalpy",
    "reaction_entropy",
]
