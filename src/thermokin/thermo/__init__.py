from .analysis import DetailedAnalysis, ReactionAnalysis, analyze_reaction, detailed_analysis
from .reaction import (
    equilibrium_constant,
    gibbs_energy,
    reaction_enthalpy,
    reaction_entropy,
    reaction_gibbs_from_formation,
)

__all__ = [
    "DetailedAnalysis",
    "ReactionAnalysis",
    "analyze_reaction",
    "detailed_analysis",
    "equilibrium_constant",
    "gibbs_energy",
    "reaction_enthalpy",
    "reaction_entropy",
    "reaction_gibbs_from_formation",
]
