"""
Preprocessing modules for classifierTournament.

This module contains the attribute transforms and the pipeline that chains
them in front of a base model.
"""

from .normalize import Normalizer
from .discretize import Discretizer
from .nominal_to_binary import NominalToBinary
from .pipeline import PreprocessingPipeline, order_steps

__all__ = [
    "Normalizer",
    "Discretizer",
    "NominalToBinary",
    "PreprocessingPipeline",
    "order_steps",
]
