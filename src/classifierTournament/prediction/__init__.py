"""
Prediction modules for classifierTournament.
"""

from .encoder import NominalRaw, NumericRaw, PredictionEncoder, RawValue

__all__ = [
    "NominalRaw",
    "NumericRaw",
    "PredictionEncoder",
    "RawValue",
]
