"""
Data handling modules for classifierTournament.

This module contains the dataset model, loading, and validation utilities.
"""

from .dataset import MISSING, Attribute, Dataset, is_missing
from .loader import DataLoader
from .validator import DataValidator

__all__ = [
    "MISSING",
    "Attribute",
    "Dataset",
    "is_missing",
    "DataLoader",
    "DataValidator",
]
