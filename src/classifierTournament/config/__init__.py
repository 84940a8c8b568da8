"""
Configuration modules for classifierTournament.

This module contains default settings and the tournament candidate registry.
"""

from .default_config import DEFAULT_CONFIG
from .model_configs import MODEL_CONFIGS, build_candidate_registry

__all__ = [
    "DEFAULT_CONFIG",
    "MODEL_CONFIGS",
    "build_candidate_registry",
]
