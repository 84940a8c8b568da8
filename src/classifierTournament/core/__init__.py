"""
Core functionality for classifierTournament.

This module contains the candidate model, the cross-validation evaluator,
the tournament runner and the engine facade.
"""

from .base import (
    AttributeKind, TransformKind, AlgorithmKind, CandidateConfig, BaseModel, BaseTransform
)
from .exceptions import (
    TournamentError, FormatError, NoDataError, NoModelError,
    PredictionInputError, UnknownCategoryError, InvalidNumberError
)
from .results import EvaluationResult, CandidateFailure, TournamentState
from .cv_evaluator import StratifiedKFoldEvaluator
from .tournament import TournamentRunner, select_winner
from .engine import TournamentEngine, EngineState, LoadSummary

__all__ = [
    "AttributeKind",
    "TransformKind",
    "AlgorithmKind",
    "CandidateConfig",
    "BaseModel",
    "BaseTransform",
    "TournamentError",
    "FormatError",
    "NoDataError",
    "NoModelError",
    "PredictionInputError",
    "UnknownCategoryError",
    "InvalidNumberError",
    "EvaluationResult",
    "CandidateFailure",
    "TournamentState",
    "StratifiedKFoldEvaluator",
    "TournamentRunner",
    "select_winner",
    "TournamentEngine",
    "EngineState",
    "LoadSummary",
]
