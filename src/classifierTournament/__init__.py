"""
classifierTournament v1.0

Compares classification algorithms on one tabular dataset with stratified
10-fold cross-validation, keeps the best one, and predicts class labels for
new inputs with it.
"""

__version__ = "1.0.0"

# Core imports; must precede the other subpackages
from .core.base import AttributeKind, TransformKind, AlgorithmKind, CandidateConfig
from .core.exceptions import (
    TournamentError, FormatError, NoDataError, NoModelError,
    PredictionInputError, UnknownCategoryError, InvalidNumberError
)
from .core.results import EvaluationResult, CandidateFailure, TournamentState
from .core.cv_evaluator import StratifiedKFoldEvaluator
from .core.tournament import TournamentRunner, select_winner
from .core.engine import TournamentEngine, EngineState, LoadSummary

# Data handling
from .data.dataset import MISSING, Attribute, Dataset
from .data.loader import DataLoader

# Preprocessing
from .preprocessing.pipeline import PreprocessingPipeline

# Prediction
from .prediction.encoder import PredictionEncoder, NominalRaw, NumericRaw

# Models
from .models import ModelFactory

# Configuration and reporting
from .config.model_configs import build_candidate_registry
from .utils.config import Config, ConfigManager
from .evaluation.reporter import ResultsReporter

__all__ = [
    # Core
    "AttributeKind",
    "TransformKind",
    "AlgorithmKind",
    "CandidateConfig",
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
    
    # Data
    "MISSING",
    "Attribute",
    "Dataset",
    "DataLoader",
    
    # Preprocessing and prediction
    "PreprocessingPipeline",
    "PredictionEncoder",
    "NominalRaw",
    "NumericRaw",
    
    # Models and configuration
    "ModelFactory",
    "build_candidate_registry",
    "Config",
    "ConfigManager",
    "ResultsReporter",
]
