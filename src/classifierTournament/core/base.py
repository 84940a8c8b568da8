"""
Base classes and interfaces for classifierTournament.

This module defines the closed set of transform and algorithm kinds, the
candidate configuration record, and the interfaces that transforms and base
models implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence, Tuple
import pandas as pd
import numpy as np
from dataclasses import dataclass, field
from enum import Enum


class AttributeKind(Enum):
    """Enumeration of supported attribute types."""
    NUMERIC = "numeric"
    NOMINAL = "nominal"


class TransformKind(Enum):
    """Enumeration of preprocessing transforms a pipeline can chain."""
    NOMINAL_TO_BINARY = "nominal_to_binary"
    DISCRETIZE = "discretize"
    NORMALIZE = "normalize"


class AlgorithmKind(Enum):
    """Enumeration of base algorithms available to the tournament."""
    NAIVE_BAYES = "naive_bayes"
    LOGISTIC = "logistic"
    KNN = "knn"
    DECISION_TREE = "decision_tree"
    RANDOM_TREE = "random_tree"
    PRUNED_TREE = "pruned_tree"
    SVM = "svm"
    NEURAL_NETWORK = "neural_network"


# Order in which chained transforms are applied; NominalToBinary runs first so
# later steps also see its indicator columns.
TRANSFORM_ORDER: Tuple[TransformKind, ...] = (
    TransformKind.NOMINAL_TO_BINARY,
    TransformKind.DISCRETIZE,
    TransformKind.NORMALIZE,
)

MAX_PREPROCESSING_STEPS = 2


@dataclass(frozen=True)
class CandidateConfig:
    """Configuration for one named tournament candidate."""
    name: str
    base_algorithm: AlgorithmKind
    preprocessing_steps: Tuple[TransformKind, ...] = ()
    hyperparameters: Dict[str, Any] = field(default_factory=dict, hash=False)
    
    def __post_init__(self):
        steps = tuple(self.preprocessing_steps)
        if len(steps) > MAX_PREPROCESSING_STEPS:
            raise ValueError(
                f"Candidate '{self.name}' has {len(steps)} preprocessing steps; "
                f"at most {MAX_PREPROCESSING_STEPS} are supported"
            )
        if len(set(steps)) != len(steps):
            raise ValueError(f"Candidate '{self.name}' repeats a preprocessing step")
        object.__setattr__(self, "preprocessing_steps", steps)
        object.__setattr__(self, "hyperparameters", dict(self.hyperparameters))


class BaseTransform(ABC):
    """Base class for deterministic attribute transforms.
    
    A transform learns its parameters from a training fold in ``fit`` and
    re-applies them, without refitting, in ``transform``.
    """
    
    def __init__(self):
        self.is_fitted = False
        self.input_attributes_ = None
        self.output_attributes_ = None
        
    @abstractmethod
    def fit(self, X: pd.DataFrame, attributes: Sequence['Attribute']) -> 'BaseTransform':
        """Learn transform parameters from the training data."""
        pass
        
    @abstractmethod
    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        """Apply the learned parameters to new data."""
        pass
        
    def fit_transform(self, X: pd.DataFrame, attributes: Sequence['Attribute']) -> pd.DataFrame:
        """Fit and transform the data."""
        return self.fit(X, attributes).transform(X)
    
    def _check_fitted(self) -> None:
        if not self.is_fitted:
            raise ValueError(f"{type(self).__name__} must be fitted before transforming")


class BaseModel(ABC):
    """Base class for all trainable base algorithms."""
    
    @abstractmethod
    def fit(
        self,
        X: pd.DataFrame,
        y: np.ndarray,
        attributes: Optional[Sequence['Attribute']] = None,
        n_classes: Optional[int] = None
    ) -> 'BaseModel':
        """Fit the model to the training data."""
        pass
        
    @abstractmethod
    def predict(self, X: pd.DataFrame) -> np.ndarray:
        """Predict class indices for new data."""
        pass
