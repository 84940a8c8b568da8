"""
Base model implementation for classifierTournament.

This module contains the scikit-learn backed model class that all base
algorithms inherit from.
"""

from typing import Any, Optional, Sequence
import pandas as pd
import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin

from ..core.base import BaseModel as TournamentBaseModel
from ..data.dataset import Attribute


class BaseModel(TournamentBaseModel, ClassifierMixin, BaseEstimator):
    """Base model class wrapping one scikit-learn estimator.
    
    Subclasses only decide which estimator to build; fitting, prediction and
    the majority-class shortcut for single-class or featureless data live here.
    """
    
    def fit(
        self,
        X: pd.DataFrame,
        y: np.ndarray,
        attributes: Optional[Sequence[Attribute]] = None,
        n_classes: Optional[int] = None
    ) -> 'BaseModel':
        """Fit the model to the training data."""
        y = np.asarray(y).astype(int)
        if len(y) == 0:
            raise ValueError(f"{type(self).__name__} cannot be trained on zero instances")
        
        self.classes_ = np.unique(y)
        self.n_features_in_ = X.shape[1]
        self.feature_names_ = list(X.columns) if hasattr(X, 'columns') else None
        
        if len(self.classes_) == 1 or X.shape[1] == 0:
            # Nothing to learn from: every prediction is the majority class
            self.estimator_ = None
            self.majority_class_ = int(np.bincount(y).argmax())
            return self
        
        self.estimator_ = self._build_estimator(X, y, attributes, n_classes)
        self.estimator_.fit(self._prepare(X), y)
        return self
        
    def predict(self, X: pd.DataFrame) -> np.ndarray:
        """Make predictions on new data."""
        if not hasattr(self, 'classes_'):
            raise ValueError("Model must be fitted before making predictions")
        if self.estimator_ is None:
            return np.full(len(X), self.majority_class_, dtype=int)
        return np.asarray(self.estimator_.predict(self._prepare(X))).astype(int)
    
    def _prepare(self, X: pd.DataFrame) -> Any:
        """Hook for estimators that need a different input representation."""
        return X
        
    def _build_estimator(
        self,
        X: pd.DataFrame,
        y: np.ndarray,
        attributes: Optional[Sequence[Attribute]],
        n_classes: Optional[int]
    ) -> Any:
        """Return an unfitted scikit-learn estimator."""
        raise NotImplementedError("Subclasses must implement _build_estimator")
