"""
Naive Bayes classifier implementation.

Nominal inputs (for example the output of Discretize) are modelled with
per-value counts and Laplace smoothing; if any numeric input remains, a
Gaussian model is used for all inputs instead.
"""

from typing import Optional, Sequence
import numpy as np
import pandas as pd
from sklearn.naive_bayes import CategoricalNB, GaussianNB

from ..data.dataset import Attribute
from .base_model import BaseModel


class NaiveBayesClassifier(BaseModel):
    """Naive Bayes classifier wrapper."""
    
    def __init__(self, alpha: float = 1.0, var_smoothing: float = 1e-9):
        """
        Args:
            alpha: Additive smoothing for value counts of nominal inputs
            var_smoothing: Variance smoothing for the Gaussian fallback
        """
        self.alpha = alpha
        self.var_smoothing = var_smoothing
        
    def _build_estimator(self, X, y, attributes, n_classes):
        self.categorical_ = bool(attributes) and all(a.is_nominal for a in attributes)
        if self.categorical_:
            # Domain sizes let unseen-but-declared values be scored at predict time
            return CategoricalNB(
                alpha=self.alpha,
                min_categories=np.array([len(a.domain) for a in attributes])
            )
        return GaussianNB(var_smoothing=self.var_smoothing)
    
    def _prepare(self, X: pd.DataFrame):
        if getattr(self, 'categorical_', False):
            return X.to_numpy(dtype=float).astype(int)
        return X
