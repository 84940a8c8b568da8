"""
Min/max normalization for classifierTournament.

Rescales every numeric attribute into [0, 1] using the range observed while
fitting. Later data is rescaled with the same range and may fall outside it.
"""

from typing import Dict, Sequence
import numpy as np
import pandas as pd

from ..core.base import BaseTransform
from ..data.dataset import Attribute


class Normalizer(BaseTransform):
    """Linear rescaling of numeric attributes with a learned min/max."""
    
    def __init__(self):
        super().__init__()
        self.minimums_: Dict[str, float] = {}
        self.maximums_: Dict[str, float] = {}
        
    def fit(self, X: pd.DataFrame, attributes: Sequence[Attribute]) -> 'Normalizer':
        """Learn per-attribute minimum and maximum from the training data."""
        self.minimums_ = {}
        self.maximums_ = {}
        for attribute in attributes:
            if not attribute.is_numeric:
                continue
            column = X[attribute.name].to_numpy(dtype=float)
            self.minimums_[attribute.name] = float(np.nanmin(column)) if len(column) else np.nan
            self.maximums_[attribute.name] = float(np.nanmax(column)) if len(column) else np.nan
        
        self.input_attributes_ = tuple(attributes)
        self.output_attributes_ = tuple(attributes)
        self.is_fitted = True
        return self
        
    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        """Rescale numeric columns; nominal columns pass through unchanged."""
        self._check_fitted()
        
        X_normalized = X.copy()
        for name, minimum in self.minimums_.items():
            maximum = self.maximums_[name]
            if np.isnan(minimum) or maximum == minimum:
                # Constant (or unseen) attributes collapse to zero
                X_normalized[name] = 0.0
            else:
                X_normalized[name] = (X[name].astype(float) - minimum) / (maximum - minimum)
        return X_normalized
