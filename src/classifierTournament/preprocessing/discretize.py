"""
Unsupervised discretization for classifierTournament.

This module converts numeric attributes into nominal ones by binning. Cut
points are learned from the training data and applied unchanged afterwards.
"""

from typing import Dict, List, Sequence
import numpy as np
import pandas as pd

from ..core.base import AttributeKind, BaseTransform
from ..data.dataset import Attribute
from ..utils.logger import get_logger

SINGLE_BIN_LABEL = "'All'"


class Discretizer(BaseTransform):
    """Equal-width or equal-frequency binning of numeric attributes."""
    
    def __init__(self, bins: int = 10, strategy: str = "uniform"):
        """
        Args:
            bins: Number of intervals per attribute
            strategy: "uniform" for equal-width, "quantile" for equal-frequency
        """
        super().__init__()
        if bins < 1:
            raise ValueError(f"bins must be positive, got {bins}")
        if strategy not in ("uniform", "quantile"):
            raise ValueError(f"Unknown discretization strategy: {strategy}")
        self.bins = bins
        self.strategy = strategy
        self.logger = get_logger("Discretizer")
        self.cut_points_: Dict[str, np.ndarray] = {}
        
    def fit(self, X: pd.DataFrame, attributes: Sequence[Attribute]) -> 'Discretizer':
        """Learn cut points for every numeric attribute."""
        self.cut_points_ = {}
        output: List[Attribute] = []
        
        for attribute in attributes:
            if not attribute.is_numeric:
                output.append(attribute)
                continue
            column = X[attribute.name].to_numpy(dtype=float)
            column = column[~np.isnan(column)]
            cuts = self._find_cut_points(column)
            self.cut_points_[attribute.name] = cuts
            output.append(Attribute(attribute.name, AttributeKind.NOMINAL, self.bin_labels(cuts)))
        
        self.input_attributes_ = tuple(attributes)
        self.output_attributes_ = tuple(output)
        self.is_fitted = True
        self.logger.debug(f"Learned cut points for {len(self.cut_points_)} numeric attributes")
        return self
        
    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        """Replace numeric values by the index of the interval containing them."""
        self._check_fitted()
        
        X_binned = X.copy()
        for name, cuts in self.cut_points_.items():
            column = X[name].to_numpy(dtype=float)
            # Interval upper bounds are inclusive: count cut points strictly below the value
            binned = np.searchsorted(cuts, column, side='left').astype(float)
            binned[np.isnan(column)] = np.nan
            X_binned[name] = binned
        return X_binned
    
    def _find_cut_points(self, column: np.ndarray) -> np.ndarray:
        if len(column) == 0:
            return np.array([])
        minimum, maximum = column.min(), column.max()
        if maximum <= minimum or self.bins == 1:
            return np.array([])
        
        if self.strategy == "uniform":
            cuts = np.linspace(minimum, maximum, self.bins + 1)[1:-1]
        else:
            cuts = np.quantile(column, np.linspace(0, 1, self.bins + 1)[1:-1])
            cuts = np.unique(cuts[(cuts > minimum) & (cuts < maximum)])
        return cuts
    
    @staticmethod
    def bin_labels(cuts: np.ndarray) -> tuple:
        """Interval labels such as ``(-inf-1.5]``, ``(1.5-2.5]``, ``(2.5-inf)``."""
        if len(cuts) == 0:
            return (SINGLE_BIN_LABEL,)
        bounds = ["-inf"] + [f"{cut:.6g}" for cut in cuts] + ["inf"]
        labels = [f"({low}-{high}]" for low, high in zip(bounds[:-2], bounds[1:-1])]
        labels.append(f"({bounds[-2]}-inf)")
        return tuple(labels)
