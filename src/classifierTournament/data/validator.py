"""
Data validation utilities for classifierTournament.

This module handles dataset validation and quality checks.
"""

import numpy as np

from ..core.exceptions import FormatError
from ..utils.logger import get_logger
from .dataset import Dataset


class DataValidator:
    """Validator for loaded datasets."""
    
    def __init__(self):
        self.logger = get_logger("DataValidator")
        
    def validate(self, dataset: Dataset) -> None:
        """
        Validate a loaded dataset.
        
        Args:
            dataset: Dataset to check
            
        Raises:
            FormatError: If the dataset violates the row invariants
        """
        self._validate_class_attribute(dataset)
        self._validate_rows(dataset)
        
        if dataset.is_empty:
            self.logger.warning(f"Dataset '{dataset.relation}' contains no instances")
        else:
            self._log_class_distribution(dataset)
        
    def _validate_class_attribute(self, dataset: Dataset) -> None:
        """The class attribute must be nominal for classification."""
        if not dataset.class_attribute.is_nominal:
            raise FormatError(
                f"Class attribute '{dataset.class_attribute.name}' must be nominal"
            )
        
    def _validate_rows(self, dataset: Dataset) -> None:
        """Rows must be complete and finite."""
        values = dataset.values
        
        missing_rows = np.where(np.isnan(values).any(axis=1))[0]
        if len(missing_rows) > 0:
            first = missing_rows[0]
            column = int(np.where(np.isnan(values[first]))[0][0])
            raise FormatError(
                f"Row {first + 1} has a missing value for attribute "
                f"'{dataset.schema[column].name}' ({len(missing_rows)} incomplete rows)"
            )
        
        if np.isinf(values).any():
            raise FormatError("Dataset contains infinite values")
        
    def _log_class_distribution(self, dataset: Dataset) -> None:
        """Log instance counts per class label."""
        counts = np.bincount(dataset.class_values(), minlength=dataset.num_classes)
        distribution = ", ".join(
            f"{label}={count}" for label, count in zip(dataset.class_attribute.domain, counts)
        )
        self.logger.info(f"Class distribution: {distribution}")
