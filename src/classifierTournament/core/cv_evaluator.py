"""
Cross-validation evaluator for classifierTournament.

Scores one trainable unit with stratified k-fold cross-validation and then
retrains it on the whole dataset for later predictions.
"""

import time
import warnings
from typing import Union
import numpy as np
from sklearn.base import clone
from sklearn.exceptions import ConvergenceWarning
from sklearn.model_selection import KFold, StratifiedKFold

from ..data.dataset import Dataset
from ..preprocessing.pipeline import PreprocessingPipeline
from ..utils.logger import get_logger
from .results import CandidateFailure, EvaluationResult


class StratifiedKFoldEvaluator:
    """Stratified K-Fold cross-validation evaluator."""
    
    def __init__(self, n_folds: int = 10, random_state: int = 1):
        """
        Args:
            n_folds: Number of folds
            random_state: Seed for the fold shuffle; a fixed seed makes
                repeated runs on the same data reproducible
        """
        self.n_folds = n_folds
        self.random_state = random_state
        self.cv = StratifiedKFold(n_splits=n_folds, shuffle=True, random_state=random_state)
        self.logger = get_logger("StratifiedKFoldEvaluator")
    
    def split(self, y: np.ndarray):
        """
        Return (train, test) index pairs for the class vector ``y``.
        
        When no class has as many members as there are folds, stratification
        is impossible and the rows are shuffled into plain folds instead.
        
        Raises:
            ValueError: If there are fewer instances than folds
        """
        if len(y) < self.n_folds:
            raise ValueError(
                f"Cannot run {self.n_folds}-fold cross-validation on {len(y)} instances"
            )
        if np.bincount(y).max() < self.n_folds:
            self.logger.debug("Every class is smaller than the fold count; folds are not stratified")
            splitter = KFold(n_splits=self.n_folds, shuffle=True, random_state=self.random_state)
            return splitter.split(np.zeros(len(y)))
        return self.cv.split(np.zeros(len(y)), y)
    
    def evaluate(self, unit: PreprocessingPipeline, dataset: Dataset, name: str = "") -> EvaluationResult:
        """
        Cross-validate ``unit`` on ``dataset`` and retrain it on all rows.
        
        Every fold trains a fresh clone of ``unit``; ``unit`` itself is never
        trained, so it can be reused.
        
        Args:
            unit: Untrained pipeline
            dataset: Dataset to evaluate on
            name: Name recorded in the result
            
        Returns:
            Result holding accuracy, correct count and the retrained unit
        """
        y = dataset.class_values()
        total_correct = 0
        
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", category=ConvergenceWarning)
            
            for fold, (train_idx, test_idx) in enumerate(self.split(y), 1):
                fold_unit = clone(unit).train(dataset.subset(train_idx))
                predictions = fold_unit.classify_dataset(dataset.subset(test_idx))
                correct = int(np.sum(predictions == y[test_idx]))
                total_correct += correct
                self.logger.debug(f"{name} fold {fold}: {correct}/{len(test_idx)} correct")
            
            trained_unit = clone(unit).train(dataset)
        
        return EvaluationResult(
            name=name,
            accuracy_percent=100.0 * total_correct / len(y),
            correct_count=float(total_correct),
            trained_unit=trained_unit
        )
    
    def safe_evaluate(
        self,
        unit: PreprocessingPipeline,
        dataset: Dataset,
        name: str = ""
    ) -> Union[EvaluationResult, CandidateFailure]:
        """Like ``evaluate`` but returns a CandidateFailure instead of raising."""
        start_time = time.time()
        try:
            self.logger.info(f"Evaluating {name}: {unit.describe()}")
            result = self.evaluate(unit, dataset, name)
        except Exception as e:
            self.logger.warning(f"{name} failed: {type(e).__name__}: {e}")
            return CandidateFailure(name=name, error_type=type(e).__name__, message=str(e))
        
        self.logger.info(
            f"{name} completed - Accuracy: {result.accuracy_percent:.2f}%, "
            f"Correct: {result.correct_count:g}, Time: {time.time() - start_time:.2f}s"
        )
        return result
