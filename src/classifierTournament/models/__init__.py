"""
Model implementations for classifierTournament.

This module contains the base algorithms the tournament can enter.
"""

from typing import Any, Dict, Optional

from ..core.base import AlgorithmKind
from .base_model import BaseModel
from .naive_bayes import NaiveBayesClassifier
from .logistic_regression import LogisticRegressionClassifier
from .knn import KNNClassifier
from .trees import DecisionTreeModel, RandomTreeModel, PrunedTreeModel
from .svm import SVMClassifier
from .neural_network import NeuralNetworkClassifier


class ModelFactory:
    """Factory for creating models."""
    
    MODELS = {
        AlgorithmKind.NAIVE_BAYES: NaiveBayesClassifier,
        AlgorithmKind.LOGISTIC: LogisticRegressionClassifier,
        AlgorithmKind.KNN: KNNClassifier,
        AlgorithmKind.DECISION_TREE: DecisionTreeModel,
        AlgorithmKind.RANDOM_TREE: RandomTreeModel,
        AlgorithmKind.PRUNED_TREE: PrunedTreeModel,
        AlgorithmKind.SVM: SVMClassifier,
        AlgorithmKind.NEURAL_NETWORK: NeuralNetworkClassifier,
    }
    
    @staticmethod
    def create_model(kind: AlgorithmKind, hyperparameters: Optional[Dict[str, Any]] = None) -> BaseModel:
        """Create a model based on its kind and hyperparameters."""
        model_class = ModelFactory.MODELS.get(AlgorithmKind(kind))
        if model_class is None:
            raise ValueError(f"Unknown model: {kind}")
        return model_class(**dict(hyperparameters or {}))


__all__ = [
    "BaseModel",
    "NaiveBayesClassifier",
    "LogisticRegressionClassifier",
    "KNNClassifier",
    "DecisionTreeModel",
    "RandomTreeModel",
    "PrunedTreeModel",
    "SVMClassifier",
    "NeuralNetworkClassifier",
    "ModelFactory",
]
