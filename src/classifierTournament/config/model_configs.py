"""
Candidate registry for classifierTournament.

The tournament enters exactly these candidates, in this order. The order is
significant: when several candidates tie on correct predictions, the one
listed first wins.
"""

from typing import Any, Dict, List

from ..core.base import AlgorithmKind, CandidateConfig, TransformKind

NOM2BIN_NORM = (TransformKind.NOMINAL_TO_BINARY, TransformKind.NORMALIZE)

MODEL_CONFIGS: List[Dict[str, Any]] = [
    {
        "name": "NaiveBayes (Discretized)",
        "base_algorithm": AlgorithmKind.NAIVE_BAYES,
        "preprocessing_steps": (TransformKind.DISCRETIZE,),
        "hyperparameters": {"alpha": 1.0},
    },
    {
        "name": "Logistic (Nom2Bin+Norm)",
        "base_algorithm": AlgorithmKind.LOGISTIC,
        "preprocessing_steps": NOM2BIN_NORM,
        "hyperparameters": {"C": 1.0, "max_iter": 1000},
    },
    {
        "name": "KNN (k=1, Nom2Bin+Norm)",
        "base_algorithm": AlgorithmKind.KNN,
        "preprocessing_steps": NOM2BIN_NORM,
        "hyperparameters": {"n_neighbors": 1},
    },
    {
        "name": "KNN (k=3, Nom2Bin+Norm)",
        "base_algorithm": AlgorithmKind.KNN,
        "preprocessing_steps": NOM2BIN_NORM,
        "hyperparameters": {"n_neighbors": 3},
    },
    {
        "name": "KNN (k=5, Nom2Bin+Norm)",
        "base_algorithm": AlgorithmKind.KNN,
        "preprocessing_steps": NOM2BIN_NORM,
        "hyperparameters": {"n_neighbors": 5},
    },
    {
        "name": "DecisionTree (Raw)",
        "base_algorithm": AlgorithmKind.DECISION_TREE,
        "hyperparameters": {"min_samples_leaf": 2},
    },
    {
        "name": "RandomTree (Raw)",
        "base_algorithm": AlgorithmKind.RANDOM_TREE,
        "hyperparameters": {"min_samples_leaf": 1},
    },
    {
        "name": "PrunedTree (Raw)",
        "base_algorithm": AlgorithmKind.PRUNED_TREE,
        "hyperparameters": {"ccp_alpha": 0.01, "min_samples_leaf": 2},
    },
    {
        "name": "SVM (Nom2Bin+Norm)",
        "base_algorithm": AlgorithmKind.SVM,
        "preprocessing_steps": NOM2BIN_NORM,
        "hyperparameters": {"C": 1.0, "kernel": "linear"},
    },
    {
        "name": "NeuralNetwork (Nom2Bin+Norm)",
        "base_algorithm": AlgorithmKind.NEURAL_NETWORK,
        "preprocessing_steps": NOM2BIN_NORM,
        "hyperparameters": {"learning_rate_init": 0.3, "momentum": 0.2, "max_iter": 500},
    },
]


def build_candidate_registry() -> List[CandidateConfig]:
    """Build the fixed, ordered list of tournament candidates."""
    return [CandidateConfig(**entry) for entry in MODEL_CONFIGS]
