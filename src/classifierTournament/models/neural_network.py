"""
Neural Network classifier implementation for classifierTournament.

This module contains a feed-forward network trained with momentum SGD.
"""

from typing import Optional, Tuple

from sklearn.neural_network import MLPClassifier

from .base_model import BaseModel


class NeuralNetworkClassifier(BaseModel):
    """Neural Network classifier implementation."""
    
    def __init__(self,
                 hidden_layer_sizes: Optional[Tuple[int, ...]] = None,
                 learning_rate_init: float = 0.3,
                 momentum: float = 0.2,
                 max_iter: int = 500,
                 random_state: int = 0):
        """
        Args:
            hidden_layer_sizes: Units per hidden layer; None gives one layer
                of (inputs + classes) / 2 units
            learning_rate_init: SGD learning rate
            momentum: SGD momentum
            max_iter: Training epochs
            random_state: Seed for weight initialisation
        """
        self.hidden_layer_sizes = hidden_layer_sizes
        self.learning_rate_init = learning_rate_init
        self.momentum = momentum
        self.max_iter = max_iter
        self.random_state = random_state
        
    def _build_estimator(self, X, y, attributes, n_classes):
        hidden = self.hidden_layer_sizes
        if hidden is None:
            classes = n_classes or len(self.classes_)
            hidden = (max(1, (X.shape[1] + classes) // 2),)
        
        return MLPClassifier(
            hidden_layer_sizes=hidden,
            activation='logistic',
            solver='sgd',
            learning_rate='constant',
            learning_rate_init=self.learning_rate_init,
            momentum=self.momentum,
            nesterovs_momentum=False,
            max_iter=self.max_iter,
            n_iter_no_change=self.max_iter,
            random_state=self.random_state
        )
