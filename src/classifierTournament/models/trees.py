"""
Tree-structured classifier implementations.

Three flavours, all trained directly on the raw attribute values:
an entropy-split tree with a minimum leaf size, an unpruned tree that
considers a random subset of attributes at each split, and a tree pruned
by minimal cost-complexity.
"""

import math
from typing import Optional

from sklearn.tree import DecisionTreeClassifier

from .base_model import BaseModel


class DecisionTreeModel(BaseModel):
    """Entropy-split decision tree with at least ``min_samples_leaf`` instances per leaf."""
    
    def __init__(self, min_samples_leaf: int = 2, random_state: int = 1):
        self.min_samples_leaf = min_samples_leaf
        self.random_state = random_state
        
    def _build_estimator(self, X, y, attributes, n_classes):
        return DecisionTreeClassifier(
            criterion='entropy',
            min_samples_leaf=self.min_samples_leaf,
            random_state=self.random_state
        )


class RandomTreeModel(BaseModel):
    """Unpruned tree splitting on the best of ``int(log2(p)) + 1`` random attributes."""
    
    def __init__(self, n_attributes: Optional[int] = None, min_samples_leaf: int = 1,
                 random_state: int = 1):
        """
        Args:
            n_attributes: Attributes tried per split (None: int(log2(p)) + 1)
            min_samples_leaf: Minimum instances per leaf
            random_state: Seed for attribute sampling
        """
        self.n_attributes = n_attributes
        self.min_samples_leaf = min_samples_leaf
        self.random_state = random_state
        
    def _build_estimator(self, X, y, attributes, n_classes):
        n_features = X.shape[1]
        k = self.n_attributes or int(math.log2(max(n_features, 1))) + 1
        return DecisionTreeClassifier(
            criterion='entropy',
            max_features=min(k, n_features),
            min_samples_leaf=self.min_samples_leaf,
            random_state=self.random_state
        )


class PrunedTreeModel(BaseModel):
    """Entropy tree pruned with minimal cost-complexity pruning."""
    
    def __init__(self, ccp_alpha: float = 0.01, min_samples_leaf: int = 2, random_state: int = 1):
        self.ccp_alpha = ccp_alpha
        self.min_samples_leaf = min_samples_leaf
        self.random_state = random_state
        
    def _build_estimator(self, X, y, attributes, n_classes):
        return DecisionTreeClassifier(
            criterion='entropy',
            ccp_alpha=self.ccp_alpha,
            min_samples_leaf=self.min_samples_leaf,
            random_state=self.random_state
        )
