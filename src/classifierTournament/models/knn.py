"""
KNN classifier implementation.

The inputs are expected to be scaled already (the tournament places this
model behind Normalize), so no scaling happens here.
"""

from sklearn.neighbors import KNeighborsClassifier as _KNeighborsClassifier

from .base_model import BaseModel


class KNNClassifier(BaseModel):
    """k-nearest-neighbour classifier with Euclidean distance."""
    
    def __init__(self, n_neighbors: int = 1, weights: str = 'uniform', metric: str = 'euclidean'):
        """
        Args:
            n_neighbors: Number of neighbours; capped at the training size
            weights: Weight function ('uniform', 'distance')
            metric: Distance metric
        """
        self.n_neighbors = n_neighbors
        self.weights = weights
        self.metric = metric
        
    def _build_estimator(self, X, y, attributes, n_classes):
        return _KNeighborsClassifier(
            n_neighbors=min(self.n_neighbors, len(X)),
            weights=self.weights,
            metric=self.metric
        )
