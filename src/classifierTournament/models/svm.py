"""
SVM classifier implementation.

Support vector classifier; multi-class problems are solved pairwise.
"""

from typing import Union

from sklearn.svm import SVC as _SVC

from .base_model import BaseModel


class SVMClassifier(BaseModel):
    """Support vector classifier wrapper."""
    
    def __init__(self, C: float = 1.0, kernel: str = 'linear',
                 gamma: Union[str, float] = 'scale', random_state: int = 1):
        """
        Args:
            C: Regularization parameter
            kernel: Kernel type ('linear', 'poly', 'rbf', 'sigmoid')
            gamma: Kernel coefficient for non-linear kernels
            random_state: Random seed
        """
        self.C = C
        self.kernel = kernel
        self.gamma = gamma
        self.random_state = random_state
        
    def _build_estimator(self, X, y, attributes, n_classes):
        return _SVC(
            C=self.C,
            kernel=self.kernel,
            gamma=self.gamma,
            random_state=self.random_state
        )
