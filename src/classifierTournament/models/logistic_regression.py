"""
Logistic regression classifier implementation.
"""

from sklearn.linear_model import LogisticRegression

from .base_model import BaseModel


class LogisticRegressionClassifier(BaseModel):
    """Multinomial logistic regression."""
    
    def __init__(self, C: float = 1.0, max_iter: int = 1000, random_state: int = 1):
        self.C = C
        self.max_iter = max_iter
        self.random_state = random_state
        
    def _build_estimator(self, X, y, attributes, n_classes):
        return LogisticRegression(
            C=self.C,
            max_iter=self.max_iter,
            random_state=self.random_state
        )
