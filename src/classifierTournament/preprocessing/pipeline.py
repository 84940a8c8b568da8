"""
Composite trainable units for classifierTournament.

A pipeline chains zero, one, or two transforms in front of a base model and
exposes the same train/classify capability as a bare model. Transform
parameters are learned only from the data passed to ``train`` and are
re-applied, never refit, to anything classified afterwards.
"""

from typing import List, Optional, Sequence, Tuple
import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, clone

from ..core.base import (
    BaseModel, BaseTransform, TransformKind, TRANSFORM_ORDER, MAX_PREPROCESSING_STEPS
)
from ..data.dataset import Attribute, Dataset
from .discretize import Discretizer
from .nominal_to_binary import NominalToBinary
from .normalize import Normalizer


def order_steps(steps: Sequence[TransformKind]) -> Tuple[TransformKind, ...]:
    """Validate a step list and return it in application order."""
    steps = tuple(TransformKind(step) for step in steps)
    if len(steps) > MAX_PREPROCESSING_STEPS:
        raise ValueError(
            f"At most {MAX_PREPROCESSING_STEPS} preprocessing steps are supported, got {len(steps)}"
        )
    if len(set(steps)) != len(steps):
        raise ValueError(f"Preprocessing steps must not repeat: {[s.value for s in steps]}")
    return tuple(sorted(steps, key=TRANSFORM_ORDER.index))


class PreprocessingPipeline(BaseEstimator):
    """Base model behind an optional chain of transforms."""
    
    def __init__(
        self,
        model: Optional[BaseModel] = None,
        steps: Tuple[TransformKind, ...] = (),
        discretize_bins: int = 10,
        discretize_strategy: str = "uniform"
    ):
        self.model = model
        self.steps = steps
        self.discretize_bins = discretize_bins
        self.discretize_strategy = discretize_strategy
        
    def train(self, dataset: Dataset) -> 'PreprocessingPipeline':
        """Fit every transform and then the base model on ``dataset``."""
        if self.model is None:
            raise ValueError("PreprocessingPipeline needs a base model")
        
        self.transforms_: List[BaseTransform] = [
            self._build_transform(step) for step in order_steps(self.steps)
        ]
        self.feature_names_ = [attribute.name for attribute in dataset.feature_attributes]
        self.class_attribute_ = dataset.class_attribute
        
        X = dataset.features()
        attributes: Sequence[Attribute] = dataset.feature_attributes
        for transform in self.transforms_:
            X = transform.fit_transform(X, attributes)
            attributes = transform.output_attributes_
        
        self.model_ = clone(self.model)
        self.model_.fit(X, dataset.class_values(), attributes=attributes, n_classes=dataset.num_classes)
        return self
    
    def classify(self, instance: Sequence[float]) -> int:
        """Predict the class index of one full-width instance."""
        instance = np.asarray(instance, dtype=float)
        if instance.ndim != 1 or len(instance) != len(self.feature_names_) + 1:
            raise ValueError(
                f"Expected an instance with {len(self.feature_names_) + 1} values, got shape {instance.shape}"
            )
        frame = pd.DataFrame(instance[:-1].reshape(1, -1), columns=self.feature_names_)
        return int(self._predict_frame(frame)[0])
    
    def classify_dataset(self, dataset: Dataset) -> np.ndarray:
        """Predict class indices for every row of ``dataset``."""
        return self._predict_frame(dataset.features())
    
    def _predict_frame(self, X: pd.DataFrame) -> np.ndarray:
        if not hasattr(self, "model_"):
            raise ValueError("Pipeline must be trained before classifying")
        for transform in self.transforms_:
            X = transform.transform(X)
        return np.asarray(self.model_.predict(X)).astype(int)
    
    def _build_transform(self, step: TransformKind) -> BaseTransform:
        if step is TransformKind.NORMALIZE:
            return Normalizer()
        elif step is TransformKind.DISCRETIZE:
            return Discretizer(bins=self.discretize_bins, strategy=self.discretize_strategy)
        elif step is TransformKind.NOMINAL_TO_BINARY:
            return NominalToBinary()
        else:
            raise ValueError(f"Unknown transform: {step}")
    
    def describe(self) -> str:
        """Readable form such as ``nominal_to_binary -> normalize -> KNNClassifier``."""
        names = [step.value for step in order_steps(self.steps)]
        names.append(type(self.model).__name__)
        return " -> ".join(names)
