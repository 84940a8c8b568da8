"""
Prediction encoding for classifierTournament.

Turns raw user input (one value per non-class attribute) into a model-ready
instance, classifies it with the winning unit, and decodes the predicted
class index back into its label.
"""

import math
from typing import Any, List, Optional, Sequence, Union
import numpy as np
from dataclasses import dataclass

from ..core.exceptions import (
    InvalidNumberError, NoModelError, PredictionInputError, UnknownCategoryError
)
from ..core.results import EvaluationResult
from ..data.dataset import MISSING, Attribute, Dataset


@dataclass(frozen=True)
class NominalRaw:
    """Raw value for a nominal attribute; must name a domain value."""
    attribute: Attribute
    text: str
    
    def encode(self) -> float:
        index = self.attribute.index_of(self.text)
        if index < 0:
            raise UnknownCategoryError(self.attribute.name, self.text, self.attribute.domain)
        return float(index)


@dataclass(frozen=True)
class NumericRaw:
    """Raw value for a numeric attribute; must parse as a finite number."""
    attribute: Attribute
    text: str
    
    def encode(self) -> float:
        try:
            number = float(self.text)
        except ValueError:
            raise InvalidNumberError(self.attribute.name, self.text) from None
        if not math.isfinite(number):
            raise InvalidNumberError(self.attribute.name, self.text)
        return number


RawValue = Union[NominalRaw, NumericRaw]


def _as_text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode('utf-8')
    return str(value).strip()


class PredictionEncoder:
    """Encodes raw input against a dataset schema and decodes class indices."""
    
    def __init__(self, dataset: Dataset, winner: Optional[EvaluationResult] = None):
        """
        Args:
            dataset: Dataset whose schema the raw input follows
            winner: Winning tournament result (may be absent)
        """
        self.dataset = dataset
        self.winner = winner
        
    def resolve(self, raw_values: Sequence[Any]) -> List[RawValue]:
        """Tag each raw value with the kind of the attribute it belongs to."""
        attributes = self.dataset.feature_attributes
        if len(raw_values) != len(attributes):
            raise PredictionInputError(
                f"Expected {len(attributes)} values "
                f"({', '.join(a.name for a in attributes)}), got {len(raw_values)}"
            )
        
        return [
            NominalRaw(attribute, _as_text(value)) if attribute.is_nominal
            else NumericRaw(attribute, _as_text(value))
            for attribute, value in zip(attributes, raw_values)
        ]
    
    def encode(self, raw_values: Sequence[Any]) -> np.ndarray:
        """Full-width instance with the class slot set to Missing."""
        vector = np.full(len(self.dataset.schema), MISSING, dtype=float)
        for position, raw in enumerate(self.resolve(raw_values)):
            vector[position] = raw.encode()
        return vector
    
    def encode_nominal(self, attribute: Union[str, Attribute], value: str) -> int:
        """Domain index of ``value`` for a nominal attribute."""
        if isinstance(attribute, str):
            attribute = self._attribute_named(attribute)
        if not attribute.is_nominal:
            raise PredictionInputError(f"Attribute '{attribute.name}' is not nominal")
        return int(NominalRaw(attribute, value).encode())
    
    def decode_nominal(self, attribute: Union[str, Attribute], index: int) -> str:
        """Label at ``index`` for a nominal attribute."""
        if isinstance(attribute, str):
            attribute = self._attribute_named(attribute)
        if not 0 <= int(index) < len(attribute.domain):
            raise PredictionInputError(f"Index {index} is outside the domain of '{attribute.name}'")
        return attribute.value(index)
    
    def decode_class(self, index: int) -> str:
        """Class label for a predicted class index."""
        return self.decode_nominal(self.dataset.class_attribute, index)
    
    def predict(self, raw_values: Sequence[Any]) -> str:
        """
        Classify raw input with the winning unit.
        
        Raises:
            NoModelError: If there is no winner with a trained unit
            PredictionInputError: If the input does not fit the schema
        """
        if self.winner is None or self.winner.trained_unit is None:
            raise NoModelError("No model trained yet.")
        
        instance = self.encode(raw_values)
        class_index = self.winner.trained_unit.classify(instance)
        return self.decode_class(class_index)
    
    def _attribute_named(self, name: str) -> Attribute:
        for attribute in self.dataset.schema:
            if attribute.name == name:
                return attribute
        raise PredictionInputError(f"Unknown attribute '{name}'")
