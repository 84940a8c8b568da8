"""
Dummy encoding of nominal attributes for classifierTournament.
"""

from typing import List, Optional, Sequence, Set, Tuple
import pandas as pd

from ..core.base import AttributeKind, BaseTransform
from ..data.dataset import Attribute


class NominalToBinary(BaseTransform):
    """Expand each nominal attribute into one numeric indicator per domain value.
    
    Numeric attributes are left unchanged. The indicator for value ``v`` of
    attribute ``a`` is named ``a=v``; a name already taken by an earlier
    output column gets a ``_2``, ``_3``, ... suffix.
    """
    
    def fit(self, X: pd.DataFrame, attributes: Sequence[Attribute]) -> 'NominalToBinary':
        taken: Set[str] = set()
        # (source attribute, domain index or None for passthrough, output name)
        self.columns_: List[Tuple[Attribute, Optional[int], str]] = []
        
        for attribute in attributes:
            if not attribute.is_nominal:
                self.columns_.append((attribute, None, self._claim(attribute.name, taken)))
                continue
            for index, value in enumerate(attribute.domain):
                name = self._claim(self.indicator_name(attribute, value), taken)
                self.columns_.append((attribute, index, name))
        
        self.input_attributes_ = tuple(attributes)
        self.output_attributes_ = tuple(
            source if index is None and name == source.name
            else Attribute(name, AttributeKind.NUMERIC)
            for source, index, name in self.columns_
        )
        self.is_fitted = True
        return self
        
    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        self._check_fitted()
        
        columns = {}
        for source, index, name in self.columns_:
            column = X[source.name].to_numpy(dtype=float)
            columns[name] = column if index is None else (column == index).astype(float)
        
        return pd.DataFrame(columns, index=X.index)
    
    @staticmethod
    def indicator_name(attribute: Attribute, value: str) -> str:
        return f"{attribute.name}={value}"
    
    @staticmethod
    def _claim(name: str, taken: Set[str]) -> str:
        unique, suffix = name, 1
        while unique in taken:
            suffix += 1
            unique = f"{name}_{suffix}"
        taken.add(unique)
        return unique
