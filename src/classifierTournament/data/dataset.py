"""
Dataset and attribute schema for classifierTournament.

A dataset is an immutable attribute schema plus a read-only matrix of rows.
Nominal values are stored as indices into their attribute's domain and the
class attribute is always the last column.
"""

from typing import Any, List, Sequence, Tuple
import numpy as np
import pandas as pd
from dataclasses import dataclass, field

from ..core.base import AttributeKind

# Distinguished "unknown" value; only the class slot of a prediction instance
# may hold it.
MISSING = float("nan")


def is_missing(value: Any) -> bool:
    """Return True if ``value`` is the Missing sentinel."""
    return isinstance(value, float) and np.isnan(value)


@dataclass(frozen=True)
class Attribute:
    """Static description of one column."""
    name: str
    kind: AttributeKind
    domain: Tuple[str, ...] = field(default=())
    
    def __post_init__(self):
        object.__setattr__(self, "domain", tuple(self.domain))
        if self.kind is AttributeKind.NUMERIC and self.domain:
            raise ValueError(f"Numeric attribute '{self.name}' cannot have a domain")
        if self.kind is AttributeKind.NOMINAL and not self.domain:
            raise ValueError(f"Nominal attribute '{self.name}' needs at least one value")
    
    @property
    def is_nominal(self) -> bool:
        return self.kind is AttributeKind.NOMINAL
    
    @property
    def is_numeric(self) -> bool:
        return self.kind is AttributeKind.NUMERIC
    
    def index_of(self, value: str) -> int:
        """Position of ``value`` in the domain, or -1 if absent."""
        try:
            return self.domain.index(value)
        except ValueError:
            return -1
    
    def value(self, index: int) -> str:
        """Domain label at ``index``."""
        return self.domain[int(index)]


class Dataset:
    """Ordered rows conforming to a schema, with the class attribute last."""
    
    def __init__(
        self,
        schema: Sequence[Attribute],
        values: Any,
        relation: str = "dataset"
    ):
        """
        Args:
            schema: Attributes in column order; the last one is the class
            values: Row matrix of shape (n_rows, len(schema))
            relation: Dataset name taken from the file header
        """
        schema = tuple(schema)
        if not schema:
            raise ValueError("A dataset needs at least one attribute")
        
        values = np.array(values, dtype=float, copy=True)
        if values.size == 0:
            values = values.reshape(0, len(schema))
        if values.ndim != 2 or values.shape[1] != len(schema):
            raise ValueError(
                f"Every row must have exactly {len(schema)} values, "
                f"got matrix of shape {values.shape}"
            )
        values.setflags(write=False)
        
        self._schema = schema
        self._values = values
        self.relation = relation
    
    @property
    def schema(self) -> Tuple[Attribute, ...]:
        return self._schema
    
    @property
    def values(self) -> np.ndarray:
        """Read-only row matrix."""
        return self._values
    
    @property
    def class_index(self) -> int:
        return len(self._schema) - 1
    
    @property
    def class_attribute(self) -> Attribute:
        return self._schema[-1]
    
    @property
    def feature_attributes(self) -> Tuple[Attribute, ...]:
        return self._schema[:-1]
    
    @property
    def num_classes(self) -> int:
        """Number of class labels (1 for a numeric class attribute)."""
        return len(self.class_attribute.domain) if self.class_attribute.is_nominal else 1
    
    def __len__(self) -> int:
        return self._values.shape[0]
    
    @property
    def is_empty(self) -> bool:
        return len(self) == 0
    
    def attributes_excluding_class(self) -> List[Attribute]:
        """Attribute descriptors for every column except the class."""
        return list(self.feature_attributes)
    
    def features(self) -> pd.DataFrame:
        """Non-class columns as a frame keyed by attribute name."""
        return self.rows_to_frame(self._values)
    
    def class_values(self) -> np.ndarray:
        """Class column as integer domain indices."""
        return self._values[:, self.class_index].astype(int)
    
    def rows_to_frame(self, rows: np.ndarray) -> pd.DataFrame:
        """Build a feature frame from full-width rows (the class slot is dropped)."""
        rows = np.asarray(rows, dtype=float)
        if rows.ndim == 1:
            rows = rows.reshape(1, -1)
        return pd.DataFrame(
            rows[:, :self.class_index],
            columns=[attribute.name for attribute in self.feature_attributes]
        )
    
    def subset(self, indices: Sequence[int]) -> 'Dataset':
        """New dataset with the selected rows and the same schema."""
        return Dataset(self._schema, self._values[np.asarray(indices, dtype=int)], self.relation)
    
    def __repr__(self) -> str:
        return (
            f"Dataset(relation={self.relation!r}, attributes={len(self._schema)}, "
            f"instances={len(self)}, class={self.class_attribute.name!r})"
        )
