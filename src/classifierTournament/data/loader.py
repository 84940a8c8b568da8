"""
Data loading utilities for classifierTournament.

This module reads ARFF files (an attribute header followed by data rows)
into a Dataset.
"""

from typing import List, Tuple, Union
import numpy as np
from pathlib import Path
from scipy.io import arff

from ..core.base import AttributeKind
from ..core.exceptions import FormatError
from ..utils.logger import get_logger
from .dataset import Attribute, Dataset
from .validator import DataValidator

MISSING_TOKEN = "?"


class DataLoader:
    """Data loader for ARFF datasets."""
    
    def __init__(self):
        self.logger = get_logger("DataLoader")
        self.validator = DataValidator()
        
    def load(self, path: Union[str, Path]) -> Dataset:
        """
        Load an ARFF file; the last declared attribute becomes the class.
        
        Args:
            path: Path to the ARFF file
            
        Returns:
            The loaded dataset
            
        Raises:
            FileNotFoundError: If the file does not exist
            FormatError: If the file cannot be parsed, declares no attributes,
                uses unsupported attribute types, or has incomplete rows
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Dataset file not found: {path}")
        
        self.logger.info(f"Loading data from {path}")
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data, meta = arff.loadarff(f)
        except (arff.ArffError, ValueError, TypeError, IndexError,
                NotImplementedError, StopIteration, UnicodeDecodeError) as e:
            raise FormatError(f"Cannot parse {path.name}: {e}") from e
        
        schema = self._build_schema(meta)
        values = self._build_values(data, schema)
        
        dataset = Dataset(schema, values, relation=str(meta.name))
        self.validator.validate(dataset)
        
        self.logger.info(
            f"Loaded '{dataset.relation}': {len(dataset)} instances, "
            f"{len(schema)} attributes, class '{dataset.class_attribute.name}'"
        )
        return dataset
    
    def _build_schema(self, meta) -> List[Attribute]:
        """Translate the parsed header into attributes."""
        names = meta.names()
        if len(names) == 0:
            raise FormatError("The file declares no attributes")
        
        schema = []
        for name in names:
            kind, domain = meta[name]
            if kind == 'numeric':
                schema.append(Attribute(name, AttributeKind.NUMERIC))
            elif kind == 'nominal':
                schema.append(Attribute(name, AttributeKind.NOMINAL, tuple(domain)))
            else:
                raise FormatError(f"Attribute '{name}' has unsupported type '{kind}'")
        return schema
    
    def _build_values(self, data: np.ndarray, schema: List[Attribute]) -> np.ndarray:
        """Encode parsed records as floats, nominal values as domain indices."""
        values = np.empty((len(data), len(schema)), dtype=float)
        
        for column, attribute in enumerate(schema):
            raw = data[attribute.name]
            if attribute.is_numeric:
                values[:, column] = raw.astype(float)
                continue
            
            lookup = {label: index for index, label in enumerate(attribute.domain)}
            for row, value in enumerate(raw):
                label = value.decode('utf-8') if isinstance(value, bytes) else str(value)
                if label == MISSING_TOKEN:
                    values[row, column] = np.nan
                elif label in lookup:
                    values[row, column] = lookup[label]
                else:
                    raise FormatError(
                        f"Row {row + 1}: value '{label}' is not declared for attribute '{attribute.name}'"
                    )
        
        return values
