"""
Result records produced by a tournament run.
"""

from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass, field

FAILURE_SUFFIX = " (Error)"


@dataclass(frozen=True)
class EvaluationResult:
    """Cross-validated score of one candidate plus its fully trained unit."""
    name: str
    accuracy_percent: float
    correct_count: float
    trained_unit: Optional[Any] = field(default=None, compare=False, repr=False)
    
    @property
    def failed(self) -> bool:
        return self.trained_unit is None
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "accuracy_percent": self.accuracy_percent,
            "correct_count": self.correct_count,
            "failed": self.failed,
        }
    
    def __str__(self) -> str:
        return f"{self.name} | Correct: {self.correct_count:g} | Acc: {self.accuracy_percent:.2f}%"


@dataclass(frozen=True)
class CandidateFailure:
    """A candidate that could not be trained or evaluated."""
    name: str
    error_type: str
    message: str
    
    def to_result(self) -> EvaluationResult:
        """Collapse into a zero-score result whose name flags the failure."""
        return EvaluationResult(
            name=self.name + FAILURE_SUFFIX,
            accuracy_percent=0.0,
            correct_count=0.0,
            trained_unit=None
        )


@dataclass(frozen=True)
class TournamentState:
    """All results of one tournament run and the selected winner."""
    results: Tuple[EvaluationResult, ...]
    best: EvaluationResult
    
    @property
    def has_model(self) -> bool:
        return self.best.trained_unit is not None
