"""
Engine facade for classifierTournament.

The engine owns the current dataset and the latest tournament state as one
immutable EngineState value. Each operation reads a snapshot and any change
replaces the whole value under a single lock.
"""

import threading
from typing import Any, List, Optional, Sequence, Union
from dataclasses import dataclass
from pathlib import Path

from ..data.dataset import Attribute, Dataset
from ..data.loader import DataLoader
from ..prediction.encoder import PredictionEncoder
from ..utils.config import Config
from ..utils.logger import get_logger
from .exceptions import NoDataError, NoModelError
from .results import EvaluationResult, TournamentState
from .tournament import TournamentRunner

NO_MODEL_MESSAGE = "No model trained yet."
PREDICTION_ERROR_PREFIX = "Prediction Error: "


@dataclass(frozen=True)
class EngineState:
    """Current dataset and the tournament run on it, if any."""
    dataset: Optional[Dataset] = None
    tournament: Optional[TournamentState] = None


@dataclass(frozen=True)
class LoadSummary:
    """What a caller needs to know after a successful load."""
    instance_count: int
    class_attribute_name: str


class TournamentEngine:
    """Load a dataset, run the tournament, and predict with the winner."""
    
    def __init__(
        self,
        config: Optional[Config] = None,
        loader: Optional[DataLoader] = None,
        runner: Optional[TournamentRunner] = None
    ):
        self.config = config if config is not None else Config()
        self.loader = loader if loader is not None else DataLoader()
        self.runner = runner if runner is not None else TournamentRunner(self.config)
        self.logger = get_logger("TournamentEngine")
        self._lock = threading.Lock()
        self._state = EngineState()
        
    @property
    def state(self) -> EngineState:
        return self._state
    
    def load(self, path: Union[str, Path]) -> LoadSummary:
        """
        Load a dataset and discard any previous tournament.
        
        The file is fully parsed and validated before anything is replaced,
        so a failed load leaves the current dataset and results in place.
        
        Raises:
            FileNotFoundError: If the file does not exist
            FormatError: If the file cannot be parsed
        """
        dataset = self.loader.load(path)
        with self._lock:
            self._state = EngineState(dataset=dataset, tournament=None)
        return LoadSummary(
            instance_count=len(dataset),
            class_attribute_name=dataset.class_attribute.name
        )
    
    def instance_count(self) -> int:
        dataset = self._state.dataset
        return 0 if dataset is None else len(dataset)
    
    def class_attribute_name(self) -> str:
        dataset = self._state.dataset
        return "?" if dataset is None else dataset.class_attribute.name
    
    def attributes_excluding_class(self) -> List[Attribute]:
        """Descriptors of the attributes a caller must supply for prediction."""
        dataset = self._state.dataset
        return [] if dataset is None else dataset.attributes_excluding_class()
    
    def run_tournament(self) -> List[EvaluationResult]:
        """
        Evaluate every candidate on the current dataset.
        
        Raises:
            NoDataError: If no non-empty dataset is loaded
        """
        snapshot = self._state
        if snapshot.dataset is None or snapshot.dataset.is_empty:
            raise NoDataError("No data loaded.")
        
        tournament = self.runner.run(snapshot.dataset)
        
        with self._lock:
            if self._state.dataset is snapshot.dataset:
                self._state = EngineState(dataset=snapshot.dataset, tournament=tournament)
            else:
                self.logger.warning("Dataset changed while the tournament was running; results not kept")
        return list(tournament.results)
    
    def get_best_result(self) -> Optional[EvaluationResult]:
        tournament = self._state.tournament
        return None if tournament is None else tournament.best
    
    def get_results(self) -> List[EvaluationResult]:
        tournament = self._state.tournament
        return [] if tournament is None else list(tournament.results)
    
    def predict(self, raw_values: Sequence[Any]) -> str:
        """
        Predict a class label for one raw input row.
        
        Never raises: problems are reported as a message string.
        """
        snapshot = self._state
        if snapshot.dataset is None or snapshot.tournament is None or not snapshot.tournament.has_model:
            return NO_MODEL_MESSAGE
        
        encoder = PredictionEncoder(snapshot.dataset, snapshot.tournament.best)
        try:
            return encoder.predict(raw_values)
        except NoModelError:
            return NO_MODEL_MESSAGE
        except Exception as e:
            self.logger.warning(f"Prediction failed: {e}")
            return PREDICTION_ERROR_PREFIX + str(e)
