"""
Tournament runner for classifierTournament.

Evaluates every registered candidate on one dataset, isolates candidates
that fail, and selects the winner.
"""

from typing import List, Optional, Sequence, Union
from joblib import Parallel, delayed

from ..config.model_configs import build_candidate_registry
from ..data.dataset import Dataset
from ..models import ModelFactory
from ..preprocessing.pipeline import PreprocessingPipeline
from ..utils.config import Config
from ..utils.logger import get_logger
from .base import CandidateConfig
from .cv_evaluator import StratifiedKFoldEvaluator
from .exceptions import NoDataError
from .results import CandidateFailure, EvaluationResult, TournamentState


def select_winner(results: Sequence[EvaluationResult]) -> EvaluationResult:
    """
    Return the result with the greatest correct count.
    
    Only a strictly greater count replaces the current best, so ties go to
    the result listed first.
    """
    if not results:
        raise ValueError("Cannot select a winner from an empty result list")
    
    best = results[0]
    for result in results[1:]:
        if result.correct_count > best.correct_count:
            best = result
    return best


class TournamentRunner:
    """Runs every candidate through cross-validation and picks the best."""
    
    def __init__(
        self,
        config: Optional[Config] = None,
        candidates: Optional[Sequence[CandidateConfig]] = None
    ):
        """
        Args:
            config: Tournament configuration (defaults to Config())
            candidates: Candidate list; defaults to the fixed registry
        """
        self.config = config if config is not None else Config()
        self.candidates = tuple(candidates) if candidates is not None else tuple(build_candidate_registry())
        self.evaluator = StratifiedKFoldEvaluator(
            n_folds=self.config.cv_folds,
            random_state=self.config.random_state
        )
        self.logger = get_logger("TournamentRunner")
        
    def build_unit(self, candidate: CandidateConfig) -> PreprocessingPipeline:
        """Compose the candidate's base model and transforms into one untrained unit."""
        return PreprocessingPipeline(
            model=ModelFactory.create_model(candidate.base_algorithm, candidate.hyperparameters),
            steps=candidate.preprocessing_steps,
            discretize_bins=self.config.discretize_bins,
            discretize_strategy=self.config.discretize_strategy
        )
        
    def run(self, dataset: Optional[Dataset]) -> TournamentState:
        """
        Evaluate all candidates in registry order.
        
        Args:
            dataset: Loaded dataset
            
        Returns:
            All results in registry order and the winner
            
        Raises:
            NoDataError: If no dataset is given or it has no instances
        """
        if dataset is None or dataset.is_empty:
            raise NoDataError("No data loaded.")
        
        self.logger.info(
            f"Starting tournament: {len(self.candidates)} candidates, "
            f"{self.config.cv_folds}-fold CV on {len(dataset)} instances"
        )
        
        if self.config.n_jobs == 1:
            outcomes = [self._evaluate_candidate(candidate, dataset) for candidate in self.candidates]
        else:
            # Parallel returns outcomes in submission order
            outcomes = Parallel(n_jobs=self.config.n_jobs)(
                delayed(self._evaluate_candidate)(candidate, dataset) for candidate in self.candidates
            )
        
        results = tuple(self._collapse(outcome) for outcome in outcomes)
        best = select_winner(results)
        
        failures = sum(1 for result in results if result.failed)
        if failures:
            self.logger.warning(f"{failures} of {len(results)} candidates failed")
        self.logger.info(f"Best: {best}")
        
        return TournamentState(results=results, best=best)
    
    def _evaluate_candidate(
        self,
        candidate: CandidateConfig,
        dataset: Dataset
    ) -> Union[EvaluationResult, CandidateFailure]:
        try:
            unit = self.build_unit(candidate)
        except Exception as e:
            self.logger.warning(f"{candidate.name} could not be built: {type(e).__name__}: {e}")
            return CandidateFailure(name=candidate.name, error_type=type(e).__name__, message=str(e))
        return self.evaluator.safe_evaluate(unit, dataset, name=candidate.name)
    
    @staticmethod
    def _collapse(outcome: Union[EvaluationResult, CandidateFailure]) -> EvaluationResult:
        if isinstance(outcome, CandidateFailure):
            return outcome.to_result()
        return outcome
