"""
Results reporting utilities for classifierTournament.

This module renders tournament results as a table and writes them to disk.
"""

from typing import Any, Dict, Sequence, Union
import json
import pandas as pd
from pathlib import Path
from datetime import datetime

from ..config.default_config import DEFAULT_CONFIG
from ..core.results import EvaluationResult, TournamentState
from ..utils.logger import get_logger


class ResultsReporter:
    """Reporter for tournament results."""
    
    def __init__(self):
        self.logger = get_logger("ResultsReporter")
        
    def to_frame(self, results: Sequence[EvaluationResult]) -> pd.DataFrame:
        """One row per candidate, in registry order."""
        return pd.DataFrame(
            [result.to_dict() for result in results],
            columns=["name", "accuracy_percent", "correct_count", "failed"]
        )
    
    def format_table(self, state: TournamentState) -> str:
        """Plain-text results table with the winner marked."""
        frame = self.to_frame(state.results)
        frame.insert(0, "best", ["*" if result is state.best else "" for result in state.results])
        frame["accuracy_percent"] = frame["accuracy_percent"].map(lambda v: f"{v:.2f}")
        frame["correct_count"] = frame["correct_count"].map(lambda v: f"{v:g}")
        return frame.to_string(index=False)
    
    def summarize(self, state: TournamentState) -> Dict[str, Any]:
        """JSON-serializable summary of one tournament run."""
        return {
            "generated_at": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "best": state.best.to_dict(),
            "results": [result.to_dict() for result in state.results],
        }
        
    def save(self, state: TournamentState, output_dir: Union[str, Path]) -> Dict[str, Path]:
        """
        Write the results CSV and the JSON summary.
        
        Returns:
            Paths of the written files keyed by "results" and "summary"
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        
        results_path = output_dir / DEFAULT_CONFIG["output"]["results_file"]
        summary_path = output_dir / DEFAULT_CONFIG["output"]["summary_file"]
        
        self.to_frame(state.results).to_csv(results_path, index=False)
        with open(summary_path, 'w', encoding='utf-8') as f:
            json.dump(self.summarize(state), f, indent=2)
        
        self.logger.info(f"Results saved to {output_dir}")
        return {"results": results_path, "summary": summary_path}
