"""
Evaluation reporting modules for classifierTournament.
"""

from .reporter import ResultsReporter

__all__ = [
    "ResultsReporter",
]
