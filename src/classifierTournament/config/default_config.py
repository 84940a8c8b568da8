"""
Default report settings for classifierTournament.

Tunable run settings live in ``utils.config.Config``.
"""

DEFAULT_CONFIG = {
    # Report file names written by ResultsReporter.save
    "output": {
        "results_file": "tournament_results.csv",
        "summary_file": "tournament_summary.json"
    }
}
