"""
Error types raised by classifierTournament.

Load-time and tournament-entry errors propagate to the caller. Per-candidate
and per-prediction problems are converted into data by the tournament runner
and the engine respectively.
"""


class TournamentError(Exception):
    """Base class for all classifierTournament errors."""


class FormatError(TournamentError, ValueError):
    """The dataset file cannot be parsed as an attribute schema plus rows."""


class NoDataError(TournamentError):
    """A tournament was requested without a loaded, non-empty dataset."""


class NoModelError(TournamentError):
    """A prediction was requested before a tournament produced a trained winner."""


class PredictionInputError(TournamentError, ValueError):
    """Raw prediction input does not fit the attribute schema."""


class UnknownCategoryError(PredictionInputError):
    """A nominal raw value is not part of the attribute's domain."""
    
    def __init__(self, attribute: str, value: str, domain):
        self.attribute = attribute
        self.value = value
        self.domain = tuple(domain)
        super().__init__(
            f"Unknown value '{value}' for nominal attribute '{attribute}' "
            f"(expected one of: {', '.join(self.domain)})"
        )


class InvalidNumberError(PredictionInputError):
    """A numeric raw value cannot be parsed as a finite number."""
    
    def __init__(self, attribute: str, value):
        self.attribute = attribute
        self.value = value
        super().__init__(f"Invalid number '{value}' for numeric attribute '{attribute}'")
