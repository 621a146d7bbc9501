"""Outcomes - explicit success/failure values and the combinators that compose them."""

from src.outcomes.conversion import condition_to_outcome, to_outcome
from src.outcomes.errors import FailedOutcomeError, InvalidOutcomeError, OutcomeError
from src.outcomes.outcome import Outcome, ValueOutcome

__all__ = [
    "Outcome",
    "ValueOutcome",
    "to_outcome",
    "condition_to_outcome",
    "OutcomeError",
    "InvalidOutcomeError",
    "FailedOutcomeError",
]
