"""Exception hierarchy for programming errors around outcomes.

Domain failures are values (failed outcomes). The exceptions here signal
caller bugs: breaking a construction invariant or reading the value of a
failed outcome.
"""

from __future__ import annotations

from typing import Optional


class OutcomeError(Exception):
    """Base exception for outcome contract violations."""


class InvalidOutcomeError(OutcomeError, ValueError):
    """An outcome was constructed in a state it may never hold."""


class FailedOutcomeError(OutcomeError, RuntimeError):
    """The value of a failed outcome was requested."""

    def __init__(self, message: str, *, diagnostic: Optional[str] = None) -> None:
        super().__init__(message)
        self.diagnostic = diagnostic
