"""Entry points from plain values into outcomes.

These are the only conversions the library performs; nothing else turns a
raw value into an outcome implicitly.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from src.outcomes.outcome import Outcome, ValueOutcome

T = TypeVar("T")

NULL_VALUE_MESSAGE = "Value is null."
FALSE_CONDITION_MESSAGE = "Condition is false."


def to_outcome(
    value: Optional[T], error_message: str = NULL_VALUE_MESSAGE
) -> ValueOutcome[T]:
    """Wrap an optional value.

    ``None`` becomes a failure explained by ``error_message``. Every other
    value, falsy ones like ``0``, ``""`` and ``False`` included, becomes a
    success carrying it.
    """
    if value is not None:
        return ValueOutcome.success(value)
    return ValueOutcome.failure(error_message)


def condition_to_outcome(
    condition: bool, error_message: str = FALSE_CONDITION_MESSAGE
) -> Outcome:
    """Turn a boolean check into a value-less outcome."""
    if condition:
        return Outcome.success()
    return Outcome.failure(error_message)
