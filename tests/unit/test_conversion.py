"""Tests for converting plain values into outcomes."""

import pytest
from hypothesis import given, strategies as st

from src.outcomes.conversion import (
    FALSE_CONDITION_MESSAGE,
    NULL_VALUE_MESSAGE,
    condition_to_outcome,
    to_outcome,
)
from src.outcomes.errors import InvalidOutcomeError
from src.outcomes.outcome import Outcome, ValueOutcome


class TestToOutcome:
    def test_value_becomes_success(self) -> None:
        result = to_outcome("hi")
        assert result.succeeded is True
        assert result.value == "hi"

    def test_none_becomes_failure(self) -> None:
        result = to_outcome(None, "missing")
        assert result.succeeded is False
        assert result.diagnostic == "missing"

    def test_default_message(self) -> None:
        assert to_outcome(None).diagnostic == NULL_VALUE_MESSAGE == "Value is null."

    @pytest.mark.parametrize("value", [0, "", False, [], 0.0])
    def test_falsy_values_succeed(self, value: object) -> None:
        result = to_outcome(value)
        assert result.succeeded is True
        assert result.value == value

    def test_blank_message_raises_for_none(self) -> None:
        with pytest.raises(InvalidOutcomeError):
            to_outcome(None, "")

    def test_returns_value_outcome(self) -> None:
        assert isinstance(to_outcome(1), ValueOutcome)

    @given(st.integers())
    def test_integers_round_trip(self, value: int) -> None:
        assert to_outcome(value) == ValueOutcome.success(value)


class TestConditionToOutcome:
    def test_true_is_success(self) -> None:
        assert condition_to_outcome(True) == Outcome.success()

    def test_false_is_failure(self) -> None:
        result = condition_to_outcome(False, "too small")
        assert result == Outcome.failure("too small")

    def test_default_message(self) -> None:
        assert condition_to_outcome(False).diagnostic == FALSE_CONDITION_MESSAGE

    def test_chains_into_value(self) -> None:
        result = condition_to_outcome(3 > 1).map(lambda: ValueOutcome.success(3))
        assert result == ValueOutcome.success(3)
