"""Tests for the synchronous combinators."""

from unittest.mock import MagicMock

import pytest
from hypothesis import given, strategies as st

from src.outcomes.errors import InvalidOutcomeError
from src.outcomes.outcome import Outcome, ValueOutcome

non_blank = st.text(min_size=1).filter(lambda s: s.strip())


def any_outcome() -> st.SearchStrategy[Outcome]:
    return st.one_of(
        st.just(Outcome.success()),
        non_blank.map(Outcome.failure),
        st.integers().map(ValueOutcome.success),
        st.none().map(ValueOutcome.success),
        non_blank.map(ValueOutcome.failure),
    )


class TestThen:
    def test_success_returns_next_as_is(self) -> None:
        nxt = ValueOutcome.success("loaded")
        assert Outcome.success().then(lambda: nxt) is nxt

    def test_failure_skips_next(self) -> None:
        step = MagicMock()
        result = Outcome.failure("first failed").then(step)
        step.assert_not_called()
        assert result == Outcome.failure("first failed")

    def test_failure_before_typed_step_is_value_outcome(self) -> None:
        step = MagicMock(return_value=ValueOutcome.success(1))
        result = Outcome.failure("no session").then(step)
        step.assert_not_called()
        assert isinstance(result, ValueOutcome)
        ok, diagnostic, value = result
        assert (ok, diagnostic, value) == (False, "no session", None)
        assert result.value_or_default is None
        assert result.try_get_value() == (False, None)

    @given(non_blank)
    def test_typed_failure_keeps_kind_and_diagnostic(self, diagnostic: str) -> None:
        result = ValueOutcome.failure(diagnostic).then(lambda: ValueOutcome.success("x"))
        assert isinstance(result, ValueOutcome)
        assert result.as_tuple() == (False, diagnostic, None)

    def test_chain_stops_at_first_failure(self) -> None:
        third = MagicMock(return_value=Outcome.success())
        result = (
            Outcome.success()
            .then(lambda: Outcome.failure("step2 failed"))
            .then(third)
        )
        third.assert_not_called()
        assert result.failed
        assert result.diagnostic == "step2 failed"

    def test_value_outcome_step_receives_no_argument(self) -> None:
        result = ValueOutcome.success(3).then(Outcome.success)
        assert result == Outcome.success()

    @given(non_blank)
    def test_failure_keeps_diagnostic(self, diagnostic: str) -> None:
        result = ValueOutcome.failure(diagnostic).then(Outcome.success)
        assert result.diagnostic == diagnostic


class TestMap:
    def test_map_value(self) -> None:
        assert ValueOutcome.success(42).map(lambda v: v * 2) == ValueOutcome.success(84)

    def test_map_changes_type(self) -> None:
        result = ValueOutcome.success(7).map(str)
        assert result.value == "7"

    def test_map_failure(self) -> None:
        mapper = MagicMock()
        result = ValueOutcome.failure("bad input").map(mapper)
        mapper.assert_not_called()
        assert result.failed
        assert result.diagnostic == "bad input"
        assert result.value_or_default is None

    def test_map_may_produce_none(self) -> None:
        result = ValueOutcome.success(1).map(lambda _: None)
        assert result.succeeded
        assert result.has_value is False

    def test_untyped_map_produces_value_outcome(self) -> None:
        result = Outcome.success().map(lambda: ValueOutcome.success("user"))
        assert result.value == "user"

    def test_untyped_map_failure_is_value_outcome(self) -> None:
        step = MagicMock()
        result = Outcome.failure("no session").map(step)
        step.assert_not_called()
        assert isinstance(result, ValueOutcome)
        assert result.diagnostic == "no session"

    def test_mapper_exceptions_propagate(self) -> None:
        with pytest.raises(ZeroDivisionError):
            ValueOutcome.success(1).map(lambda v: v / 0)


class TestMatch:
    def test_success_branch(self) -> None:
        assert ValueOutcome.success(5).match(lambda s: s * 2, lambda _: -1) == 10

    def test_failure_branch_gets_diagnostic(self) -> None:
        assert ValueOutcome.failure("oops").match(lambda s: s, lambda d: d.upper()) == "OOPS"

    def test_untyped_success_branch_takes_no_argument(self) -> None:
        assert Outcome.success().match(lambda: "yes", lambda _: "no") == "yes"

    def test_untyped_failure_branch(self) -> None:
        assert Outcome.failure("why").match(lambda: "yes", lambda d: d) == "why"

    def test_branches_may_change_carried_type(self) -> None:
        result = ValueOutcome.success(3).match(
            lambda n: ValueOutcome.success("x" * n),
            ValueOutcome.failure,
        )
        assert result == ValueOutcome.success("xxx")

    @given(any_outcome())
    def test_exactly_one_branch_runs(self, outcome: Outcome) -> None:
        on_success = MagicMock(return_value="s")
        on_failure = MagicMock(return_value="f")
        outcome.match(on_success, on_failure)
        assert on_success.call_count + on_failure.call_count == 1
        if outcome.succeeded:
            on_success.assert_called_once()
        else:
            on_failure.assert_called_once_with(outcome.diagnostic)


class TestSideEffects:
    def test_on_success_runs_for_success(self) -> None:
        effect = MagicMock()
        outcome = Outcome.success()
        assert outcome.on_success(effect) is outcome
        effect.assert_called_once_with()

    def test_on_success_passes_value(self) -> None:
        effect = MagicMock()
        ValueOutcome.success("hi").on_success(effect)
        effect.assert_called_once_with("hi")

    def test_on_success_skips_failure(self) -> None:
        effect = MagicMock()
        ValueOutcome.failure("x").on_success(effect)
        effect.assert_not_called()

    def test_on_failure_passes_diagnostic(self) -> None:
        effect = MagicMock()
        outcome = ValueOutcome.failure("broken")
        assert outcome.on_failure(effect) is outcome
        effect.assert_called_once_with("broken")

    def test_on_failure_skips_success(self) -> None:
        effect = MagicMock()
        ValueOutcome.success(1).on_failure(effect)
        effect.assert_not_called()

    def test_on_both_passes_outcome(self) -> None:
        effect = MagicMock()
        outcome = ValueOutcome.success(1)
        outcome.on_both(effect)
        effect.assert_called_once_with(outcome)

    def test_tap_aliases(self) -> None:
        seen: list[object] = []
        ValueOutcome.success(9).tap(seen.append).tap_error(seen.append)
        Outcome.failure("bad").tap(lambda: seen.append("never")).tap_error(seen.append)
        assert seen == [9, "bad"]

    def test_effect_return_value_ignored(self) -> None:
        outcome = ValueOutcome.success(1)
        assert outcome.on_success(lambda v: ValueOutcome.failure("ignored")) is outcome

    @given(any_outcome(), st.integers(min_value=1, max_value=5))
    def test_observation_never_changes_outcome(self, outcome: Outcome, times: int) -> None:
        observed = outcome
        for _ in range(times):
            observed = observed.on_success(lambda *_: None).on_failure(lambda _: None)
            observed = observed.on_both(lambda _: None)
        assert observed == outcome


class TestOtherwise:
    def test_success_unchanged(self) -> None:
        mapper = MagicMock()
        outcome = Outcome.success()
        assert outcome.otherwise(mapper) is outcome
        mapper.assert_not_called()

    def test_failure_diagnostic_replaced(self) -> None:
        assert Outcome.failure("a").otherwise(lambda m: m + "!").diagnostic == "a!"

    def test_keeps_value_outcome_kind(self) -> None:
        result = ValueOutcome.failure("a").otherwise(lambda m: f"wrapped: {m}")
        assert isinstance(result, ValueOutcome)
        assert result.diagnostic == "wrapped: a"

    def test_blank_replacement_raises(self) -> None:
        with pytest.raises(InvalidOutcomeError):
            Outcome.failure("a").otherwise(lambda _: " ")

    def test_map_error_alias(self) -> None:
        assert ValueOutcome.failure("a").map_error(str.upper) == ValueOutcome.failure("A")
        assert ValueOutcome.success(1).map_error(str.upper) == ValueOutcome.success(1)
