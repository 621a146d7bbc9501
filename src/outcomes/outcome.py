"""Outcome types for explicit success/failure handling without exceptions.

An operation reports how it went as a value instead of raising:
``Outcome`` for operations that produce nothing, ``ValueOutcome[T]`` for
operations that produce a ``T``. A failure always carries a human-readable
diagnostic. Combinators chain, transform, branch on and observe outcomes,
and every combinator has a coroutine counterpart suffixed ``_async`` that
accepts plain or ``async def`` callables alike.

Usage:
    outcome = (
        Outcome.success()
        .then(check_permissions)
        .map(load_profile)
        .map(lambda profile: profile.name)
        .on_failure(print)
    )
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    Iterator,
    Optional,
    TypeVar,
    Union,
)

from src.outcomes.errors import FailedOutcomeError, InvalidOutcomeError

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
O = TypeVar("O", bound="Outcome")

UNKNOWN_ERROR = "Operation failed with unknown error."
UNKNOWN_ACCESS_ERROR = "An unknown error occurred."

MaybeAwaitable = Union[R, Awaitable[R]]


async def _settle(value: MaybeAwaitable[R]) -> R:
    """Await ``value`` when a callable handed back an awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value  # type: ignore[return-value]


def _skip(*_: Any) -> None:
    return None


@dataclass(frozen=True, slots=True, eq=False)
class Outcome:
    """Result of an operation that produces no value.

    Create instances with ``Outcome.success()`` or ``Outcome.failure(msg)``.
    The constructor rejects a success with a diagnostic and a failure
    without a non-blank one. Outcomes are hashable as long as the value a
    ``ValueOutcome`` carries is hashable.
    """

    succeeded: bool
    diagnostic: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.succeeded, bool):
            raise InvalidOutcomeError(
                f"Outcome state must be a bool, got {type(self.succeeded).__name__}"
            )
        if self.succeeded:
            if self.diagnostic is not None:
                raise InvalidOutcomeError(
                    "Successful outcome must not carry a diagnostic"
                )
        elif not isinstance(self.diagnostic, str) or not self.diagnostic.strip():
            raise InvalidOutcomeError("Failed outcome must carry a non-blank diagnostic")

    @staticmethod
    def success() -> Outcome:
        """Create a successful outcome."""
        return Outcome(True)

    @staticmethod
    def failure(diagnostic: str) -> Outcome:
        """Create a failed outcome explained by ``diagnostic``."""
        return Outcome(False, diagnostic)

    @property
    def failed(self) -> bool:
        return not self.succeeded

    def _failure_diagnostic(self) -> str:
        # Construction guarantees a diagnostic on failure; the fallback is never hit.
        return self.diagnostic if self.diagnostic is not None else UNKNOWN_ERROR

    def _payload(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Outcome):
            return NotImplemented
        return (self.succeeded, self.diagnostic, self._payload()) == (
            other.succeeded,
            other.diagnostic,
            other._payload(),
        )

    def __hash__(self) -> int:
        return hash((self.succeeded, self.diagnostic, self._payload()))

    def as_tuple(self) -> tuple[bool, Optional[str]]:
        """Return ``(succeeded, diagnostic)``."""
        return (self.succeeded, self.diagnostic)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.as_tuple())

    def __str__(self) -> str:
        return "Success" if self.succeeded else f"Failure: {self.diagnostic}"

    # --- Branching ---

    def match(
        self, on_success: Callable[[], R], on_failure: Callable[[str], R]
    ) -> R:
        """Call exactly one branch and return what it returns.

        ``on_failure`` receives the diagnostic.
        """
        if self.succeeded:
            return on_success()
        return on_failure(self._failure_diagnostic())

    async def match_async(
        self,
        on_success: Callable[..., MaybeAwaitable[R]],
        on_failure: Callable[[str], MaybeAwaitable[R]],
    ) -> R:
        """Coroutine form of ``match``; either branch may be a coroutine function."""
        return await _settle(self.match(on_success, on_failure))

    # --- Sequencing ---

    def then(self, step: Callable[[], O]) -> O:
        """Run ``step`` after a success and return its outcome as-is.

        After a failure ``step`` is never called; the result is a
        ``ValueOutcome`` failure with the original diagnostic, so it stands
        in for whichever kind ``step`` would have produced.
        """
        return Outcome.match(self, step, ValueOutcome.failure)  # type: ignore[arg-type]

    async def then_async(self, step: Callable[[], MaybeAwaitable[O]]) -> O:
        return await _settle(self.then(step))  # type: ignore[arg-type]

    def map(self, step: Callable[[], ValueOutcome[U]]) -> ValueOutcome[U]:
        """Like ``then``, for a step that produces a value-carrying outcome."""
        return self.match(step, ValueOutcome.failure)

    async def map_async(
        self, step: Callable[[], MaybeAwaitable[ValueOutcome[U]]]
    ) -> ValueOutcome[U]:
        return await _settle(self.map(step))  # type: ignore[arg-type]

    # --- Side effects ---

    def on_success(self: O, effect: Callable[..., Any]) -> O:
        """Call ``effect`` after a success and return this outcome unchanged.

        A ``ValueOutcome`` passes its carried value to ``effect``.
        """
        self.match(effect, _skip)
        return self

    async def on_success_async(self: O, effect: Callable[..., Any]) -> O:
        await _settle(self.match(effect, _skip))
        return self

    def on_failure(self: O, effect: Callable[[str], Any]) -> O:
        """Call ``effect`` with the diagnostic after a failure; return this outcome."""
        self.match(_skip, effect)
        return self

    async def on_failure_async(self: O, effect: Callable[[str], Any]) -> O:
        await _settle(self.match(_skip, effect))
        return self

    def on_both(self: O, effect: Callable[[O], Any]) -> O:
        """Always call ``effect`` with this outcome; return it unchanged."""
        effect(self)
        return self

    async def on_both_async(self: O, effect: Callable[[O], Any]) -> O:
        await _settle(effect(self))
        return self

    def tap(self: O, effect: Callable[..., Any]) -> O:
        return self.on_success(effect)

    async def tap_async(self: O, effect: Callable[..., Any]) -> O:
        return await self.on_success_async(effect)

    def tap_error(self: O, effect: Callable[[str], Any]) -> O:
        return self.on_failure(effect)

    async def tap_error_async(self: O, effect: Callable[[str], Any]) -> O:
        return await self.on_failure_async(effect)

    # --- Error transformation ---

    def otherwise(self: O, error_mapper: Callable[[str], str]) -> O:
        """Replace the diagnostic of a failure; a success passes through.

        The new diagnostic must be non-blank like any other.
        """
        if self.succeeded:
            return self
        return type(self).failure(error_mapper(self._failure_diagnostic()))  # type: ignore[return-value]

    async def otherwise_async(
        self: O, error_mapper: Callable[[str], MaybeAwaitable[str]]
    ) -> O:
        if self.succeeded:
            return self
        diagnostic = await _settle(error_mapper(self._failure_diagnostic()))
        return type(self).failure(diagnostic)  # type: ignore[return-value]

    def map_error(self: O, error_mapper: Callable[[str], str]) -> O:
        return self.otherwise(error_mapper)

    async def map_error_async(
        self: O, error_mapper: Callable[[str], MaybeAwaitable[str]]
    ) -> O:
        return await self.otherwise_async(error_mapper)


@dataclass(frozen=True, slots=True, eq=False)
class ValueOutcome(Outcome, Generic[T]):
    """Result of an operation that produces a value of type ``T``.

    Create instances with ``ValueOutcome.success(value)`` or
    ``ValueOutcome.failure(msg)``. A success may carry ``None``; check
    ``has_value`` when that matters.
    """

    carried: Optional[T] = None

    def __post_init__(self) -> None:
        Outcome.__post_init__(self)
        if not self.succeeded and self.carried is not None:
            raise InvalidOutcomeError("Failed outcome must not carry a value")

    @staticmethod
    def success(value: T) -> ValueOutcome[T]:  # type: ignore[override]
        """Create a successful outcome carrying ``value``."""
        return ValueOutcome(True, None, value)

    @staticmethod
    def failure(diagnostic: str) -> ValueOutcome[Any]:
        """Create a failed outcome explained by ``diagnostic``."""
        return ValueOutcome(False, diagnostic)

    @property
    def value(self) -> T:
        """The carried value. Reading it from a failure is a programming error."""
        if self.failed:
            raise FailedOutcomeError(
                "Cannot access value on a failed outcome.", diagnostic=self.diagnostic
            )
        return self.carried  # type: ignore[return-value]

    @property
    def has_value(self) -> bool:
        return self.succeeded and self.carried is not None

    @property
    def value_or_default(self) -> Optional[T]:
        return self.carried if self.succeeded else None

    def value_or(self, default: T) -> T:
        return self.carried if self.succeeded else default  # type: ignore[return-value]

    def try_get_value(self) -> tuple[bool, Optional[T]]:
        """Return ``(True, value)`` on success and ``(False, None)`` on failure."""
        if self.succeeded:
            return (True, self.carried)
        return (False, None)

    def value_or_raise(self) -> T:
        """Return the value, raising ``FailedOutcomeError`` on failure.

        For call sites that already know the operation cannot have failed.
        The raised error's message is the diagnostic itself.
        """
        if self.failed:
            message = self.diagnostic if self.diagnostic is not None else UNKNOWN_ACCESS_ERROR
            raise FailedOutcomeError(message, diagnostic=self.diagnostic)
        return self.carried  # type: ignore[return-value]

    def _payload(self) -> tuple[Any, ...]:
        return (self.carried,) if self.succeeded else ()

    def as_tuple(self) -> tuple[bool, Optional[str], Optional[T]]:  # type: ignore[override]
        """Return ``(succeeded, diagnostic, carried)``; ``carried`` is None on failure."""
        return (self.succeeded, self.diagnostic, self.value_or_default)

    def __str__(self) -> str:
        if self.failed:
            return f"Failure: {self.diagnostic}"
        return f"Success({'null' if self.carried is None else self.carried})"

    def match(  # type: ignore[override]
        self, on_success: Callable[[T], R], on_failure: Callable[[str], R]
    ) -> R:
        """Call exactly one branch and return what it returns.

        ``on_success`` receives the carried value, ``on_failure`` the diagnostic.
        """
        if self.succeeded:
            return on_success(self.carried)  # type: ignore[arg-type]
        return on_failure(self._failure_diagnostic())

    def map(self, mapper: Callable[[T], U]) -> ValueOutcome[U]:  # type: ignore[override]
        """Transform the carried value; a failure keeps its diagnostic."""
        return self.match(
            lambda value: ValueOutcome.success(mapper(value)), ValueOutcome.failure
        )

    async def map_async(  # type: ignore[override]
        self, mapper: Callable[[T], MaybeAwaitable[U]]
    ) -> ValueOutcome[U]:
        if self.failed:
            return ValueOutcome.failure(self._failure_diagnostic())
        return ValueOutcome.success(await _settle(mapper(self.carried)))  # type: ignore[arg-type]
