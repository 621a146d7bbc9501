"""CLI for exploring outcome chains.

Provides command-line access to:
- demo: Run the sample chains and print their outcomes
- parse: Validate an integer through a conversion chain
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Callable, Optional

from src.outcomes.config import LogLevel, OutcomesConfig
from src.outcomes.conversion import condition_to_outcome, to_outcome
from src.outcomes.observers import configure_logging, log_outcome
from src.outcomes.outcome import Outcome, ValueOutcome

logger = logging.getLogger(__name__)


async def _fetch_quota(user: str) -> ValueOutcome[int]:
    await asyncio.sleep(0)
    return ValueOutcome.success(len(user) * 10)


async def _async_chain() -> ValueOutcome[int]:
    checked = await Outcome.success().map_async(lambda: _fetch_quota("ada"))
    return await checked.map_async(_double_async)


async def _double_async(value: int) -> int:
    await asyncio.sleep(0)
    return value * 2


SAMPLE_SCENARIOS: dict[str, tuple[str, Callable[[], Outcome]]] = {
    "map-success": (
        "success(42).map(v * 2)",
        lambda: ValueOutcome.success(42).map(lambda v: v * 2),
    ),
    "map-failure": (
        'failure("bad input").map(v * 2)',
        lambda: ValueOutcome.failure("bad input").map(lambda v: v * 2),
    ),
    "short-circuit": (
        'success().then(failure("step2 failed")).then(success)',
        lambda: Outcome.success()
        .then(lambda: Outcome.failure("step2 failed"))
        .then(Outcome.success),
    ),
    "match": (
        "success(5).match(s * 2, -1)",
        lambda: ValueOutcome.success(5).match(
            lambda s: ValueOutcome.success(s * 2),
            lambda _: ValueOutcome.success(-1),
        ),
    ),
    "otherwise": (
        'failure("a").otherwise(m + "!")',
        lambda: Outcome.failure("a").otherwise(lambda m: m + "!"),
    ),
    "to-outcome": (
        'to_outcome(None, "missing")',
        lambda: to_outcome(None, "missing"),
    ),
    "async-chain": (
        "await map_async(fetch_quota).map_async(double)",
        lambda: asyncio.run(_async_chain()),
    ),
}


def describe(outcome: Outcome) -> dict[str, Any]:
    """Flatten an outcome into a dict for display."""
    info: dict[str, Any] = {
        "succeeded": outcome.succeeded,
        "diagnostic": outcome.diagnostic,
    }
    if isinstance(outcome, ValueOutcome):
        info["value"] = outcome.value_or_default
    return info


def parse_bounded_int(text: str, minimum: int = 0) -> ValueOutcome[int]:
    """Parse ``text`` as an integer no smaller than ``minimum``."""

    def parse(raw: str) -> ValueOutcome[int]:
        try:
            return ValueOutcome.success(int(raw))
        except ValueError:
            return ValueOutcome.failure("not an integer")

    def bounded(number: int) -> ValueOutcome[int]:
        return condition_to_outcome(
            number >= minimum, f"{number} is below the minimum of {minimum}"
        ).map(lambda: ValueOutcome.success(number))

    return (
        to_outcome(text.strip() or None, "no input given")
        .match(parse, ValueOutcome.failure)
        .match(bounded, ValueOutcome.failure)
        .otherwise(lambda diagnostic: f"Invalid input {text!r}: {diagnostic}")
    )


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Outcomes - explicit success/failure values and their combinators"
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Override the configured log level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run the sample chains")
    demo_parser.add_argument(
        "--scenario",
        choices=sorted(SAMPLE_SCENARIOS),
        default=None,
        help="Run a single scenario",
    )
    demo_parser.add_argument("--json", action="store_true", help="Print JSON only")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Validate an integer")
    parse_parser.add_argument("text", help="Text to parse")
    parse_parser.add_argument("--minimum", type=int, default=0, help="Smallest accepted value")

    args = parser.parse_args()

    config = OutcomesConfig()
    if args.log_level:
        config = config.model_copy(update={"log_level": LogLevel(args.log_level)})
    configure_logging(config)

    if args.command == "demo":
        run_demo(args.scenario, as_json=args.json, config=config)
    elif args.command == "parse":
        run_parse(args.text, args.minimum)
    else:
        parser.print_help()
        sys.exit(1)


def run_demo(
    scenario: Optional[str] = None,
    *,
    as_json: bool = False,
    config: Optional[OutcomesConfig] = None,
) -> None:
    """Run the sample chains and print each outcome."""
    names = [scenario] if scenario else list(SAMPLE_SCENARIOS)
    results = []
    for name in names:
        expression, build = SAMPLE_SCENARIOS[name]
        outcome = build().on_both(log_outcome(logger, message=name, config=config))
        results.append({"scenario": name, "expression": expression, **describe(outcome)})

    if as_json:
        print(json.dumps(results, indent=2))
        return

    print("=" * 60)
    print("Outcomes - Demo")
    print("=" * 60)
    print()
    for i, result in enumerate(results, 1):
        print(f"  [{i}] {result['scenario']}: {result['expression']}")
        state = "success" if result["succeeded"] else "failure"
        detail = result.get("value") if result["succeeded"] else result["diagnostic"]
        print(f"      -> {state}: {detail}")
        print()
    print("=" * 60)


def run_parse(text: str, minimum: int = 0) -> None:
    """Parse one integer and print the outcome as JSON."""
    outcome = parse_bounded_int(text, minimum)
    print(json.dumps({"input": text, **describe(outcome)}, indent=2))
    if outcome.failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
