"""Basic outcome chain example.

Demonstrates validating input, chaining dependent steps, and reporting
failures without raising exceptions.

Usage:
    python examples/basic_chain.py
"""

import logging

from src.outcomes import Outcome, ValueOutcome, condition_to_outcome, to_outcome
from src.outcomes.observers import configure_logging, log_failure

logger = logging.getLogger("examples.basic_chain")

USERS = {
    "ada": {"email": "ada@example.com", "active": True},
    "bob": {"email": None, "active": True},
    "cy": {"email": "cy@example.com", "active": False},
}


def find_user(name: str) -> ValueOutcome[dict]:
    return to_outcome(USERS.get(name), f"no user named {name!r}")


def check_active(user: dict) -> Outcome:
    return condition_to_outcome(user["active"], "account is disabled")


def contact_address(name: str) -> ValueOutcome[str]:
    return (
        find_user(name)
        .match(
            lambda user: check_active(user).map(
                lambda: to_outcome(user["email"], "no email on file")
            ),
            ValueOutcome.failure,
        )
        .otherwise(lambda diagnostic: f"cannot contact {name}: {diagnostic}")
        .on_failure(log_failure(logger, message="contact lookup"))
    )


def main() -> None:
    configure_logging()

    for name in ["ada", "bob", "cy", "dee"]:
        ok, diagnostic, address = contact_address(name)
        print(f"{name}: {address if ok else diagnostic}")


if __name__ == "__main__":
    main()
