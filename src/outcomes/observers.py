"""Logging effects for the side-effecting combinators.

Each factory returns a callable meant to be handed to ``on_success``,
``on_failure``/``tap_error`` or ``on_both``. The effects only read the
outcome; they never change it.

Usage:
    load_user(user_id).on_failure(log_failure(message="user lookup failed"))
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from src.outcomes.config import OutcomesConfig
from src.outcomes.outcome import Outcome, ValueOutcome

_MISSING = object()


def _resolve(
    logger: Optional[logging.Logger], config: Optional[OutcomesConfig]
) -> tuple[logging.Logger, OutcomesConfig]:
    cfg = config or OutcomesConfig()
    return logger or logging.getLogger(cfg.logger_name), cfg


def log_success(
    logger: Optional[logging.Logger] = None,
    *,
    message: str = "operation succeeded",
    config: Optional[OutcomesConfig] = None,
) -> Callable[..., None]:
    """Effect for ``on_success``; accepts the carried value when there is one."""
    log, cfg = _resolve(logger, config)
    level = cfg.success_log_level.numeric

    def effect(value: Any = _MISSING) -> None:
        if value is _MISSING or not cfg.log_values:
            log.log(level, message)
        else:
            log.log(level, "%s: %r", message, value)

    return effect


def log_failure(
    logger: Optional[logging.Logger] = None,
    *,
    message: str = "operation failed",
    config: Optional[OutcomesConfig] = None,
) -> Callable[[str], None]:
    """Effect for ``on_failure``; logs the diagnostic."""
    log, cfg = _resolve(logger, config)
    level = cfg.failure_log_level.numeric

    def effect(diagnostic: str) -> None:
        log.log(level, "%s: %s", message, diagnostic)

    return effect


def log_outcome(
    logger: Optional[logging.Logger] = None,
    *,
    message: str = "operation",
    config: Optional[OutcomesConfig] = None,
) -> Callable[[Outcome], None]:
    """Effect for ``on_both``; logs successes and failures at their own levels."""
    log, cfg = _resolve(logger, config)

    def effect(outcome: Outcome) -> None:
        if outcome.failed:
            log.log(
                cfg.failure_log_level.numeric,
                "%s failed: %s",
                message,
                outcome.diagnostic,
            )
        elif cfg.log_values and isinstance(outcome, ValueOutcome):
            log.log(
                cfg.success_log_level.numeric,
                "%s succeeded: %r",
                message,
                outcome.carried,
            )
        else:
            log.log(cfg.success_log_level.numeric, "%s succeeded", message)

    return effect


def configure_logging(config: Optional[OutcomesConfig] = None) -> None:
    """Set up root logging from configuration.

    Existing root handlers are kept; only the level is always applied.
    """
    cfg = config or OutcomesConfig()
    logging.basicConfig(format=cfg.log_format)
    logging.getLogger().setLevel(cfg.log_level.numeric)
