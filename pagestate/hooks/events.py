"""Structured event logging hooks."""

import logging
from typing import Any, Callable, Dict, Optional

EventLogger = Callable[[str, Dict[str, Any]], None]


def noop_logger(event: str, fields: Dict[str, Any]) -> None:
    """Discard an event."""


def stdlib_event_logger(
    logger: Optional[logging.Logger] = None,
    level: int = logging.INFO
) -> EventLogger:
    """Build an event hook that forwards events to a standard library logger.

    Args:
        logger: Target logger (defaults to the "pagestate.events" logger)
        level: Level used for every event

    Returns:
        Callable accepting (event, fields)
    """
    target = logger or logging.getLogger("pagestate.events")

    def log_event(event: str, fields: Dict[str, Any]) -> None:
        target.log(level, f"{event}: {fields}", extra={"event": event, "fields": fields})

    return log_event
