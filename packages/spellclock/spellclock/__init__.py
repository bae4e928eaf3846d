"""spellclock - Replay a combat log on a logical clock."""

import logging

from spellclock.clock import ReplayClock, format_duration
from spellclock.config import ReplayConfig
from spellclock.events import load_events, sort_events
from spellclock.replay import Replay
from spellclock.types import (
    Event,
    EventLogError,
    Handler,
    ReplayContext,
    ReplayError,
    event_ability_id,
    event_source_id,
    event_timestamp,
    event_type,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> None:
    """Send spellclock diagnostics to stderr. Intended for scripts."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    for name in ("spellclock", "spellclock_signal", "spellclock_cooldown"):
        log = logging.getLogger(name)
        log.addHandler(handler)
        log.setLevel(level)


__all__ = [
    "Replay",
    "ReplayClock",
    "ReplayConfig",
    "ReplayContext",
    "Event",
    "Handler",
    "ReplayError",
    "EventLogError",
    "configure_logging",
    "event_ability_id",
    "event_source_id",
    "event_timestamp",
    "event_type",
    "format_duration",
    "load_events",
    "sort_events",
]
