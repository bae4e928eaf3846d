"""Shared type aliases, event accessors and errors for replays."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

Event = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class ReplayContext:
    timestamp: float
    fight_duration: float
    event_index: int


Handler = Callable[[Event, ReplayContext], None]


class ReplayError(Exception):
    """Base class for replay failures."""


class EventLogError(ReplayError):
    """Raised when an event log or catalog file cannot be read."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def event_timestamp(event: Any) -> float | None:
    """Timestamp of an event, or None if the event has no usable one."""
    if not isinstance(event, Mapping):
        return None
    ts = event.get("timestamp")
    return ts if _is_number(ts) else None


def event_type(event: Any) -> str | None:
    if not isinstance(event, Mapping):
        return None
    kind = event.get("type")
    return kind if isinstance(kind, str) else None


def event_ability_id(event: Any) -> int | None:
    """Ability id at ``event["ability"]["guid"]``, or None if absent."""
    if not isinstance(event, Mapping):
        return None
    ability = event.get("ability")
    if not isinstance(ability, Mapping):
        return None
    guid = ability.get("guid")
    if isinstance(guid, int) and not isinstance(guid, bool):
        return guid
    return None


def event_source_id(event: Any) -> Any:
    if not isinstance(event, Mapping):
        return None
    return event.get("sourceID")
