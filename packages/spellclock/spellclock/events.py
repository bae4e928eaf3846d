"""Loading and ordering of combat event logs."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from spellclock.types import Event, EventLogError, event_timestamp


def load_events(path: str | Path) -> list[dict[str, Any]]:
    """Read events from a JSON array or a JSON-Lines file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EventLogError(str(path), f"cannot read event log ({exc.strerror})") from exc

    stripped = text.lstrip()
    if stripped.startswith("["):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise EventLogError(str(path), f"invalid JSON at line {exc.lineno}") from exc
        events = data
    else:
        events = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError as exc:
                raise EventLogError(str(path), f"invalid JSON at line {lineno}") from exc

    for index, event in enumerate(events):
        if not isinstance(event, dict):
            raise EventLogError(str(path), f"event #{index} is not an object")
    return events


def sort_events(events: Iterable[Event]) -> list[Event]:
    """Stable sort by timestamp. Events without one stay at the front."""

    def key(event: Event) -> tuple[int, float]:
        ts = event_timestamp(event)
        if ts is None:
            return (0, 0)
        return (1, ts)

    return sorted(events, key=key)
