"""Logical clock driven by event timestamps."""

from __future__ import annotations

from spellclock.types import ReplayContext


class ReplayClock:
    def __init__(self, start_timestamp: float | None = None) -> None:
        self._start = start_timestamp
        self._current = start_timestamp if start_timestamp is not None else 0
        self._event_index = -1

    @property
    def start_timestamp(self) -> float | None:
        return self._start

    @property
    def current_timestamp(self) -> float:
        return self._current

    @property
    def fight_duration(self) -> float:
        if self._start is None:
            return 0
        return max(0, self._current - self._start)

    @property
    def event_index(self) -> int:
        return self._event_index

    def advance_to(self, timestamp: float) -> float:
        """Move to ``timestamp``. Ordering is the caller's responsibility."""
        if self._start is None:
            self._start = timestamp
        self._current = timestamp
        return self._current

    def next_event(self) -> int:
        self._event_index += 1
        return self._event_index

    def context(self) -> ReplayContext:
        return ReplayContext(
            timestamp=self._current,
            fight_duration=self.fight_duration,
            event_index=self._event_index,
        )

    def reset(self, start_timestamp: float | None = None) -> None:
        self._start = start_timestamp
        self._current = start_timestamp if start_timestamp is not None else 0
        self._event_index = -1


def format_duration(milliseconds: float) -> str:
    """Format a millisecond duration as ``m:ss``.

    >>> format_duration(83_400)
    '1:23'
    """
    sign = "-" if milliseconds < 0 else ""
    total_seconds = int(abs(milliseconds) // 1000)
    minutes, seconds = divmod(total_seconds, 60)
    return f"{sign}{minutes}:{seconds:02d}"
