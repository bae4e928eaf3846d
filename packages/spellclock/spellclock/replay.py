"""Replay - feeds an ordered event stream through handlers."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable

from spellclock.clock import ReplayClock
from spellclock.config import ReplayConfig
from spellclock.types import Event, Handler, ReplayContext, event_timestamp

logger = logging.getLogger(__name__)


class Replay:
    def __init__(
        self,
        config: ReplayConfig | None = None,
        clock: ReplayClock | None = None,
    ) -> None:
        self._config = config if config is not None else ReplayConfig()
        self._clock = clock if clock is not None else ReplayClock()
        self._handlers: list[Handler] = []
        self._start_hooks: list[Callable[[ReplayContext], None]] = []
        self._stop_hooks: list[Callable[[ReplayContext], None]] = []
        self._events_processed = 0

    @property
    def clock(self) -> ReplayClock:
        return self._clock

    @property
    def config(self) -> ReplayConfig:
        return self._config

    @property
    def events_processed(self) -> int:
        return self._events_processed

    def add_handler(self, handler: Handler) -> None:
        self._handlers.append(handler)

    def on_start(self, hook: Callable[[ReplayContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[ReplayContext], None]) -> None:
        self._stop_hooks.append(hook)

    def feed(self, event: Event) -> ReplayContext:
        """Process a single event and return the context handlers saw.

        Events without a timestamp leave the clock where it is; handlers
        still receive them and decide for themselves.
        """
        timestamp = event_timestamp(event)
        if timestamp is not None:
            self._clock.advance_to(timestamp)
        self._clock.next_event()
        ctx = self._clock.context()
        for handler in self._handlers:
            self._guard(handler, ctx, "Handler", event)
        self._events_processed += 1
        return ctx

    def run(self, events: Iterable[Event]) -> int:
        """Replay ``events`` in order. Returns the number processed."""
        processed = 0
        ctx = self._clock.context()
        for hook in self._start_hooks:
            self._guard(hook, ctx, "Start hook")

        for event in events:
            self.feed(event)
            processed += 1

        ctx = self._clock.context()
        for hook in self._stop_hooks:
            self._guard(hook, ctx, "Stop hook")
        logger.debug("Replay finished after %d events", processed)
        return processed

    def _guard(
        self, fn: Callable[..., None], ctx: ReplayContext, label: str, *args: Event
    ) -> None:
        """Call ``fn(*args, ctx)``, logging failures unless the replay is strict."""
        if self._config.strict:
            fn(*args, ctx)
            return
        try:
            fn(*args, ctx)
        except Exception:
            # One misbehaving callback must not stop the rest of the timeline.
            logger.exception(
                "%s %r failed on event #%d at %s",
                label,
                getattr(fn, "__name__", fn),
                ctx.event_index,
                ctx.timestamp,
            )
