"""Queued pub/sub bus, flushed once per replayed event."""
from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Fire-and-forget notifier.

    ``publish`` only queues, so a publisher never waits on its consumers.
    Queued signals are dispatched by ``flush`` in publish order.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._wildcard: list[_Handler] = []
        self._queue: list[tuple[str, dict[str, Any]]] = []

    @property
    def pending(self) -> int:
        return len(self._queue)

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def subscribe_all(self, handler: _Handler) -> None:
        """Receive every signal regardless of name."""
        self._wildcard.append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> int:
        """Dispatch queued signals. Returns how many were dispatched.

        Signals published by handlers during the flush wait for the next one.
        """
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            handlers = self._subscribers.get(signal_name, []) + self._wildcard
            for handler in handlers:
                try:
                    handler(signal_name, data)
                except Exception:
                    logger.exception("Subscriber %r failed on %r", handler, signal_name)
        return len(snapshot)

    def clear(self) -> None:
        self._queue.clear()
