"""Replay handler factory for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING

from spellclock_signal.bus import SignalBus

if TYPE_CHECKING:
    from spellclock import Event, Handler, ReplayContext


def make_signal_handler(bus: SignalBus) -> Handler:
    """Flush ``bus`` after every event. Register after the publishers."""

    def signal_handler(event: Event, ctx: ReplayContext) -> None:
        bus.flush()

    return signal_handler
