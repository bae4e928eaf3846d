"""Tests for make_signal_handler inside a replay."""
from __future__ import annotations

from spellclock import Replay

from spellclock_signal import SignalBus, make_signal_handler


def test_handler_flushes_after_each_event():
    replay = Replay()
    bus = SignalBus()
    delivered = []

    bus.subscribe("tick", lambda name, data: delivered.append(data["at"]))

    def publisher(event, ctx):
        bus.publish("tick", at=ctx.timestamp)

    replay.add_handler(publisher)
    replay.add_handler(make_signal_handler(bus))

    replay.feed({"timestamp": 10})
    assert delivered == [10]

    replay.feed({"timestamp": 20})
    assert delivered == [10, 20]
    assert bus.pending == 0


def test_handler_before_publisher_delays_delivery():
    replay = Replay()
    bus = SignalBus()
    delivered = []

    bus.subscribe("tick", lambda name, data: delivered.append(data["at"]))
    replay.add_handler(make_signal_handler(bus))
    replay.add_handler(lambda event, ctx: bus.publish("tick", at=ctx.timestamp))

    replay.feed({"timestamp": 10})
    assert delivered == []

    replay.feed({"timestamp": 20})
    assert delivered == [10]
