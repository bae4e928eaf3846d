"""spellclock-signal - In-process notifier for replay modules."""
from __future__ import annotations

from spellclock_signal.bus import SignalBus
from spellclock_signal.systems import make_signal_handler

__all__ = ["SignalBus", "make_signal_handler"]
