"""Replay handler factory for cooldown tracking."""
from __future__ import annotations

from typing import TYPE_CHECKING

from spellclock import ReplayConfig, event_source_id, event_type

from spellclock_cooldown.engine import CooldownEngine

if TYPE_CHECKING:
    from spellclock import Event, Handler, ReplayContext


def make_cooldown_handler(
    engine: CooldownEngine,
    config: ReplayConfig | None = None,
) -> Handler:
    """Return a handler that drives ``engine`` from the event stream.

    Per event:
    1. Align the engine's diagnostic fight start with the replay clock
    2. Sweep cooldowns that ended before the event
    3. Start a cooldown if the event is a cast by the tracked player

    Sweeping first keeps a cast that lands after an expiry from being
    reported as a desync.
    """
    if config is None:
        config = ReplayConfig()

    def cooldown_handler(event: Event, ctx: ReplayContext) -> None:
        engine.fight_start = ctx.timestamp - ctx.fight_duration
        engine.on_any_event(event)
        if config.is_player_cast(event_type(event), event_source_id(event)):
            engine.on_cast(event)

    return cooldown_handler
