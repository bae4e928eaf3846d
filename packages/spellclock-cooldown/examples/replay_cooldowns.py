"""Cooldown replay -- track charges through a short combat log.

Demonstrates:
- Configuring an ability catalog (including a multi-charge ability)
- Wiring the cooldown engine and the signal bus into a replay
- Subscribing to cooldown signals
- Querying availability between events
- Sequential recharge and the desync diagnostic

Run: python -m examples.replay_cooldowns
"""

import logging

from spellclock import Replay, ReplayConfig, configure_logging, format_duration
from spellclock.types import Event, ReplayContext
from spellclock_signal import SignalBus, make_signal_handler

from spellclock_cooldown import (
    AbilityCatalog,
    AbilityDef,
    CooldownEngine,
    CooldownSignal,
    make_cooldown_handler,
)

PLAYER = 1
RENEWING_MIST = 115151
RISING_SUN_KICK = 107428
VIVIFY = 116670

COMBAT_LOG: list[Event] = [
    {"type": "cast", "timestamp": 0, "sourceID": PLAYER, "ability": {"guid": RENEWING_MIST}},
    {"type": "cast", "timestamp": 1_500, "sourceID": PLAYER, "ability": {"guid": RENEWING_MIST}},
    {"type": "cast", "timestamp": 3_000, "sourceID": PLAYER, "ability": {"guid": RISING_SUN_KICK}},
    {"type": "cast", "timestamp": 4_500, "sourceID": PLAYER, "ability": {"guid": VIVIFY}},
    {"type": "heal", "timestamp": 9_200, "sourceID": PLAYER},
    {"type": "cast", "timestamp": 10_000, "sourceID": PLAYER, "ability": {"guid": RISING_SUN_KICK}},
    {"type": "heal", "timestamp": 18_500, "sourceID": PLAYER},
]


def build_catalog() -> AbilityCatalog:
    catalog = AbilityCatalog()
    catalog.define(
        AbilityDef(ability_id=RENEWING_MIST, name="Renewing Mist", cooldown=9_000, max_charges=2)
    )
    catalog.define(AbilityDef(ability_id=RISING_SUN_KICK, name="Rising Sun Kick", cooldown=12_000))
    catalog.define(AbilityDef(ability_id=VIVIFY, name="Vivify"))
    return catalog


def main() -> None:
    configure_logging(logging.WARNING)
    print("=== Cooldown replay ===\n")

    catalog = build_catalog()
    bus = SignalBus()
    engine = CooldownEngine(catalog, notifier=bus)
    replay = Replay(config=ReplayConfig(player_id=PLAYER))

    def print_signal(signal_name: str, data: dict) -> None:
        print(
            f"  {format_duration(data['timestamp'])}  {signal_name:<20} "
            f"{catalog.spell_name(data['ability_id'])}"
        )

    for signal_name in CooldownSignal.ALL:
        bus.subscribe(signal_name, print_signal)

    def availability(event: Event, ctx: ReplayContext) -> None:
        remaining = engine.cooldown_remaining(RENEWING_MIST, ctx.timestamp)
        print(
            f"    event #{ctx.event_index}: Renewing Mist available="
            f"{engine.is_available(RENEWING_MIST)} charges spent="
            f"{engine.charges_on_cooldown(RENEWING_MIST)} remaining={remaining}"
        )

    replay.add_handler(make_cooldown_handler(engine, replay.config))
    replay.add_handler(make_signal_handler(bus))
    replay.add_handler(availability)

    replay.run(COMBAT_LOG)

    print(f"\nDone after {replay.events_processed} events "
          f"({format_duration(replay.clock.fight_duration)} of fight).")
    print(f"Desyncs reported: {len(engine.desyncs)}")


if __name__ == "__main__":
    main()
