"""Tests for spellclock_cooldown.systems — make_cooldown_handler."""
from __future__ import annotations

import logging

from spellclock import Replay, ReplayClock, ReplayConfig, ReplayContext

from spellclock_cooldown.catalog import AbilityCatalog
from spellclock_cooldown.engine import CooldownEngine
from spellclock_cooldown.systems import make_cooldown_handler
from spellclock_cooldown.types import AbilityDef

PLAYER = 7
SPELL = 100


def _engine() -> CooldownEngine:
    catalog = AbilityCatalog()
    catalog.define(AbilityDef(ability_id=SPELL, name="Spell", cooldown=1000))
    return CooldownEngine(catalog)


def _ctx(timestamp: float) -> ReplayContext:
    return ReplayContext(timestamp=timestamp, fight_duration=timestamp, event_index=0)


def _cast(timestamp: float, source: int = PLAYER) -> dict:
    return {"type": "cast", "timestamp": timestamp, "sourceID": source, "ability": {"guid": SPELL}}


class TestCooldownHandler:
    def test_cast_starts_cooldown(self) -> None:
        engine = _engine()
        handler = make_cooldown_handler(engine)
        handler(_cast(0), _ctx(0))
        assert engine.is_on_cooldown(SPELL)

    def test_non_cast_events_only_sweep(self) -> None:
        engine = _engine()
        handler = make_cooldown_handler(engine)
        handler({"type": "damage", "timestamp": 0, "ability": {"guid": SPELL}}, _ctx(0))
        assert not engine.is_on_cooldown(SPELL)

    def test_other_sources_ignored_when_player_set(self) -> None:
        engine = _engine()
        handler = make_cooldown_handler(engine, ReplayConfig(player_id=PLAYER))

        handler(_cast(0, source=8), _ctx(0))
        assert not engine.is_on_cooldown(SPELL)

        handler(_cast(10), _ctx(10))
        assert engine.is_on_cooldown(SPELL)

    def test_custom_cast_types(self) -> None:
        engine = _engine()
        handler = make_cooldown_handler(engine, ReplayConfig(cast_types=("applybuff",)))

        handler(_cast(0), _ctx(0))
        assert not engine.is_on_cooldown(SPELL)

        handler({"type": "applybuff", "timestamp": 5, "ability": {"guid": SPELL}}, _ctx(5))
        assert engine.is_on_cooldown(SPELL)

    def test_cast_after_expiry_is_not_a_desync(self) -> None:
        engine = _engine()
        handler = make_cooldown_handler(engine)

        handler(_cast(0), _ctx(0))
        handler(_cast(1001), _ctx(1001))

        assert engine.desyncs == []
        assert engine.cooldown_remaining(SPELL, 1001) == 1000

    def test_early_recast_is_a_desync(self) -> None:
        engine = _engine()
        handler = make_cooldown_handler(engine)

        handler(_cast(0), _ctx(0))
        handler(_cast(1000), _ctx(1000))

        assert len(engine.desyncs) == 1

    def test_diagnostics_follow_replay_clock(self, caplog) -> None:
        """Desync times are measured from the replay clock's fight start."""
        engine = _engine()
        replay = Replay(clock=ReplayClock(start_timestamp=0))
        replay.add_handler(make_cooldown_handler(engine))

        with caplog.at_level(logging.WARNING, logger="spellclock_cooldown.engine"):
            replay.run([_cast(61_000), _cast(61_500)])

        assert engine.fight_start == 0
        assert caplog.records[0].getMessage().startswith("1:01 Spell")
