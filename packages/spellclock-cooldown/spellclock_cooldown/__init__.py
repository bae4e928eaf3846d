"""Cooldown and charge tracking for replayed abilities."""
from spellclock_cooldown.catalog import AbilityCatalog, load_catalog
from spellclock_cooldown.engine import CooldownEngine
from spellclock_cooldown.store import CooldownStore
from spellclock_cooldown.systems import make_cooldown_handler
from spellclock_cooldown.types import (
    AbilityDef,
    CooldownDesync,
    CooldownRecord,
    CooldownSignal,
    CooldownStateError,
)

__all__ = [
    "AbilityCatalog",
    "AbilityDef",
    "CooldownDesync",
    "CooldownEngine",
    "CooldownRecord",
    "CooldownSignal",
    "CooldownStateError",
    "CooldownStore",
    "load_catalog",
    "make_cooldown_handler",
]
