"""AbilityCatalog - configured cooldowns and charges."""
from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from spellclock import EventLogError

from spellclock_cooldown.types import AbilityDef

UNKNOWN_NAME = "???"


class AbilityCatalog:
    """Read-only lookups the cooldown engine makes about abilities."""

    def __init__(self) -> None:
        self._definitions: dict[int, AbilityDef] = {}

    def define(self, ability: AbilityDef) -> None:
        """Register an ability. Overwrites an existing id."""
        self._definitions[ability.ability_id] = ability

    def get(self, ability_id: int) -> AbilityDef:
        """Look up a definition. Raises KeyError if not defined."""
        if ability_id not in self._definitions:
            raise KeyError(ability_id)
        return self._definitions[ability_id]

    def has(self, ability_id: int) -> bool:
        return ability_id in self._definitions

    def remove(self, ability_id: int) -> None:
        if ability_id not in self._definitions:
            raise KeyError(ability_id)
        del self._definitions[ability_id]

    def defined_abilities(self) -> list[int]:
        return list(self._definitions)

    def max_charges(self, ability_id: int) -> int:
        defn = self._definitions.get(ability_id)
        return defn.max_charges if defn is not None else 1

    def expected_cooldown(self, ability_id: int) -> float | None:
        """Current cooldown duration, or None if the ability has none."""
        defn = self._definitions.get(ability_id)
        if defn is None:
            return None
        if callable(defn.cooldown):
            return defn.cooldown()
        return defn.cooldown

    def spell_name(self, ability_id: int) -> str:
        defn = self._definitions.get(ability_id)
        if defn is None or not defn.name:
            return UNKNOWN_NAME
        return defn.name

    @classmethod
    def from_config(cls, entries: Iterable[Mapping[str, Any]]) -> AbilityCatalog:
        """Build a catalog from dicts with ``id``, ``name``, ``cooldown``, ``charges``."""
        catalog = cls()
        for index, entry in enumerate(entries):
            if not isinstance(entry, Mapping) or "id" not in entry:
                raise ValueError(f"catalog entry #{index} has no 'id'")
            try:
                ability = AbilityDef(
                    ability_id=int(entry["id"]),
                    name=str(entry.get("name", "")),
                    cooldown=entry.get("cooldown"),
                    max_charges=int(entry.get("charges", 1)),
                )
            except (TypeError, ValueError) as exc:
                raise ValueError(f"catalog entry #{index} ({entry['id']!r}): {exc}") from exc
            catalog.define(ability)
        return catalog


def load_catalog(path: str | Path) -> AbilityCatalog:
    """Read a JSON list of ability entries."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise EventLogError(str(path), f"cannot read catalog ({exc.strerror})") from exc
    except json.JSONDecodeError as exc:
        raise EventLogError(str(path), f"invalid JSON at line {exc.lineno}") from exc
    if not isinstance(data, list):
        raise EventLogError(str(path), "catalog must be a JSON list")
    return AbilityCatalog.from_config(data)
