"""CooldownStore - live cooldown records keyed by ability id."""
from __future__ import annotations

from typing import Any

from spellclock_cooldown.types import CooldownRecord


class CooldownStore:
    """Holds a record for an ability only while it is on cooldown."""

    def __init__(self) -> None:
        self._records: dict[int, CooldownRecord] = {}

    def __contains__(self, ability_id: object) -> bool:
        return ability_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def get(self, ability_id: int) -> CooldownRecord | None:
        return self._records.get(ability_id)

    def create(self, ability_id: int, start: float, expected_end: float) -> CooldownRecord:
        record = CooldownRecord(start=start, expected_end=expected_end, charges=1)
        self._records[ability_id] = record
        return record

    def remove(self, ability_id: int) -> None:
        """Drop a record. Raises KeyError if not tracked."""
        del self._records[ability_id]

    def ability_ids(self) -> list[int]:
        """Tracked ids as a new list, safe to iterate while mutating."""
        return list(self._records)

    def snapshot(self) -> dict[int, dict[str, Any]]:
        return {
            ability_id: {
                "start": rec.start,
                "expected_end": rec.expected_end,
                "charges": rec.charges,
            }
            for ability_id, rec in self._records.items()
        }
