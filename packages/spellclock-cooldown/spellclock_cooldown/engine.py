"""CooldownEngine - event-driven cooldown and charge state machine."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from spellclock import event_ability_id, event_timestamp, format_duration

from spellclock_cooldown.store import CooldownStore
from spellclock_cooldown.types import (
    CooldownDesync,
    CooldownRecord,
    CooldownSignal,
    CooldownStateError,
)

if TYPE_CHECKING:
    from spellclock import Event

    from spellclock_cooldown.catalog import AbilityCatalog

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def publish(self, signal_name: str, **data: Any) -> None: ...


class CooldownEngine:
    """Tracks which abilities are cooling down and how many charges are spent.

    Every timestamp is passed in explicitly. Only the oldest spent charge
    has a timer; when it finishes, the next charge is re-armed for a full
    cooldown, so charges recover one after another.
    """

    def __init__(
        self,
        catalog: AbilityCatalog,
        notifier: Notifier | None = None,
        fight_start: float | None = None,
    ) -> None:
        self._catalog = catalog
        self._notifier = notifier
        self._fight_start = fight_start
        self._store = CooldownStore()
        self._desyncs: list[CooldownDesync] = []

    @property
    def catalog(self) -> AbilityCatalog:
        return self._catalog

    @property
    def fight_start(self) -> float | None:
        return self._fight_start

    @fight_start.setter
    def fight_start(self, timestamp: float | None) -> None:
        """Anchor diagnostic times, usually to the replay clock's start."""
        self._fight_start = timestamp

    @property
    def desyncs(self) -> list[CooldownDesync]:
        return list(self._desyncs)

    # --- Queries ---

    def is_available(self, ability_id: int) -> bool:
        """Can the ability be cast right now?

        Not the opposite of ``is_on_cooldown``: with 2 charges and one spent,
        an ability is both on cooldown and available.
        """
        record = self._store.get(ability_id)
        if record is None:
            return True
        return self._catalog.max_charges(ability_id) > record.charges

    def is_on_cooldown(self, ability_id: int) -> bool:
        return ability_id in self._store

    def cooldown_remaining(self, ability_id: int, timestamp: float) -> float | None:
        """Time until the next charge is back. None if not on cooldown.

        May be zero or negative between expiry and the next sweep.
        """
        record = self._store.get(ability_id)
        if record is None:
            return None
        return record.expected_end - timestamp

    def charges_on_cooldown(self, ability_id: int) -> int:
        record = self._store.get(ability_id)
        return record.charges if record is not None else 0

    def record(self, ability_id: int) -> CooldownRecord | None:
        return self._store.get(ability_id)

    def tracked_abilities(self) -> list[int]:
        return self._store.ability_ids()

    def snapshot(self) -> dict[int, dict[str, Any]]:
        return self._store.snapshot()

    # --- Transitions ---

    def start_cooldown(
        self,
        ability_id: int,
        timestamp: float,
        override_duration: float | None = None,
    ) -> None:
        """Spend a charge of ``ability_id`` at ``timestamp``."""
        self._seen(timestamp)
        duration = self._resolve_duration(ability_id, override_duration)
        if not duration:
            logger.debug(
                "%s (%s) has no cooldown", self._catalog.spell_name(ability_id), ability_id
            )
            return

        record = self._store.get(ability_id)
        if record is None:
            self._store.create(ability_id, timestamp, timestamp + duration)
            logger.debug(
                "%s Cooldown started: %s (%s) (charges on cooldown: 1)",
                self._elapsed(timestamp),
                self._catalog.spell_name(ability_id),
                ability_id,
            )
            self._notify(CooldownSignal.START, ability_id, timestamp)
            return

        if self.is_available(ability_id):
            record.charges += 1
            logger.debug(
                "%s Used another charge: %s (%s) (charges on cooldown: %d)",
                self._elapsed(timestamp),
                self._catalog.spell_name(ability_id),
                ability_id,
                record.charges,
            )
            self._notify(CooldownSignal.START_CHARGE, ability_id, timestamp)
            return

        # Cast while every charge is spent: latency, an early reset we did
        # not see, or a misconfigured duration. Finish one charge and retry.
        desync = CooldownDesync(
            ability_id=ability_id,
            timestamp=timestamp,
            time_passed=timestamp - record.start,
            cooldown_remaining=record.expected_end - timestamp,
            expected_duration=record.expected_end - record.start,
        )
        self._desyncs.append(desync)
        logger.warning(
            "%s %s (%s) was cast while already marked as on cooldown. It probably "
            "either has multiple charges, can be reset early or reduced, the "
            "configured cooldown is invalid, or this is a latency issue. "
            "time passed: %s, cooldown remaining: %s, expected duration: %s",
            self._elapsed(timestamp),
            self._catalog.spell_name(ability_id),
            ability_id,
            desync.time_passed,
            desync.cooldown_remaining,
            desync.expected_duration,
        )
        self.finish_cooldown(ability_id, timestamp)
        self.start_cooldown(ability_id, timestamp, override_duration)

    def finish_cooldown(
        self,
        ability_id: int,
        timestamp: float,
        reset_all_charges: bool = False,
    ) -> None:
        """Bring one charge (or all of them) back.

        Raises CooldownStateError if the ability is not on cooldown.
        """
        record = self._store.get(ability_id)
        if record is None:
            raise CooldownStateError(
                ability_id,
                f"Tried to finish the cooldown of {ability_id}, but it's not on cooldown.",
            )

        if record.charges == 1 or reset_all_charges:
            self._store.remove(ability_id)
        else:
            record.charges -= 1
            self.refresh_cooldown(ability_id, timestamp)
        logger.debug(
            "%s Cooldown finished: %s (%s)",
            self._elapsed(timestamp),
            self._catalog.spell_name(ability_id),
            ability_id,
        )
        self._notify(CooldownSignal.FINISH, ability_id, timestamp)

    def refresh_cooldown(
        self,
        ability_id: int,
        timestamp: float,
        override_duration: float | None = None,
    ) -> None:
        """Restart the current charge's timer from ``timestamp``.

        Raises CooldownStateError if the ability is not on cooldown.
        """
        record = self._store.get(ability_id)
        if record is None:
            raise CooldownStateError(
                ability_id,
                f"Tried to refresh the cooldown of {ability_id}, but it's not on cooldown.",
            )
        duration = self._resolve_duration(ability_id, override_duration)
        if not duration:
            logger.debug(
                "%s (%s) has no cooldown", self._catalog.spell_name(ability_id), ability_id
            )
            return

        record.expected_end = timestamp + duration
        self._notify(CooldownSignal.REFRESH, ability_id, timestamp)

    def reduce_cooldown(
        self, ability_id: int, amount: float, timestamp: float
    ) -> float | None:
        """Pull the cooldown forward by up to ``amount``.

        Returns the amount actually consumed, or None if not on cooldown.
        A reduction that covers the remaining time finishes the charge.
        ``amount`` must be non-negative; ValueError otherwise.
        """
        if amount < 0:
            raise ValueError(f"reduction amount must be >= 0, got {amount}")
        record = self._store.get(ability_id)
        if record is None:
            return None
        remaining = record.expected_end - timestamp
        if remaining <= amount:
            self.finish_cooldown(ability_id, timestamp)
            return remaining
        record.expected_end -= amount
        return amount

    # --- Event stream ---

    def on_cast(self, event: Event) -> None:
        ability_id = event_ability_id(event)
        timestamp = event_timestamp(event)
        if ability_id is None or timestamp is None:
            return
        self.start_cooldown(ability_id, timestamp)

    def on_any_event(self, event: Event) -> None:
        """Finish every cooldown whose expected end is strictly before the event.

        At ``timestamp == expected_end`` the ability is still on cooldown;
        events sharing a timestamp usually land in the same frame.
        """
        timestamp = event_timestamp(event)
        if timestamp is None:
            return
        self._seen(timestamp)
        for ability_id in self._store.ability_ids():
            record = self._store.get(ability_id)
            if record is not None and timestamp > record.expected_end:
                self.finish_cooldown(ability_id, timestamp)

    # --- Internal helpers ---

    def _resolve_duration(
        self, ability_id: int, override_duration: float | None
    ) -> float | None:
        # A zero override falls back to the catalog duration.
        return override_duration or self._catalog.expected_cooldown(ability_id)

    def _notify(self, signal_name: str, ability_id: int, timestamp: float) -> None:
        if self._notifier is not None:
            self._notifier.publish(signal_name, ability_id=ability_id, timestamp=timestamp)

    def _seen(self, timestamp: float) -> None:
        if self._fight_start is None:
            self._fight_start = timestamp

    def _elapsed(self, timestamp: float) -> str:
        start = self._fight_start if self._fight_start is not None else timestamp
        return format_duration(timestamp - start)
