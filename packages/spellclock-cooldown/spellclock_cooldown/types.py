"""Core data types for cooldown tracking."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

CooldownValue = Union[float, Callable[[], Union[float, None]], None]


@dataclass(frozen=True)
class AbilityDef:
    """Configured ability. Durations are in milliseconds.

    Attributes:
        ability_id: Identifier as it appears in cast events.
        name: Display name used in diagnostics.
        cooldown: Fixed duration, a callable returning the current
            duration (e.g. haste dependent), or None for no cooldown.
        max_charges: Uses that can be stored at once.
    """

    ability_id: int
    name: str = ""
    cooldown: CooldownValue = None
    max_charges: int = 1

    def __post_init__(self) -> None:
        if self.max_charges < 1:
            raise ValueError(f"max_charges must be >= 1, got {self.max_charges}")
        if not callable(self.cooldown) and self.cooldown is not None and self.cooldown < 0:
            raise ValueError(f"cooldown must be >= 0, got {self.cooldown}")


@dataclass
class CooldownRecord:
    """Live cooldown of one ability. Exists only while a charge is cooling down."""

    start: float
    expected_end: float
    charges: int = 1


class CooldownSignal:
    START = "startcooldown"
    START_CHARGE = "startcooldowncharge"
    REFRESH = "refreshcooldown"
    FINISH = "finishcooldown"

    ALL = (START, START_CHARGE, REFRESH, FINISH)


@dataclass(frozen=True)
class CooldownDesync:
    """A cast seen while every charge was believed to be on cooldown."""

    ability_id: int
    timestamp: float
    time_passed: float
    cooldown_remaining: float
    expected_duration: float


class CooldownStateError(RuntimeError):
    """Raised when finishing or refreshing an ability that is not on cooldown."""

    def __init__(self, ability_id: int, message: str) -> None:
        self.ability_id = ability_id
        super().__init__(message)
