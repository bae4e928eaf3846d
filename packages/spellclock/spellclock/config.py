"""Replay configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ReplayConfig:
    """Immutable configuration for a replay.

    Attributes:
        player_id: Actor whose casts drive cooldowns. None accepts casts
            from any source.
        cast_types: Event ``type`` values treated as casts.
        strict: Re-raise handler exceptions instead of logging them and
            moving on to the next handler.
    """

    player_id: int | None = None
    cast_types: tuple[str, ...] = ("cast",)
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.cast_types:
            raise ValueError("cast_types must contain at least one event type")

    def is_player_cast(self, kind: str | None, source_id: Any) -> bool:
        if kind not in self.cast_types:
            return False
        return self.player_id is None or source_id == self.player_id
