"""Tests for event accessors and error types."""

import pytest

from spellclock.types import (
    EventLogError,
    ReplayContext,
    ReplayError,
    event_ability_id,
    event_source_id,
    event_timestamp,
    event_type,
)

CAST = {"type": "cast", "timestamp": 1500, "sourceID": 7, "ability": {"guid": 115151}}


def test_accessors_on_cast_event():
    assert event_timestamp(CAST) == 1500
    assert event_type(CAST) == "cast"
    assert event_source_id(CAST) == 7
    assert event_ability_id(CAST) == 115151


@pytest.mark.parametrize("event", [None, "cast", 42, [], {}])
def test_accessors_tolerate_malformed_events(event):
    assert event_timestamp(event) is None
    assert event_type(event) is None
    assert event_ability_id(event) is None
    assert event_source_id(event) is None


def test_timestamp_must_be_numeric():
    assert event_timestamp({"timestamp": "100"}) is None
    assert event_timestamp({"timestamp": True}) is None
    assert event_timestamp({"timestamp": 12.5}) == 12.5


def test_ability_id_requires_guid_path():
    assert event_ability_id({"ability": 5}) is None
    assert event_ability_id({"ability": {"name": "Renew"}}) is None
    assert event_ability_id({"ability": {"guid": "5"}}) is None


def test_replay_context_is_frozen():
    ctx = ReplayContext(timestamp=1, fight_duration=0, event_index=0)
    with pytest.raises(AttributeError):
        ctx.timestamp = 2  # type: ignore[misc]


def test_event_log_error():
    err = EventLogError("fight.json", "invalid JSON at line 3")
    assert isinstance(err, ReplayError)
    assert err.path == "fight.json"
    assert str(err) == "fight.json: invalid JSON at line 3"
