"""Tests for event log loading and ordering."""

import json

import pytest

from spellclock.events import load_events, sort_events
from spellclock.types import EventLogError


def test_load_json_array(tmp_path):
    path = tmp_path / "fight.json"
    path.write_text(json.dumps([{"timestamp": 0}, {"timestamp": 10}]))

    assert load_events(path) == [{"timestamp": 0}, {"timestamp": 10}]


def test_load_json_lines(tmp_path):
    path = tmp_path / "fight.jsonl"
    path.write_text('{"timestamp": 0}\n\n{"timestamp": 5, "type": "cast"}\n')

    events = load_events(str(path))
    assert events == [{"timestamp": 0}, {"timestamp": 5, "type": "cast"}]


def test_load_reports_bad_line(tmp_path):
    path = tmp_path / "fight.jsonl"
    path.write_text('{"timestamp": 0}\n{oops\n')

    with pytest.raises(EventLogError, match="line 2"):
        load_events(path)


def test_load_rejects_non_object_events(tmp_path):
    path = tmp_path / "fight.json"
    path.write_text("[1, 2]")

    with pytest.raises(EventLogError, match="not an object"):
        load_events(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(EventLogError, match="cannot read"):
        load_events(tmp_path / "missing.json")


def test_sort_events_is_stable():
    events = [
        {"timestamp": 20, "id": "a"},
        {"timestamp": 10, "id": "b"},
        {"id": "c"},
        {"timestamp": 10, "id": "d"},
    ]
    ordered = [e["id"] for e in sort_events(events)]
    assert ordered == ["c", "b", "d", "a"]
