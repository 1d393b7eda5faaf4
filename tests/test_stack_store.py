"""
Unit tests for saving and restoring history stacks.
"""

import json

import pytest

from chronicler import HistoryManager, StackStore, Waypoint, InvalidArgumentError
from tests.mocks.mock_target import RecordingStore


@pytest.fixture
def stack_store(temp_dir):
    return StackStore(str(temp_dir))


@pytest.fixture
def edited_history():
    store = RecordingStore({'a': 1, 7: 'seven'})
    history = HistoryManager(store, ['a', 7])
    for value in (1, 2, 3):
        store['a'] = value
        history.set_waypoint(f"a={value}")
    history.undo()
    return history


def test_save_creates_file(stack_store, temp_dir, edited_history):
    """Test save_stacks writes a .chron JSON file."""
    assert stack_store.save_stacks(edited_history, "session")

    data = json.loads((temp_dir / "session.chron").read_text(encoding="utf-8"))
    assert [w['name'] for w in data['undo']] == ["a=1", "a=2"]
    assert [w['name'] for w in data['redo']] == ["a=3"]
    assert 'created_at' in data
    assert 'modified_at' in data


def test_save_load_keeps_stacks(stack_store, edited_history):
    """Test loading returns equal waypoints, integer identifiers included."""
    stack_store.save_stacks(edited_history, "session")

    undo_stack, redo_stack = stack_store.load_stacks("session.chron")

    assert undo_stack == list(edited_history.undo_stack)
    assert redo_stack == list(edited_history.redo_stack)
    assert undo_stack[0].properties[7] == 'seven'


def test_save_keeps_created_at(stack_store, temp_dir, edited_history):
    """Test overwriting a saved history keeps its creation time."""
    stack_store.save_stacks(edited_history, "session")
    first = json.loads((temp_dir / "session.chron").read_text(encoding="utf-8"))

    stack_store.save_stacks(edited_history, "session")
    second = json.loads((temp_dir / "session.chron").read_text(encoding="utf-8"))

    assert second['created_at'] == first['created_at']


def test_restore_into_fresh_manager(stack_store, edited_history):
    """Test a restored history can be redone on a new manager."""
    stack_store.save_stacks(edited_history, "session")
    store = RecordingStore({'a': 2, 7: 'seven'})
    fresh = HistoryManager(store, ['a', 7])

    stack_store.restore_into(fresh, "session")
    fresh.redo()

    assert store['a'] == 3
    assert [w.name for w in fresh.undo_stack] == ["a=1", "a=2", "a=3"]


def test_save_unserializable_value_returns_false(stack_store, temp_dir):
    """Test values JSON cannot encode make save_stacks fail softly."""
    store = RecordingStore({'a': object()})
    history = HistoryManager(store, ['a'])
    history.set_waypoint("Opaque")

    assert stack_store.save_stacks(history, "opaque") is False
    assert not (temp_dir / "opaque.chron").exists()


def test_load_missing_file(stack_store):
    """Test loading a missing history raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        stack_store.load_stacks("nope")


@pytest.mark.parametrize("content", [
    "{not json",
    "[1, 2]",
    '{"undo": "bad"}',
    '{"undo": [{"name": 3}]}',
])
def test_load_corrupt_file(stack_store, temp_dir, content):
    """Test a malformed history file raises InvalidArgumentError."""
    (temp_dir / "bad.chron").write_text(content, encoding="utf-8")

    with pytest.raises(InvalidArgumentError):
        stack_store.load_stacks("bad")


def test_list_saved(stack_store, temp_dir, edited_history):
    """Test list_saved reports saved histories with counts."""
    stack_store.save_stacks(edited_history, "one")
    stack_store.save_stacks(edited_history, "two")
    (temp_dir / "ignored.txt").write_text("x", encoding="utf-8")
    (temp_dir / "broken.chron").write_text("{", encoding="utf-8")

    entries = stack_store.list_saved()

    assert sorted(e['name'] for e in entries) == ["one", "two"]
    assert all(e['undo_count'] == 2 and e['redo_count'] == 1 for e in entries)


def test_list_saved_limit(stack_store, edited_history):
    """Test list_saved honours the limit."""
    for i in range(4):
        stack_store.save_stacks(edited_history, f"s{i}")

    assert len(stack_store.list_saved(limit=2)) == 2


def test_delete(stack_store, edited_history):
    """Test delete removes a saved history."""
    stack_store.save_stacks(edited_history, "session")

    assert stack_store.delete("session") is True
    assert stack_store.delete("session") is False
    assert stack_store.list_saved() == []


def test_override_with_handmade_waypoints(stack_store, temp_dir):
    """Test a hand-written history file can seed a manager."""
    (temp_dir / "seed.chron").write_text(json.dumps({
        'undo': [{'name': 'Base', 'properties': {'a': 10}}],
        'redo': [{'name': 'Next', 'properties': [['a', 20]]}],
    }), encoding="utf-8")
    store = RecordingStore({'a': 0})
    history = HistoryManager(store, ['a'])

    stack_store.restore_into(history, "seed")
    history.redo()

    assert store['a'] == 20
    assert history.undo_stack == (Waypoint('Base', {'a': 10}), Waypoint('Next', {'a': 20}))
