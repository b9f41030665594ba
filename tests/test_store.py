"""Test the bare storage map."""
from blackboard.storage.store import Storage


def test_put_returns_previous_value():
    """put overwrites and hands back what it replaced."""
    storage = Storage()
    assert storage.put("k", 1) is None
    assert storage.put("k", 2) == 1
    assert storage.get("k") == 2
    assert storage.size() == 1


def test_remove_and_contains():
    """remove drops the key and returns its value."""
    storage = Storage({"k": "v"})
    assert storage.contains_key("k")
    assert "k" in storage
    assert storage.remove("k") == "v"
    assert not storage.contains_key("k")
    assert storage.remove("k") is None
    assert storage.is_empty()


def test_pop_distinguishes_stored_none():
    """pop reports presence separately from the value."""
    storage = Storage({"k": None})
    assert storage.pop("k") == (True, None)
    assert storage.pop("k") == (False, None)


def test_snapshots_are_detached():
    """keys/values/items are copies, safe to iterate while mutating."""
    storage = Storage({"a": 1, "b": 2})
    for key in storage.keys():
        storage.remove(key)
    assert len(storage) == 0
    assert storage.items() == []


def test_values_are_opaque():
    """Any payload is stored without inspection."""
    payload = object()
    storage = Storage()
    storage.put("obj", payload)
    assert storage.get("obj") is payload
    assert set(storage.values()) == {payload}
