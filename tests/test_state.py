"""Tests for the key/value state stores."""

from store.state import CART_KEY, MemoryStateStore


class TestMemoryStateStore:
    def test_values_are_stored_as_strings(self):
        state = MemoryStateStore()
        state.set("n", 5)
        assert state.get("n") == "5"

    def test_get_returns_default_when_missing(self):
        assert MemoryStateStore().get("missing", "x") == "x"

    def test_remove_missing_key_is_noop(self):
        state = MemoryStateStore({"a": "1"})
        state.remove("b")
        assert state.get("a") == "1"

    def test_clear(self):
        state = MemoryStateStore({"a": "1", "b": "2"})
        state.clear()
        assert state.get("a") is None
        assert state.get("b") is None

    def test_json_round_trip(self):
        state = MemoryStateStore()
        state.set_json(CART_KEY, [{"id": "A"}])
        assert state.get(CART_KEY) == '[{"id": "A"}]'
        assert state.get_json(CART_KEY) == [{"id": "A"}]

    def test_malformed_json_returns_default(self):
        state = MemoryStateStore({CART_KEY: "{not json"})
        assert state.get_json(CART_KEY, []) == []
