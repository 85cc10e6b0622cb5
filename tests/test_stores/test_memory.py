"""Tests for InMemoryStore."""

import pytest

from modglobal.stores import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


def test_get_nonexistent(store):
    assert store.get("ns", "key") is None


def test_get_nonexistent_with_default(store):
    assert store.get("ns", "key", "fallback") == "fallback"


def test_set_and_get(store):
    store.set("ns", "k", {"val": 1})
    assert store.get("ns", "k") == {"val": 1}


def test_overwrite(store):
    store.set("ns", "k", {"a": 1})
    store.set("ns", "k", {"a": 2})
    assert store.get("ns", "k")["a"] == 2
    assert len(store) == 1


@pytest.mark.parametrize("value", [0, 0.0, "", False, None, [], {}, ()])
def test_falsey_value_is_present(store, value):
    store.set("ns", "k", value)
    assert store.has("ns", "k")
    assert store.get("ns", "k", "default") is value


def test_delete_returns_value(store):
    store.set("ns", "k", {"v": 1})
    assert store.delete("ns", "k") == {"v": 1}
    assert not store.has("ns", "k")


def test_delete_nonexistent(store):
    assert store.delete("ns", "nope") is None


def test_has(store):
    assert not store.has("ns", "k")
    store.set("ns", "k", {})
    assert store.has("ns", "k")


def test_structural_key_equality(store):
    store.set("ns", ("a", 1), "tuple")
    assert store.get("ns", ("a", 1)) == "tuple"
    assert store.has("ns", ("a", 1))


def test_unhashable_key_raises(store):
    with pytest.raises(TypeError):
        store.set("ns", ["not", "hashable"], 1)


def test_list_keys(store):
    store.set("ns", "a", 1)
    store.set("ns", "b", 2)
    store.set("other", "c", 3)
    assert store.list_keys("ns") == ["a", "b"]


def test_list_keys_empty(store):
    assert store.list_keys("ns") == []


def test_clear_namespace(store):
    store.set("ns", "a", {"v": 1})
    store.set("ns", "b", {"v": 2})
    store.set("other", "c", {"v": 3})

    store.clear_namespace("ns")
    assert store.list_keys("ns") == []
    assert store.get("other", "c") == {"v": 3}


def test_namespace_isolation(store):
    store.set("ns1", "k", {"val": 1})
    store.set("ns2", "k", {"val": 2})
    assert store.get("ns1", "k")["val"] == 1
    assert store.get("ns2", "k")["val"] == 2


def test_namespace_can_be_any_hashable(store):
    class Mod:
        pass

    store.set(Mod, "k", 1)
    store.set("Mod", "k", 2)
    assert store.get(Mod, "k") == 1
    assert store.get("Mod", "k") == 2
