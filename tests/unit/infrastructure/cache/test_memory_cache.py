"""Tests for MemoryCacheStore."""

import threading

import pytest

from repocache.infrastructure.cache import MemoryCacheStore


class _Clock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return _Clock()


@pytest.fixture
def store(clock):
    return MemoryCacheStore(max_size=3, clock=clock)


def test_put_then_get(store):
    store.put("k", {"a": 1}, ttl=10)
    assert store.has("k") is True
    assert store.get("k") == {"a": 1}


def test_missing_key(store):
    assert store.has("missing") is False
    with pytest.raises(KeyError):
        store.get("missing")


def test_none_is_a_cacheable_value(store):
    store.put("k", None, ttl=10)
    assert store.has("k") is True
    assert store.get("k") is None


def test_entry_expires_after_ttl(store, clock):
    store.put("k", 1, ttl=10)
    clock.now = 109.0
    assert store.has("k") is True
    clock.now = 110.0
    assert store.has("k") is False
    assert len(store) == 0


def test_put_replaces_value_and_ttl(store, clock):
    store.put("k", 1, ttl=1)
    store.put("k", 2, ttl=60)
    clock.now += 30
    assert store.get("k") == 2


def test_forget_removes_entry(store):
    store.put("k", 1, ttl=10)
    store.forget("k")
    assert store.has("k") is False


def test_forget_missing_key_is_not_an_error(store):
    store.forget("missing")


def test_least_recently_used_entry_is_evicted(store):
    for key in ("a", "b", "c"):
        store.put(key, key, ttl=10)
    store.get("a")
    store.put("d", "d", ttl=10)
    assert store.has("b") is False
    assert store.has("a") is True


def test_clear_empties_store(store):
    store.put("k", 1, ttl=10)
    store.clear()
    assert len(store) == 0


def test_concurrent_puts_leave_one_value_per_key():
    store = MemoryCacheStore()

    def writer(value):
        for _ in range(200):
            store.put("k", value, ttl=10)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert store.get("k") in range(8)
    assert len(store) == 1


def test_mutating_the_stored_object_does_not_change_the_entry(store):
    value = ["SPY"]
    store.put("k", value, 60)
    value.append("QQQ")
    assert store.get("k") == ["SPY"]


def test_mutating_a_returned_value_does_not_change_the_entry(store):
    store.put("k", ["SPY"], 60)
    store.get("k").clear()
    assert store.get("k") == ["SPY"]
