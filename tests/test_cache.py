"""
JsonCache over the key-value store.
"""

from __future__ import annotations

from app.services.cache import JsonCache


def test_set_uses_ttl_by_default(fake_redis):
    cache = JsonCache(fake_redis, default_ttl=60)

    cache.set("devices", {"count": 3})

    assert fake_redis.ttls["devices"] == 60
    assert cache.get("devices") == {"count": 3}


def test_zero_ttl_sets_without_expiry(fake_redis):
    cache = JsonCache(fake_redis)

    cache.set("pinned", [1, 2], ttl=0)

    assert "pinned" not in fake_redis.ttls
    assert cache.get("pinned") == [1, 2]


def test_get_missing_and_raw_values(fake_redis):
    cache = JsonCache(fake_redis)
    fake_redis.data["legacy"] = "not json"

    assert cache.get("absent") is None
    assert cache.get("legacy") == "not json"


def test_hash_fields_and_delete(fake_redis):
    cache = JsonCache(fake_redis)

    cache.hset("alerts", "cpu", {"threshold": 90})
    assert cache.hget("alerts", "cpu") == {"threshold": 90}
    assert cache.hget("alerts", "disk") is None

    cache.set("k", 1)
    assert cache.delete("k") == 1
    assert cache.get("k") is None
    assert cache.ping() is True
