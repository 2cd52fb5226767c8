"""
Stand-ins for the store clients the prober talks to.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy.exc import OperationalError


class FakeRedis:
    """Just enough of redis.Redis for the prober and JsonCache."""

    def __init__(self, error: Optional[Exception] = None, pong: bool = True):
        self.error = error
        self.pong = pong
        self.data: Dict[str, Any] = {}
        self.hashes: Dict[str, Dict[str, Any]] = {}
        self.ttls: Dict[str, int] = {}
        self.commands: list[str] = []

    def _call(self, name: str) -> None:
        self.commands.append(name)
        if self.error is not None:
            raise self.error

    def ping(self):
        self._call("PING")
        return self.pong

    def time(self):
        self._call("TIME")
        return (1760000000, 250000)

    def set(self, key, value):
        self._call("SET")
        self.data[key] = value
        return True

    def setex(self, key, ttl, value):
        self._call("SETEX")
        self.data[key] = value
        self.ttls[key] = ttl
        return True

    def get(self, key):
        self._call("GET")
        return self.data.get(key)

    def delete(self, key):
        self._call("DEL")
        return 1 if self.data.pop(key, None) is not None else 0

    def hset(self, key, field, value):
        self._call("HSET")
        self.hashes.setdefault(key, {})[field] = value
        return 1

    def hget(self, key, field):
        self._call("HGET")
        return self.hashes.get(key, {}).get(field)

    def close(self):
        pass


class RefusingEngine:
    """Engine stand-in whose connections always fail like a dead server."""

    def __init__(self, message: str = "connection refused"):
        self.message = message

    def connect(self):
        raise OperationalError("SELECT NOW()", None, Exception(self.message))
