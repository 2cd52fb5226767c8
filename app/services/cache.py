import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import redis

from app.config.settings import KeyValueStoreConfig
from app.core.exceptions.exceptions import BackendUnavailableError


def create_redis_client(config: KeyValueStoreConfig) -> redis.Redis:
    """Build a lazily-connecting client; nothing touches the network until first use."""
    return redis.Redis.from_url(
        config.url,
        decode_responses=True,
        socket_timeout=config.socket_timeout,
        socket_connect_timeout=config.socket_timeout,
    )


def query_server_time(client: redis.Redis) -> Dict[str, Any]:
    """PING then TIME; neither command writes to the store."""
    try:
        pong = client.ping()
        if not pong:
            raise BackendUnavailableError("redis", "PING was not acknowledged")
        seconds, micros = client.time()
    except redis.RedisError as e:
        raise BackendUnavailableError("redis", str(e)) from e

    current_time = datetime.fromtimestamp(int(seconds) + int(micros) / 1_000_000, tz=timezone.utc)
    return {
        "current_time": current_time.isoformat(),
        "message": "PONG",
    }


class JsonCache:
    """JSON value cache on top of a redis client.

    Values are stored serialized; reads fall back to the raw string when the
    stored payload isn't JSON (e.g. written by another tool).
    """

    def __init__(self, client: redis.Redis, default_ttl: int = 3600):
        self.client = client
        self.default_ttl = default_ttl

    @staticmethod
    def _decode(value: Optional[str]) -> Any:
        if value is None:
            return None
        try:
            return json.loads(value)
        except ValueError:
            return value

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        ttl = self.default_ttl if ttl is None else ttl
        serialized = json.dumps(value, default=str)
        if ttl > 0:
            return bool(self.client.setex(key, ttl, serialized))
        return bool(self.client.set(key, serialized))

    def get(self, key: str) -> Any:
        return self._decode(self.client.get(key))

    def delete(self, key: str) -> int:
        return self.client.delete(key)

    def hset(self, key: str, field: str, value: Any) -> int:
        return self.client.hset(key, field, json.dumps(value, default=str))

    def hget(self, key: str, field: str) -> Any:
        return self._decode(self.client.hget(key, field))

    def ping(self) -> bool:
        return bool(self.client.ping())
