import json
from typing import Any, Optional

import redis

from ospa.config import settings
from ospa.core.exceptions import StoreConnectionException
from ospa.repositories.base import BaseCandidateStore


class RedisCandidateStore(BaseCandidateStore):
    """Candidate store keeping each key as a JSON string in Redis."""

    def __init__(self, url: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self.client = redis.from_url(
            url or settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=5,
        )

    def _read(self, key: str) -> Optional[Any]:
        try:
            data = self.client.get(key)
        except redis.RedisError as e:
            raise StoreConnectionException(f"Redis read failed for '{key}': {e}")
        if data is None:
            return None
        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            raise StoreConnectionException(f"Redis value under '{key}' is not valid JSON: {e}")

    def _write(self, key: str, value: Any) -> None:
        try:
            self.client.set(key, json.dumps(value, ensure_ascii=False))
        except redis.RedisError as e:
            raise StoreConnectionException(f"Redis write failed for '{key}': {e}")

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError:
            return False
