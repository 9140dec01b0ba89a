from __future__ import annotations

from typing import Any, Optional, Tuple

import redis


class RedisProvider:
    """Provider answering lookups from Redis string keys.

    Each ``try_get`` issues one ``GET`` for ``prefix + key``; keys keep
    their ``:`` delimiters, which is the usual Redis naming style.
    """

    def __init__(self, uri: str, prefix: str = "", client: Optional[Any] = None):
        self.uri = uri
        self.prefix = prefix
        self.client = client if client is not None else redis.Redis.from_url(uri, decode_responses=True)

    def _prefixed(self, key: str) -> str:
        return f"{self.prefix}{key}" if self.prefix else key

    def try_get(self, key: str) -> Tuple[bool, Optional[str]]:
        value = self.client.get(self._prefixed(key))
        if value is None:
            return False, None
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return True, value

    def __str__(self) -> str:
        text = f"RedisProvider for '{self.uri}'"
        if self.prefix:
            text += f" Prefix: '{self.prefix}'"
        return text
