"""
Aggregate Response Cache
Short-lived key/value cache for non-PII dashboard aggregates

Entries are immutable once set and replaced by plain overwrite. Expired
entries are treated as absent and evicted on the next access.
"""
import logging
import time
from typing import Callable, Dict, Optional, Tuple

from wardview.config.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300


class ResponseCache:
    """In-process cache with a fixed expiry per entry"""

    def __init__(self, ttl: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: Dict[str, Tuple[float, str]] = {}

    def set(self, key: str, value: str):
        self._entries[key] = (self._clock() + self.ttl, value)

    def get(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def invalidate(self, key: str):
        self._entries.pop(key, None)

    def invalidate_all(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)


class RedisResponseCache:
    """Same contract as ResponseCache, shared between processes through redis"""

    def __init__(self, client, ttl: int = DEFAULT_TTL_SECONDS, prefix: str = "wardview:cache:"):
        self.client = client
        self.ttl = int(ttl)
        self.prefix = prefix

    def set(self, key: str, value: str):
        self.client.setex(f"{self.prefix}{key}", self.ttl, value)

    def get(self, key: str) -> Optional[str]:
        # redis drops expired keys itself
        return self.client.get(f"{self.prefix}{key}")

    def invalidate(self, key: str):
        self.client.delete(f"{self.prefix}{key}")

    def invalidate_all(self):
        keys = list(self.client.scan_iter(match=f"{self.prefix}*"))
        if keys:
            self.client.delete(*keys)


def build_cache(settings: Settings):
    """Cache backend selected by settings"""
    if settings.cache_backend == "redis":
        from wardview.config.database import DatabaseConfig

        logger.info(f"Using redis response cache at {settings.redis_url}")
        return RedisResponseCache(DatabaseConfig(settings).create_redis_client(), ttl=settings.cache_ttl_seconds)
    return ResponseCache(ttl=settings.cache_ttl_seconds)
