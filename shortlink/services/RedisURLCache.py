import logging
from typing import Optional
import redis.exceptions

from shortlink.db.store import URLStore

logger = logging.getLogger(__name__)
CACHE_TTL = 86400

def cache_key(identifier: int) -> str:
    return f"url:{identifier}"

class RedisURLCache:
    """Read-through redis cache in front of another URLStore, invalidated on put.

    Redis being down never fails a read: errors are logged and the
    wrapped store is used directly.
    """

    def __init__(self, store: URLStore, redis_client, ttl: int = CACHE_TTL):
        self.store = store
        self.redis_client = redis_client
        self.ttl = ttl

    def get(self, identifier: int) -> Optional[str]:
        key = cache_key(identifier)
        try:
            cached_url = self.redis_client.get(key)
        except redis.exceptions.ConnectionError:
            logger.warning(f"Redis connection failed reading {key}")
            cached_url = None

        if cached_url:
            cached_decoded = cached_url.decode() if isinstance(cached_url, (bytes, bytearray)) else str(cached_url)
            logger.info(f"Cache HIT for {identifier} -> {cached_decoded[:50]}")
            return cached_decoded

        original_url = self.store.get(identifier)
        if original_url is not None:
            self._set(key, original_url)
        return original_url

    def put(self, identifier: int, url: str) -> None:
        """Write to the store and drop the cached entry; get() refills it.

        The invalidation must reach redis, so a ConnectionError here
        propagates instead of leaving a stale URL cached.
        """
        key = cache_key(identifier)
        self.redis_client.delete(key)
        self.store.put(identifier, url)
        # A concurrent read-through may have cached the previous value
        self.redis_client.delete(key)
        logger.debug(f"Invalidated {key} after write")

    def _set(self, key: str, url: str):
        try:
            self.redis_client.setex(key, self.ttl, url)
            logger.debug(f"Cached {key} -> {url[:50]}")
        except redis.exceptions.ConnectionError:
            logger.warning(f"Failed to cache {key}, Redis unavailable")
