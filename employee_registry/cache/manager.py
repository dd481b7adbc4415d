"""
Redis Cache Manager for the employee registry
Plain get / set-with-TTL / delete over string values
"""
import logging
from typing import Any, Dict, Optional

import redis

from ..errors import CacheUnavailableError
from .config import CacheConfig

logger = logging.getLogger(__name__)


class CacheManager:
    """Redis-based key-value cache with TTL

    Transport failures are raised as CacheUnavailableError so callers can
    tell an unreachable cache apart from a miss. Without a Redis client the
    manager is disabled and behaves like an always-empty cache.
    """

    def __init__(self, redis_client: Optional[redis.Redis] = None):
        """Initialize cache manager with Redis client"""
        self.redis_client = redis_client
        self.config = CacheConfig()
        self.enabled = redis_client is not None

        if not self.enabled:
            logger.warning("Cache manager initialized without Redis client - caching disabled")

    @staticmethod
    def _decode(data: Any) -> str:
        if isinstance(data, bytes):
            return data.decode("utf-8")
        return data

    def get(self, key: str) -> Optional[str]:
        """Get cache value, None on miss"""
        if not self.enabled:
            return None

        try:
            data = self.redis_client.get(key)
        except redis.exceptions.RedisError as e:
            raise CacheUnavailableError(f"Cache GET failed for {key}", key=key, original_error=e) from e

        if data is None:
            logger.debug(f"Cache MISS: {key}")
            return None

        logger.debug(f"Cache HIT: {key}")
        return self._decode(data)

    def set(self, key: str, value: str, ttl: int) -> bool:
        """Set cache value with TTL in seconds"""
        if not self.enabled:
            return False

        try:
            result = self.redis_client.setex(key, ttl, value)
        except redis.exceptions.RedisError as e:
            raise CacheUnavailableError(f"Cache SET failed for {key}", key=key, original_error=e) from e

        logger.debug(f"Cache SET: {key} (TTL: {ttl}s)")
        return bool(result)

    def delete(self, key: str) -> bool:
        """Delete cache value; an absent key counts as deleted"""
        if not self.enabled:
            return False

        try:
            removed = self.redis_client.delete(key)
        except redis.exceptions.RedisError as e:
            raise CacheUnavailableError(f"Cache DELETE failed for {key}", key=key, original_error=e) from e

        logger.debug(f"Cache DELETE: {key} (removed: {removed})")
        return True

    def get_ttl(self, key: str) -> int:
        """Get remaining TTL for cache key"""
        if not self.enabled:
            return -1

        try:
            return self.redis_client.ttl(key)
        except redis.exceptions.RedisError as e:
            raise CacheUnavailableError(f"Cache TTL failed for {key}", key=key, original_error=e) from e

    def health_check(self) -> Dict[str, Any]:
        """Check cache health and return status"""
        if not self.enabled:
            return {"status": "disabled", "redis_available": False}

        try:
            test_key = self.config.HEALTH_CHECK_KEY
            self.redis_client.setex(test_key, 10, "test")
            result = self._decode(self.redis_client.get(test_key))
            self.redis_client.delete(test_key)

            return {
                "status": "healthy" if result == "test" else "error",
                "redis_available": True,
            }
        except redis.exceptions.RedisError as e:
            logger.error(f"Cache health check failed: {e}")
            return {
                "status": "error",
                "redis_available": False,
                "error": str(e),
            }
