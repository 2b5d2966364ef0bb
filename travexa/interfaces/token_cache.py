"""
Access Token Cache
Keeps the Amadeus OAuth token between requests so every search does not
pay for a fresh client-credentials round trip.
"""

import time
from typing import Dict, Optional, Tuple
from loguru import logger

import redis


class TokenCache:
    """
    Stores short-lived tokens in Redis, falling back to process memory
    when Redis is unreachable.
    """

    def __init__(self, redis_host: str = "localhost", redis_port: int = 6379,
                 redis_db: int = 0, connect: bool = True):
        self.redis_client: Optional[redis.Redis] = None
        self._memory_store: Dict[str, Tuple[str, float]] = {}

        if not connect:
            return

        try:
            self.redis_client = redis.Redis(
                host=redis_host,
                port=redis_port,
                db=redis_db,
                decode_responses=True,
                socket_timeout=2,
                socket_connect_timeout=2,
            )
            self.redis_client.ping()
            logger.info(f"TokenCache connected to Redis at {redis_host}:{redis_port}")
        except redis.RedisError as e:
            logger.warning(f"Redis connection failed, using in-memory token cache: {e}")
            self.redis_client = None

    def _get_key(self, name: str) -> str:
        return f"token:{name}"

    def get(self, name: str) -> Optional[str]:
        """Return a cached token, or None if absent/expired"""
        if self.redis_client:
            try:
                return self.redis_client.get(self._get_key(name))
            except redis.RedisError as e:
                logger.error(f"Redis get error: {e}")

        entry = self._memory_store.get(name)
        if not entry:
            return None
        token, expires_at = entry
        if time.monotonic() >= expires_at:
            del self._memory_store[name]
            return None
        return token

    def set(self, name: str, token: str, ttl_seconds: int):
        """Cache a token; non-positive TTLs are not stored"""
        if ttl_seconds <= 0:
            return

        if self.redis_client:
            try:
                self.redis_client.setex(self._get_key(name), ttl_seconds, token)
                return
            except redis.RedisError as e:
                logger.error(f"Redis save error: {e}")

        self._memory_store[name] = (token, time.monotonic() + ttl_seconds)

    def clear(self, name: str):
        self._memory_store.pop(name, None)
        if self.redis_client:
            try:
                self.redis_client.delete(self._get_key(name))
            except redis.RedisError as e:
                logger.error(f"Redis delete error: {e}")

    @property
    def backend(self) -> str:
        return "redis" if self.redis_client else "memory"
