"""
Storage Module - Key-Value Substrate for Carts

Provides:
- KeyValueStorage: the get/set contract the cart store depends on
- MemoryStorage: process-local dict, used in tests and local runs
- RedisStorage: Upstash Redis over REST, used when deployed
- get_storage(): singleton picked from environment
"""

from typing import Dict, Optional, Protocol

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential
from upstash_redis import Redis
from upstash_redis.errors import UpstashError

from storefront import config
from storefront.errors import ERROR_STORAGE_UNAVAILABLE, StorageUnavailableError
from storefront.logging import get_logger

logger = get_logger(__name__)


class KeyValueStorage(Protocol):
    """Opaque string store addressed by key."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """In-process storage. Not shared between workers."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


def redis_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type((UpstashError, httpx.HTTPError)),
    )


class RedisStorage:
    """Upstash Redis backed storage (sync REST client)."""

    def __init__(self, client: Redis):
        self.client = client

    @classmethod
    def from_env(cls) -> "RedisStorage":
        if not config.UPSTASH_REDIS_REST_URL or not config.UPSTASH_REDIS_REST_TOKEN:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        return cls(Redis(url=config.UPSTASH_REDIS_REST_URL, token=config.UPSTASH_REDIS_REST_TOKEN))

    def get(self, key: str) -> Optional[str]:
        try:
            return self._get(key)
        except (UpstashError, httpx.HTTPError) as e:
            logger.error(f"Failed to read {key} from Redis: {e}")
            raise StorageUnavailableError(ERROR_STORAGE_UNAVAILABLE) from e

    def set(self, key: str, value: str) -> None:
        try:
            self._set(key, value)
        except (UpstashError, httpx.HTTPError) as e:
            logger.error(f"Failed to write {key} to Redis: {e}")
            raise StorageUnavailableError(ERROR_STORAGE_UNAVAILABLE) from e

    @redis_retry()
    def _get(self, key: str) -> Optional[str]:
        return self.client.get(key)

    @redis_retry()
    def _set(self, key: str, value: str) -> None:
        self.client.set(key, value)


class StorageKeys:
    """Key layout for cart storage."""

    CART = config.CART_STORAGE_KEY  # cart, or cart:{session}

    @staticmethod
    def cart_key(session_id: Optional[str] = None) -> str:
        if not session_id:
            return StorageKeys.CART
        return f"{StorageKeys.CART}:{session_id}"


_storage: Optional[KeyValueStorage] = None


def get_storage() -> KeyValueStorage:
    """
    Get the process-wide storage (singleton).

    Uses Upstash Redis when UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN
    are set, otherwise an in-memory store.
    """
    global _storage

    if _storage is None:
        if config.UPSTASH_REDIS_REST_URL and config.UPSTASH_REDIS_REST_TOKEN:
            _storage = RedisStorage.from_env()
        else:
            logger.warning("Upstash Redis not configured, carts are kept in memory")
            _storage = MemoryStorage()

    return _storage
