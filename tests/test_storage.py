"""Tests for the storage substrate"""
import httpx
import pytest
from unittest.mock import Mock
from decimal import Decimal

from upstash_redis.errors import UpstashError

from storefront.cart import CartStore
from storefront.db import MemoryStorage, RedisStorage, StorageKeys
from storefront.errors import StorageUnavailableError


def test_memory_storage():
    """Test get/set/delete"""
    storage = MemoryStorage({"cart": "[]"})

    assert storage.get("cart") == "[]"
    assert storage.get("missing") is None
    storage.set("cart", "x")
    assert storage.get("cart") == "x"
    storage.delete("cart")
    assert storage.get("cart") is None


def test_cart_keys():
    """Test key layout"""
    assert StorageKeys.cart_key() == "cart"
    assert StorageKeys.cart_key("s1") == "cart:s1"


def test_redis_storage_round_trip():
    """Test cart store over a mocked Redis client"""
    data = {}
    client = Mock()
    client.get.side_effect = data.get
    client.set.side_effect = lambda key, value: data.__setitem__(key, value)

    store = CartStore(RedisStorage(client), key="cart:s1")
    store.add_or_merge("P1", "M", "Shirt", Decimal("49.90"), 2)

    assert "cart:s1" in data
    assert store.total_item_count() == 2


def test_redis_storage_retries_then_fails():
    """Test transient errors are retried and then surfaced"""
    client = Mock()
    client.get.side_effect = UpstashError("boom")

    with pytest.raises(StorageUnavailableError):
        RedisStorage(client).get("cart")

    assert client.get.call_count == 3


def test_redis_storage_recovers_after_transient_error():
    """Test a retry succeeds"""
    client = Mock()
    client.set.side_effect = [httpx.ConnectError("reset"), None]

    RedisStorage(client).set("cart", "[]")

    assert client.set.call_count == 2


def test_redis_storage_from_env_requires_credentials(monkeypatch):
    """Test missing Upstash credentials"""
    from storefront import config

    monkeypatch.setattr(config, "UPSTASH_REDIS_REST_URL", "")

    with pytest.raises(ValueError):
        RedisStorage.from_env()
