"""Pytest configuration and fixtures"""
import os
import pytest
from decimal import Decimal

# Keep tests off any real Redis from a developer's .env
os.environ["UPSTASH_REDIS_REST_URL"] = ""
os.environ["UPSTASH_REDIS_REST_TOKEN"] = ""

from storefront.cart import CartDispatcher, CartStore
from storefront.db import MemoryStorage
from storefront.views import ViewSynchronizer


@pytest.fixture
def memory_storage():
    """Empty in-memory storage"""
    return MemoryStorage()


@pytest.fixture
def store(memory_storage):
    """Cart store on the shared 'cart' key"""
    return CartStore(memory_storage, key="cart")


@pytest.fixture
def views(store):
    """View synchronizer with the storefront's defaults"""
    return ViewSynchronizer(
        store,
        store_name="IDOS",
        phone="51916796360",
        base_url="https://wa.me",
        currency_prefix="S/",
    )


@pytest.fixture
def dispatcher(store, views):
    """Command dispatcher"""
    return CartDispatcher(store, views)


@pytest.fixture
def shirt():
    """Sample product card values"""
    return {
        "product_id": "P1",
        "name": "Shirt",
        "price": Decimal("49.90"),
        "size": "M",
    }
