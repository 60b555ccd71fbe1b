"""Storage access for cart."""
from storefront.db import KeyValueStorage, MemoryStorage, StorageKeys, get_storage

__all__ = ["KeyValueStorage", "MemoryStorage", "StorageKeys", "get_storage"]
