"""Shared FastAPI dependencies."""
import re
from typing import Optional

from fastapi import Depends, Header, HTTPException

from storefront.cart import CartDispatcher, CartStore
from storefront.db import KeyValueStorage, StorageKeys, get_storage

_SESSION_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def get_cart_storage() -> KeyValueStorage:
    """Storage used by the cart endpoints (overridable in tests)."""
    return get_storage()


def get_cart_key(x_cart_session: Optional[str] = Header(None, alias="X-Cart-Session")) -> str:
    """Per-shopper key when the page sends a session id, else the shared key."""
    if x_cart_session is None:
        return StorageKeys.cart_key()
    if not _SESSION_RE.match(x_cart_session):
        raise HTTPException(status_code=400, detail="Invalid X-Cart-Session header")
    return StorageKeys.cart_key(x_cart_session)


def get_dispatcher(
    storage: KeyValueStorage = Depends(get_cart_storage),
    key: str = Depends(get_cart_key),
) -> CartDispatcher:
    return CartDispatcher(CartStore(storage, key=key))
