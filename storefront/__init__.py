"""
IDOS Storefront Module

This package contains the storefront cart components:
- db: key-value storage substrate (Upstash Redis or in-memory)
- cart: cart store and command dispatcher
- views: derived presentation state (badge, itemized cart, handoff)
- auth: debug-only identity token decoding
- routers: FastAPI endpoints for the cart widget
"""

__all__ = [
    "get_storage",
    "CartStore",
]


def __getattr__(name):
    """Lazy attribute access to keep module loading light."""
    if name == "get_storage":
        from storefront.db import get_storage
        return get_storage
    if name == "CartStore":
        from storefront.cart import CartStore
        return CartStore
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
