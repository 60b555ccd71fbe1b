"""API routers."""
from .cart import router as cart_router
from .debug import router as debug_router

__all__ = ["cart_router", "debug_router"]
