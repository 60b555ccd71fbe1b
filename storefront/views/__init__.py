"""Presentation state derived from the cart store."""
from .cart import (
    BadgeView,
    CartRowView,
    CartView,
    HandoffView,
    RowControl,
    ViewSynchronizer,
    encode_uri_component,
    toast_message,
)
from .navbar import navbar_css_class

__all__ = [
    "BadgeView",
    "CartRowView",
    "CartView",
    "HandoffView",
    "RowControl",
    "ViewSynchronizer",
    "encode_uri_component",
    "toast_message",
    "navbar_css_class",
]
