"""Cart package: models, storage, store and command dispatcher."""
from .models import Cart, LineItem, make_item_id
from .service import CartStore
from .commands import AddToCartForm, CartDispatcher

__all__ = [
    "Cart",
    "LineItem",
    "make_item_id",
    "CartStore",
    "AddToCartForm",
    "CartDispatcher",
]
