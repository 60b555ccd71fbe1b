"""
Cart command dispatcher.

Each shopper action is one store call followed by an explicit view refresh:

    add_to_cart     -> add_or_merge  -> badge
    change_quantity -> set_quantity  -> cart view + badge
    remove_item     -> remove        -> cart view + badge
    open_cart       -> (read only)   -> cart view + badge
    checkout        -> (read only)   -> handoff

Raw values from the page are validated here; rejected input raises
CartInputError and leaves the cart untouched.
"""
from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel

from storefront.errors import (
    ERROR_INVALID_QUANTITY,
    ERROR_PRICE_UNAVAILABLE,
    ERROR_PRODUCT_UNKNOWN,
    ERROR_SIZE_NOT_SELECTED,
    CartInputError,
)
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.money import MAX_PRICE, parse_price
from storefront.views.cart import BadgeView, CartView, HandoffView, ViewSynchronizer, toast_message
from .service import CartStore

logger = get_logger(__name__)

# Quantity field value after a successful add
DEFAULT_QUANTITY = 1


class AddToCartForm(BaseModel):
    """Values read from a product card."""
    product_id: Optional[str] = None
    name: str = ""
    price: Union[Decimal, float, int, str, None] = None
    quantity: Union[int, str, None] = DEFAULT_QUANTITY
    size: Optional[str] = None


class AddToCartResult(BaseModel):
    badge: BadgeView
    toast: str
    quantity_reset: int = DEFAULT_QUANTITY


class CartRefresh(BaseModel):
    cart: CartView
    badge: BadgeView


def parse_quantity(raw: Union[int, str, None]) -> int:
    """
    Parse a quantity field value.

    Raises:
        ValueError: If the value is not a whole number
    """
    if raw is None or isinstance(raw, bool):
        raise ValueError(f"Invalid quantity: {raw!r}")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    try:
        return int(text)
    except ValueError as e:
        raise ValueError(f"Invalid quantity: {raw!r}") from e


class CartDispatcher:
    """Maps shopper actions to CartStore calls and view refreshes."""

    def __init__(self, store: CartStore, views: Optional[ViewSynchronizer] = None):
        self.store = store
        self.views = views or ViewSynchronizer(store)

    def _refresh(self) -> CartRefresh:
        return CartRefresh(
            cart=self.views.refresh_itemized_view(),
            badge=self.views.refresh_badge(),
        )

    def add_to_cart(self, form: AddToCartForm) -> AddToCartResult:
        """Validate a product card and add it to the cart."""
        if not form.product_id:
            raise CartInputError(ERROR_PRODUCT_UNKNOWN)

        try:
            price = parse_price(form.price)
            if price > MAX_PRICE:
                raise ValueError(f"Price above limit: {price}")
        except ValueError:
            logger.error(f"Price missing for product {sanitize_id_for_logging(form.product_id)}")
            raise CartInputError(ERROR_PRICE_UNAVAILABLE)

        size = (form.size or "").strip()
        if not size:
            raise CartInputError(ERROR_SIZE_NOT_SELECTED)

        try:
            quantity = parse_quantity(form.quantity)
        except ValueError:
            raise CartInputError(ERROR_INVALID_QUANTITY)
        if quantity <= 0:
            raise CartInputError(ERROR_INVALID_QUANTITY)

        self.store.add_or_merge(
            product_id=form.product_id,
            variant_label=size,
            name=form.name,
            price=price,
            quantity=quantity,
        )

        return AddToCartResult(
            badge=self.views.refresh_badge(),
            toast=toast_message(form.name),
        )

    def change_quantity(self, item_id: str, raw_quantity: Union[int, str, None]) -> CartRefresh:
        """Quantity field edited in the cart modal; zero or less removes the row."""
        try:
            quantity = parse_quantity(raw_quantity)
        except ValueError:
            raise CartInputError(ERROR_INVALID_QUANTITY)

        self.store.set_quantity(item_id, quantity)
        return self._refresh()

    def remove_item(self, item_id: str) -> CartRefresh:
        self.store.remove(item_id)
        return self._refresh()

    def open_cart(self) -> CartRefresh:
        return self._refresh()

    def checkout(self) -> Optional[HandoffView]:
        """Handoff for the payment dialog; None when the cart is empty."""
        return self.views.prepare_handoff()
