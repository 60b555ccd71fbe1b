"""Cart store over a key-value storage."""
from decimal import Decimal
from typing import List, Optional

from storefront.logging import get_logger, sanitize_id_for_logging
from .models import Cart, LineItem, make_item_id
from .storage import KeyValueStorage, StorageKeys

logger = get_logger(__name__)


class CartStore:
    """
    Owns the shopper's line items.

    Every operation loads the whole cart from storage, changes it in memory
    and writes the whole cart back. Nothing is cached between calls, so two
    stores pointed at the same storage key always agree.

    Usage:
        store = CartStore(MemoryStorage())
        store.add_or_merge("P1", "M", "Polo", Decimal("49.90"), 2)
        store.total_price()  # Decimal("99.80")
    """

    def __init__(self, storage: KeyValueStorage, key: Optional[str] = None):
        self.storage = storage
        self.key = key or StorageKeys.cart_key()

    def load(self) -> Cart:
        """Read the cart; missing or corrupted data reads as empty."""
        raw = self.storage.get(self.key)
        if not raw:
            return Cart()

        try:
            return Cart.from_json(raw)
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            # Left in place; the next write replaces it
            logger.warning(f"Corrupted cart data under {sanitize_id_for_logging(self.key)}: {e}")
            return Cart()

    def save(self, cart: Cart) -> None:
        self.storage.set(self.key, cart.to_json())

    # =====================================================
    # COMMANDS
    # =====================================================
    def add_or_merge(
        self,
        product_id: str,
        variant_label: str,
        name: str,
        price: Decimal,
        quantity: int,
    ) -> None:
        """
        Add units of a product/size, merging into an existing row.

        Name, price and size of an existing row are kept as first added.
        Input is validated by the caller.
        """
        item_id = make_item_id(product_id, variant_label)
        cart = self.load()

        existing = cart.find(item_id)
        if existing:
            existing.quantity += quantity
            logger.info(
                f"Merged {quantity} into {sanitize_id_for_logging(item_id)}, "
                f"now {existing.quantity}"
            )
        else:
            cart.items.append(
                LineItem(
                    id=item_id,
                    name=name,
                    price=price,
                    quantity=quantity,
                    size=variant_label,
                )
            )
            logger.info(f"Added {sanitize_id_for_logging(item_id)} x{quantity}")

        self.save(cart)

    def set_quantity(self, item_id: str, new_quantity: int) -> None:
        """Set a row's quantity; zero or less removes the row. Unknown id is a no-op."""
        cart = self.load()
        existing = cart.find(item_id)
        if existing is None:
            return

        if new_quantity > 0:
            existing.quantity = new_quantity
        else:
            cart.items.remove(existing)
            logger.info(f"Removed {sanitize_id_for_logging(item_id)} (quantity {new_quantity})")

        self.save(cart)

    def remove(self, item_id: str) -> None:
        """Drop a row if present. Always writes back."""
        cart = self.load()
        cart.items = [item for item in cart.items if item.id != item_id]
        self.save(cart)

    # =====================================================
    # QUERIES
    # =====================================================
    def get_all(self) -> List[LineItem]:
        """Line items in cart order; mutating them does not touch storage."""
        return self.load().copy_items()

    def total_item_count(self) -> int:
        return self.load().total_items

    def total_price(self) -> Decimal:
        """Unrounded sum of price * quantity."""
        return self.load().total_price

    def is_empty(self) -> bool:
        return self.load().is_empty
