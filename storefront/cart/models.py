"""Cart models with Decimal-based pricing."""
import json
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import List, Optional

from storefront.services.money import multiply, parse_price


def make_item_id(product_id: str, variant_label: str) -> str:
    """Line item key: one entry per (product, size) pair."""
    return f"{product_id}-{variant_label}"


def _require_str(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _require_quantity(value) -> int:
    # JSON written by the browser may hold 2.0 for 2
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"quantity must be a number, got {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"quantity must be whole, got {value}")
        value = int(value)
    if value < 1:
        raise ValueError(f"quantity must be positive, got {value}")
    return value


@dataclass
class LineItem:
    """Single row in the cart, keyed by product + size."""
    id: str
    name: str
    price: Decimal
    quantity: int
    size: str

    @property
    def subtotal(self) -> Decimal:
        """Unrounded price * quantity."""
        return multiply(self.price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to the persisted layout (price as a decimal string)."""
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
            "quantity": self.quantity,
            "size": self.size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LineItem":
        """
        Create from the persisted layout.

        Raises:
            KeyError, TypeError, ValueError: If the entry is malformed
        """
        if not isinstance(data, dict):
            raise TypeError(f"line item must be an object, got {type(data).__name__}")
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            price=parse_price(data["price"], prefix=""),
            quantity=_require_quantity(data["quantity"]),
            size=_require_str(data, "size"),
        )


@dataclass
class Cart:
    """Ordered line items, unique by id."""
    items: List[LineItem] = field(default_factory=list)

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(item.quantity for item in self.items)

    @property
    def total_price(self) -> Decimal:
        """Unrounded grand total."""
        return sum((item.subtotal for item in self.items), Decimal("0"))

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find(self, item_id: str) -> Optional[LineItem]:
        return next((item for item in self.items if item.id == item_id), None)

    def copy_items(self) -> List[LineItem]:
        return [replace(item) for item in self.items]

    def to_json(self) -> str:
        """Serialize for storage."""
        return json.dumps([item.to_dict() for item in self.items], ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str) -> "Cart":
        """
        Parse the persisted value.

        Raises:
            json.JSONDecodeError, KeyError, TypeError, ValueError: If malformed
        """
        data = json.loads(raw)
        if not isinstance(data, list):
            raise TypeError(f"cart must be a list, got {type(data).__name__}")

        items = [LineItem.from_dict(entry) for entry in data]
        seen = set()
        for item in items:
            if item.id in seen:
                raise ValueError(f"duplicate line item id {item.id!r}")
            seen.add(item.id)
        return cls(items=items)
