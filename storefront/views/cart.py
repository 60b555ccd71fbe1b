"""
Cart View Synchronizer

Builds what the page shows from the cart store:
- badge counter over the cart icon
- itemized rows and grand total in the cart modal
- the WhatsApp handoff link for Yape payment

Nothing here is stored; every refresh reads the store again.
"""
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional
from urllib.parse import quote

from pydantic import BaseModel

from storefront import config
from storefront.logging import get_logger
from storefront.services.money import format_amount, format_money

if TYPE_CHECKING:
    from storefront.cart.service import CartStore

logger = get_logger(__name__)

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"

HANDOFF_TEMPLATE = (
    "¡Hola {store}! 👋 Quisiera comprar los siguientes productos por un total de {total}:"
    "\n\n{lines}\n\n"
    "Adjuntaré mi constancia de pago Yape. ¡Gracias!"
)
HANDOFF_LINE = "{quantity}x {name} (Talla: {size})"
TOTAL_LABEL = "Total a Pagar: {total}"
EMPTY_CART_PLACEHOLDER = "Tu carrito está vacío."


def encode_uri_component(text: str) -> str:
    """Percent-encode text the way JavaScript's encodeURIComponent does."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def toast_message(product_name: str) -> str:
    """Confirmation shown after an item is added."""
    return f'"{product_name}" se ha añadido al carrito.'


class BadgeView(BaseModel):
    count: int
    visible: bool


class RowControl(BaseModel):
    """A control on a cart row, bound to the dispatcher command it triggers."""
    command: str
    item_id: str
    value: Optional[int] = None
    min_value: Optional[int] = None


class CartRowView(BaseModel):
    id: str
    name: str
    unit_price: str
    unit_price_display: str
    size: str
    quantity: int
    quantity_control: RowControl
    remove_control: RowControl


class CartView(BaseModel):
    rows: List[CartRowView]
    is_empty: bool
    placeholder: Optional[str] = None
    total: str
    total_display: str
    checkout_enabled: bool


class HandoffView(BaseModel):
    total: str
    total_label: str
    message: str
    url: str


class ViewSynchronizer:
    """Derives presentation state from a CartStore on every call."""

    def __init__(
        self,
        store: "CartStore",
        store_name: str = config.STORE_NAME,
        phone: str = config.WHATSAPP_PHONE,
        base_url: str = config.WHATSAPP_BASE_URL,
        currency_prefix: str = config.CURRENCY_PREFIX,
    ):
        self.store = store
        self.store_name = store_name
        self.phone = phone
        self.base_url = base_url.rstrip("/")
        self.currency_prefix = currency_prefix

    def _money(self, value) -> str:
        return format_money(value, prefix=self.currency_prefix)

    def refresh_badge(self) -> BadgeView:
        """Counter over the cart icon; hidden rather than showing 0."""
        count = self.store.total_item_count()
        return BadgeView(count=count, visible=count > 0)

    def refresh_itemized_view(self) -> CartView:
        """Rows for the cart modal, or the empty placeholder."""
        items = self.store.get_all()

        if not items:
            return CartView(
                rows=[],
                is_empty=True,
                placeholder=EMPTY_CART_PLACEHOLDER,
                total=format_amount(0),
                total_display=self._money(0),
                checkout_enabled=False,
            )

        rows = [
            CartRowView(
                id=item.id,
                name=item.name,
                unit_price=format_amount(item.price),
                unit_price_display=self._money(item.price),
                size=item.size,
                quantity=item.quantity,
                quantity_control=RowControl(
                    command="change_quantity",
                    item_id=item.id,
                    value=item.quantity,
                    min_value=1,
                ),
                remove_control=RowControl(command="remove_item", item_id=item.id),
            )
            for item in items
        ]
        total = sum((item.subtotal for item in items), Decimal("0"))

        return CartView(
            rows=rows,
            is_empty=False,
            total=format_amount(total),
            total_display=self._money(total),
            checkout_enabled=True,
        )

    def prepare_handoff(self) -> Optional[HandoffView]:
        """
        Build the WhatsApp message for manual payment confirmation.

        Returns:
            HandoffView, or None when the cart is empty (nothing to open)
        """
        items = self.store.get_all()
        if not items:
            return None

        total = sum((item.subtotal for item in items), Decimal("0"))
        total_display = self._money(total)
        lines = "\n".join(
            HANDOFF_LINE.format(quantity=item.quantity, name=item.name, size=item.size)
            for item in items
        )
        message = HANDOFF_TEMPLATE.format(store=self.store_name, total=total_display, lines=lines)
        url = f"{self.base_url}/{self.phone}?text={encode_uri_component(message)}"

        logger.info(f"Prepared handoff for {len(items)} line(s), total {total_display}")

        return HandoffView(
            total=format_amount(total),
            total_label=TOTAL_LABEL.format(total=total_display),
            message=message,
            url=url,
        )
