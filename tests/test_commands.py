"""
Tests for the cart command dispatcher
"""

import pytest
from decimal import Decimal

from storefront.cart import AddToCartForm
from storefront.cart.commands import parse_quantity
from storefront.errors import (
    ERROR_INVALID_QUANTITY,
    ERROR_PRICE_UNAVAILABLE,
    ERROR_SIZE_NOT_SELECTED,
    CartInputError,
)


class TestAddToCart:
    """Tests for add_to_cart validation and effects."""

    def test_adds_and_refreshes_badge(self, dispatcher, store, shirt):
        """Test a valid card is added."""
        result = dispatcher.add_to_cart(AddToCartForm(quantity="2", **shirt))

        assert result.badge.count == 2
        assert result.badge.visible is True
        assert result.toast == '"Shirt" se ha añadido al carrito.'
        assert result.quantity_reset == 1
        assert store.get_all()[0].id == "P1-M"

    def test_price_text_is_parsed(self, dispatcher, store, shirt):
        """Test 'S/ 49.90' from the card."""
        dispatcher.add_to_cart(AddToCartForm(**{**shirt, "price": "S/ 49.90", "quantity": 1}))

        assert store.get_all()[0].price == Decimal("49.90")

    def test_missing_size_rejected(self, dispatcher, store, shirt):
        """Test no size selected."""
        with pytest.raises(CartInputError) as exc_info:
            dispatcher.add_to_cart(AddToCartForm(**{**shirt, "size": None}))

        assert exc_info.value.message == ERROR_SIZE_NOT_SELECTED
        assert store.get_all() == []

    def test_blank_size_rejected(self, dispatcher, store, shirt):
        """Test whitespace size label."""
        with pytest.raises(CartInputError):
            dispatcher.add_to_cart(AddToCartForm(**{**shirt, "size": "  "}))

        assert store.is_empty()

    def test_non_numeric_quantity_rejected(self, dispatcher, store, shirt):
        """Test quantity text that is not a number."""
        with pytest.raises(CartInputError) as exc_info:
            dispatcher.add_to_cart(AddToCartForm(quantity="dos", **shirt))

        assert exc_info.value.message == ERROR_INVALID_QUANTITY
        assert store.is_empty()

    def test_non_positive_quantity_rejected(self, dispatcher, store, shirt):
        """Test zero and negative quantities."""
        for quantity in (0, "-3"):
            with pytest.raises(CartInputError):
                dispatcher.add_to_cart(AddToCartForm(quantity=quantity, **shirt))

        assert store.is_empty()

    def test_bad_price_rejected(self, dispatcher, store, shirt):
        """Test missing price."""
        with pytest.raises(CartInputError) as exc_info:
            dispatcher.add_to_cart(AddToCartForm(**{**shirt, "price": None}))

        assert exc_info.value.message == ERROR_PRICE_UNAVAILABLE
        assert store.is_empty()

    def test_huge_price_rejected(self, dispatcher, store, shirt):
        """Test an out-of-range price leaves the cart intact."""
        dispatcher.add_to_cart(AddToCartForm(quantity=2, **shirt))

        with pytest.raises(CartInputError) as exc_info:
            dispatcher.add_to_cart(AddToCartForm(**{**shirt, "size": "L", "price": "1e400", "quantity": 1}))

        assert exc_info.value.message == ERROR_PRICE_UNAVAILABLE
        assert [item.id for item in store.get_all()] == ["P1-M"]
        assert store.total_item_count() == 2

    def test_rejection_keeps_existing_cart(self, dispatcher, store, memory_storage, shirt):
        """Test a rejected add leaves stored data untouched."""
        dispatcher.add_to_cart(AddToCartForm(quantity=1, **shirt))
        before = memory_storage.get("cart")

        with pytest.raises(CartInputError):
            dispatcher.add_to_cart(AddToCartForm(quantity="x", **shirt))

        assert memory_storage.get("cart") == before


class TestCartModalCommands:
    """Tests for quantity edits, removal, open and checkout."""

    def test_change_quantity(self, dispatcher, shirt):
        """Test editing the quantity field."""
        dispatcher.add_to_cart(AddToCartForm(quantity=1, **shirt))

        refresh = dispatcher.change_quantity("P1-M", "4")

        assert refresh.cart.rows[0].quantity == 4
        assert refresh.badge.count == 4

    def test_change_quantity_to_zero_removes(self, dispatcher, shirt):
        """Test zero removes the row and shows the placeholder."""
        dispatcher.add_to_cart(AddToCartForm(quantity=1, **shirt))

        refresh = dispatcher.change_quantity("P1-M", 0)

        assert refresh.cart.is_empty is True
        assert refresh.cart.checkout_enabled is False
        assert refresh.badge.visible is False

    def test_change_quantity_non_numeric_rejected(self, dispatcher, store, shirt):
        """Test non-numeric edits leave the row alone."""
        dispatcher.add_to_cart(AddToCartForm(quantity=2, **shirt))

        with pytest.raises(CartInputError):
            dispatcher.change_quantity("P1-M", "")

        assert store.get_all()[0].quantity == 2

    def test_remove_item(self, dispatcher, shirt):
        """Test the trash button."""
        dispatcher.add_to_cart(AddToCartForm(quantity=2, **shirt))
        dispatcher.add_to_cart(AddToCartForm(**{**shirt, "size": "L", "quantity": 1}))

        refresh = dispatcher.remove_item("P1-M")

        assert [row.id for row in refresh.cart.rows] == ["P1-L"]
        assert refresh.badge.count == 1

    def test_open_cart_empty(self, dispatcher):
        """Test opening an empty cart."""
        refresh = dispatcher.open_cart()

        assert refresh.cart.placeholder == "Tu carrito está vacío."
        assert refresh.cart.checkout_enabled is False

    def test_checkout_empty_does_nothing(self, dispatcher, memory_storage):
        """Test checkout on an empty cart."""
        assert dispatcher.checkout() is None
        assert memory_storage.get("cart") is None

    def test_checkout(self, dispatcher, shirt):
        """Test checkout returns the handoff."""
        dispatcher.add_to_cart(AddToCartForm(quantity=2, **shirt))
        dispatcher.add_to_cart(AddToCartForm(quantity=1, **shirt))

        handoff = dispatcher.checkout()

        assert handoff.total == "149.70"
        assert "3x Shirt (Talla: M)" in handoff.message


def test_parse_quantity():
    """Test quantity field parsing"""
    assert parse_quantity("3") == 3
    assert parse_quantity(" 7 ") == 7
    assert parse_quantity(-1) == -1
    for bad in (None, "", "1.5", "abc", True):
        with pytest.raises(ValueError):
            parse_quantity(bad)
