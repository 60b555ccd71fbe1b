"""
Common Error Constants and Exceptions

User-facing messages are shown verbatim in the storefront (Spanish).
"""

# Add-to-cart rejections
ERROR_SIZE_NOT_SELECTED = "Por favor, selecciona una talla antes de añadir al carrito."
ERROR_INVALID_QUANTITY = "Por favor, selecciona una cantidad válida."
ERROR_PRICE_UNAVAILABLE = "Error: No se pudo obtener el precio del producto."
ERROR_PRODUCT_UNKNOWN = "Error: No se pudo encontrar el producto."

# Checkout
ERROR_EMPTY_CART = "Tu carrito está vacío."

# Infrastructure
ERROR_STORAGE_UNAVAILABLE = "Cart storage unavailable"


class CartInputError(ValueError):
    """Raised when shopper input is rejected before touching the cart."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StorageUnavailableError(RuntimeError):
    """Raised when the key-value storage cannot be reached."""
