"""
Cart API Pydantic Models

Request bodies for the cart endpoints. Response bodies are the view models
from storefront.views and storefront.cart.commands.
"""
from typing import Union

from pydantic import BaseModel


# ==================== CART MODELS ====================

class UpdateCartItemRequest(BaseModel):
    item_id: str
    quantity: Union[int, str]  # 0 or less removes the row


# ==================== DEBUG MODELS ====================

class DecodeTokenRequest(BaseModel):
    credential: str
