"""
Cart Router

Endpoints behind the storefront cart widget. Each endpoint is one dispatcher
command and returns the refreshed views the page needs to redraw.
"""
from fastapi import APIRouter, Depends, HTTPException

from storefront.cart import AddToCartForm, CartDispatcher
from storefront.cart.commands import AddToCartResult, CartRefresh
from storefront.errors import ERROR_EMPTY_CART, CartInputError, StorageUnavailableError
from storefront.logging import get_logger
from storefront.views import BadgeView, HandoffView
from .deps import get_dispatcher
from .models import UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(prefix="/api/cart", tags=["cart"])


def _unavailable(e: StorageUnavailableError) -> HTTPException:
    logger.error(f"Cart storage unavailable: {e}")
    return HTTPException(status_code=503, detail=str(e))


@router.get("", response_model=CartRefresh)
def get_cart(dispatcher: CartDispatcher = Depends(get_dispatcher)):
    """Itemized cart and badge (cart modal opened)."""
    try:
        return dispatcher.open_cart()
    except StorageUnavailableError as e:
        raise _unavailable(e)


@router.get("/badge", response_model=BadgeView)
def get_badge(dispatcher: CartDispatcher = Depends(get_dispatcher)):
    """Badge counter for page load."""
    try:
        return dispatcher.views.refresh_badge()
    except StorageUnavailableError as e:
        raise _unavailable(e)


@router.post("/add", response_model=AddToCartResult)
def add_to_cart(form: AddToCartForm, dispatcher: CartDispatcher = Depends(get_dispatcher)):
    """Add a product card's selection to the cart."""
    try:
        return dispatcher.add_to_cart(form)
    except CartInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StorageUnavailableError as e:
        raise _unavailable(e)


@router.patch("/item", response_model=CartRefresh)
def update_cart_item(request: UpdateCartItemRequest, dispatcher: CartDispatcher = Depends(get_dispatcher)):
    """Update cart item quantity (0 = remove)."""
    try:
        return dispatcher.change_quantity(request.item_id, request.quantity)
    except CartInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StorageUnavailableError as e:
        raise _unavailable(e)


@router.delete("/item/{item_id:path}", response_model=CartRefresh)
def remove_cart_item(item_id: str, dispatcher: CartDispatcher = Depends(get_dispatcher)):
    """Remove a row from the cart."""
    try:
        return dispatcher.remove_item(item_id)
    except StorageUnavailableError as e:
        raise _unavailable(e)


@router.post("/checkout", response_model=HandoffView)
def checkout(dispatcher: CartDispatcher = Depends(get_dispatcher)):
    """WhatsApp handoff link and total for the Yape payment dialog."""
    try:
        handoff = dispatcher.checkout()
    except StorageUnavailableError as e:
        raise _unavailable(e)

    if handoff is None:
        raise HTTPException(status_code=409, detail=ERROR_EMPTY_CART)
    return handoff
