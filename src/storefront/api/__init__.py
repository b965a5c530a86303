"""Storefront API package."""

from storefront.api.errors import register_error_handlers
from storefront.api.routes import (
    address_router,
    cart_router,
    category_router,
    order_router,
    product_router,
    wishlist_router,
)

__all__ = [
    "product_router",
    "category_router",
    "cart_router",
    "wishlist_router",
    "order_router",
    "address_router",
    "register_error_handlers",
]
