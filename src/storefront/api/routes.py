"""FastAPI endpoints for the Storefront."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.addresses.address import Address
from storefront.addresses.management import AddAddress
from storefront.api.auth import get_current_customer
from storefront.api.schemas import (
    AddAddressRequest,
    AddressResponse,
    AddToCartRequest,
    AddToWishlistRequest,
    CartItemResponse,
    CategoryResponse,
    OrderResponse,
    PlaceOrderRequest,
    ProductResponse,
    SuccessResponse,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
    WishlistItemResponse,
)
from storefront.cart.cart_item import CartItem
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.checkout.placement import checkout
from storefront.ordering.order import Order
from storefront.ordering.status import UpdateOrderStatus
from storefront.wishlist.items import AddToWishlist, RemoveFromWishlist
from storefront.wishlist.wishlist_item import WishlistItem

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])
cart_router = APIRouter(prefix="/cart", tags=["cart"])
wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
address_router = APIRouter(prefix="/addresses", tags=["addresses"])


# --- Catalogue endpoints (public) ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).list_all()
    return [ProductResponse.from_aggregate(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_aggregate(product)


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).list_all()
    return [CategoryResponse.from_aggregate(category) for category in categories]


# --- Cart endpoints ---


@cart_router.get("", response_model=list[CartItemResponse])
async def list_cart(customer_id: str = Depends(get_current_customer)) -> list[CartItemResponse]:
    items = current_domain.repository_for(CartItem).list_for_customer(customer_id)
    return [CartItemResponse.from_aggregate(item) for item in items]


@cart_router.post("", response_model=CartItemResponse)
async def add_to_cart(
    body: AddToCartRequest, customer_id: str = Depends(get_current_customer)
) -> CartItemResponse:
    command = AddToCart(customer_id=customer_id, product_id=body.product_id, quantity=body.quantity)
    item_id = current_domain.process(command, asynchronous=False)
    return CartItemResponse.from_aggregate(current_domain.repository_for(CartItem).get(item_id))


@cart_router.patch("/{item_id}", response_model=CartItemResponse)
async def update_cart_item(
    item_id: str, body: UpdateCartItemRequest, customer_id: str = Depends(get_current_customer)
) -> CartItemResponse:
    command = UpdateCartQuantity(customer_id=customer_id, item_id=item_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return CartItemResponse.from_aggregate(current_domain.repository_for(CartItem).get(item_id))


@cart_router.delete("/{item_id}", response_model=SuccessResponse)
async def remove_cart_item(item_id: str, customer_id: str = Depends(get_current_customer)) -> SuccessResponse:
    current_domain.process(RemoveFromCart(customer_id=customer_id, item_id=item_id), asynchronous=False)
    return SuccessResponse()


# --- Wishlist endpoints ---


@wishlist_router.get("", response_model=list[WishlistItemResponse])
async def list_wishlist(customer_id: str = Depends(get_current_customer)) -> list[WishlistItemResponse]:
    items = current_domain.repository_for(WishlistItem).list_for_customer(customer_id)
    return [WishlistItemResponse.from_aggregate(item) for item in items]


@wishlist_router.post("", response_model=WishlistItemResponse)
async def add_to_wishlist(
    body: AddToWishlistRequest, customer_id: str = Depends(get_current_customer)
) -> WishlistItemResponse:
    item_id = current_domain.process(
        AddToWishlist(customer_id=customer_id, product_id=body.product_id), asynchronous=False
    )
    return WishlistItemResponse.from_aggregate(current_domain.repository_for(WishlistItem).get(item_id))


@wishlist_router.delete("/{item_id}", response_model=SuccessResponse)
async def remove_wishlist_item(item_id: str, customer_id: str = Depends(get_current_customer)) -> SuccessResponse:
    current_domain.process(RemoveFromWishlist(customer_id=customer_id, item_id=item_id), asynchronous=False)
    return SuccessResponse()


# --- Order endpoints ---
# /orders/all is declared before the /{order_id} routes so it is never read as an id.


@order_router.get("", response_model=list[OrderResponse])
async def list_my_orders(customer_id: str = Depends(get_current_customer)) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).list_for_customer(customer_id)
    return [OrderResponse.from_aggregate(order) for order in orders]


@order_router.get("/all", response_model=list[OrderResponse])
async def list_all_orders(customer_id: str = Depends(get_current_customer)) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).list_all()
    return [OrderResponse.from_aggregate(order) for order in orders]


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, customer_id: str = Depends(get_current_customer)) -> OrderResponse:
    items = [line.model_dump(exclude_none=True) for line in body.items] if body.items else None
    order_id = checkout(customer_id, body.address_id, items=items, total=body.total)
    return OrderResponse.from_aggregate(current_domain.repository_for(Order).get(order_id))


@order_router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, customer_id: str = Depends(get_current_customer)
) -> OrderResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return OrderResponse.from_aggregate(current_domain.repository_for(Order).get(order_id))


# --- Address endpoints ---


@address_router.get("", response_model=list[AddressResponse])
async def list_addresses(customer_id: str = Depends(get_current_customer)) -> list[AddressResponse]:
    addresses = current_domain.repository_for(Address).list_for_customer(customer_id)
    return [AddressResponse.from_aggregate(address) for address in addresses]


@address_router.post("", status_code=201, response_model=AddressResponse)
async def add_address(body: AddAddressRequest, customer_id: str = Depends(get_current_customer)) -> AddressResponse:
    command = AddAddress(customer_id=customer_id, **body.model_dump())
    address_id = current_domain.process(command, asynchronous=False)
    return AddressResponse.from_aggregate(current_domain.repository_for(Address).get(address_id))
