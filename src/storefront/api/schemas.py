"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer), kept separate from
internal Protean commands and aggregates.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str

    @classmethod
    def from_aggregate(cls, category) -> "CategoryResponse":
        return cls(id=str(category.id), name=category.name, slug=category.slug)


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: int
    original_price: int | None = None
    category_id: str
    stock: int
    image_url: str | None = None
    rating: float | None = None
    review_count: int | None = None

    @classmethod
    def from_aggregate(cls, product) -> "ProductResponse":
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            original_price=product.original_price,
            category_id=str(product.category_id),
            stock=product.stock,
            image_url=product.image_url,
            rating=product.rating,
            review_count=product.review_count,
        )


# ---------------------------------------------------------------------------
# Cart & wishlist
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(ge=1)


class CartItemResponse(BaseModel):
    id: str
    customer_id: str
    product_id: str
    quantity: int

    @classmethod
    def from_aggregate(cls, item) -> "CartItemResponse":
        return cls(
            id=str(item.id),
            customer_id=str(item.customer_id),
            product_id=str(item.product_id),
            quantity=item.quantity,
        )


class AddToWishlistRequest(BaseModel):
    product_id: str


class WishlistItemResponse(BaseModel):
    id: str
    customer_id: str
    product_id: str

    @classmethod
    def from_aggregate(cls, item) -> "WishlistItemResponse":
        return cls(id=str(item.id), customer_id=str(item.customer_id), product_id=str(item.product_id))


class SuccessResponse(BaseModel):
    success: bool = True


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderLineRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1)
    product_name: str | None = None


class PlaceOrderRequest(BaseModel):
    address_id: str
    items: list[OrderLineRequest] | None = None
    total: int | None = Field(default=None, ge=0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "address_id": "addr-001",
                    "items": [{"product_id": "1", "quantity": 2, "product_name": "Wireless Bluetooth Headphones"}],
                    "total": 5998,
                }
            ]
        }
    }


class UpdateOrderStatusRequest(BaseModel):
    status: str


class OrderItemResponse(BaseModel):
    product_id: str
    product_name: str
    product_image: str | None = None
    quantity: int
    price: int


class OrderResponse(BaseModel):
    id: str
    customer_id: str
    items: list[OrderItemResponse]
    subtotal: int
    shipping: int
    total: int
    address_id: str
    status: str
    created_at: str | None = None

    @classmethod
    def from_aggregate(cls, order) -> "OrderResponse":
        return cls(
            id=str(order.id),
            customer_id=str(order.customer_id),
            items=[
                OrderItemResponse(
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    product_image=item.product_image,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.line_items
            ],
            subtotal=order.subtotal,
            shipping=order.shipping,
            total=order.total,
            address_id=str(order.address_id),
            status=order.status,
            created_at=order.created_at.isoformat() if order.created_at else None,
        )


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------
class AddAddressRequest(BaseModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    address_line1: str = Field(min_length=1)
    address_line2: str | None = None
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    pincode: str = Field(min_length=1)
    is_default: bool = False


class AddressResponse(BaseModel):
    id: str
    customer_id: str
    name: str
    phone: str
    address_line1: str
    address_line2: str | None = None
    city: str
    state: str
    pincode: str
    is_default: bool

    @classmethod
    def from_aggregate(cls, address) -> "AddressResponse":
        return cls(
            id=str(address.id),
            customer_id=str(address.customer_id),
            name=address.name,
            phone=address.phone,
            address_line1=address.address_line1,
            address_line2=address.address_line2,
            city=address.city,
            state=address.state,
            pincode=address.pincode,
            is_default=bool(address.is_default),
        )
