"""Order aggregate: an immutable record of a checkout, except for its status.

Line items are snapshots: name, image and unit price are copied from the
catalogue when the order is placed and never follow later product changes.

Status:
    On Process (placed) -> Shipped -> Delivered

Any status may be set from any other. The storefront has never enforced a
transition order, and the admin view relies on being able to correct a
status in either direction.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.ordering.events import OrderPlaced, OrderStatusChanged
from storefront.utils.queries import fetch_all

FREE_SHIPPING_ABOVE = 500
SHIPPING_FEE = 50


class OrderStatus(Enum):
    PLACED = "On Process"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


def shipping_for(subtotal):
    """Flat shipping fee, waived for orders above the free-shipping threshold."""
    return 0 if subtotal > FREE_SHIPPING_ABOVE else SHIPPING_FEE


def parse_status(value):
    """Return the ``OrderStatus`` for a wire literal, or raise ``ValidationError``."""
    try:
        return OrderStatus(value)
    except ValueError:
        valid = ", ".join(status.value for status in OrderStatus)
        raise ValidationError({"status": [f"Invalid status '{value}', expected one of: {valid}"]}) from None


@storefront.entity(part_of="Order")
class OrderItem:
    position = Integer(required=True, min_value=0)
    product_id = Identifier(required=True)
    product_name = String(sanitize=False, required=True, max_length=255)
    product_image = String(sanitize=False, max_length=1024)
    quantity = Integer(required=True, min_value=1)
    price = Integer(required=True, min_value=0)

    @property
    def line_total(self):
        return self.price * self.quantity


@storefront.aggregate
class Order:
    customer_id = Identifier(required=True)
    items = HasMany(OrderItem)
    subtotal = Integer(default=0, min_value=0)
    shipping = Integer(default=0, min_value=0)
    total = Integer(default=0, min_value=0)
    address_id = Identifier(required=True)
    status = String(
        sanitize=False,
        choices=OrderStatus,
        default=OrderStatus.PLACED.value,
    )
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_must_include_shipping(self):
        if self.total != self.subtotal + self.shipping:
            raise ValidationError({"total": ["Order total must equal subtotal plus shipping"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer_id, lines, address_id):
        """Create an order from line snapshots.

        Args:
            customer_id: The customer placing the order.
            lines: Dicts with product_id, product_name, product_image,
                quantity and price, in the order they were entered.
            address_id: Delivery address reference.
        """
        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            address_id=address_id,
            status=OrderStatus.PLACED.value,
            created_at=now,
            updated_at=now,
        )

        with atomic_change(order):
            for position, line in enumerate(lines):
                order.add_items(
                    OrderItem(
                        position=position,
                        product_id=line["product_id"],
                        product_name=line["product_name"],
                        product_image=line.get("product_image"),
                        quantity=line["quantity"],
                        price=line["price"],
                    )
                )
            order.subtotal = sum(line["price"] * line["quantity"] for line in lines)
            order.shipping = shipping_for(order.subtotal)
            order.total = order.subtotal + order.shipping

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                items=json.dumps(lines),
                subtotal=order.subtotal,
                shipping=order.shipping,
                total=order.total,
                address_id=str(address_id),
                placed_at=now,
            )
        )
        return order

    @property
    def line_items(self):
        """Items in the order they were entered."""
        return sorted(self.items, key=lambda item: item.position)

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    def set_status(self, new_status):
        target = parse_status(new_status)

        previous_status = self.status
        self.status = target.value
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous_status,
                new_status=target.value,
            )
        )


@storefront.repository(part_of=Order)
class OrderRepository:
    def list_for_customer(self, customer_id: str) -> list[Order]:
        orders = fetch_all(self._dao.query.filter(customer_id=str(customer_id)))
        return sorted(orders, key=lambda order: order.created_at)

    def list_all(self) -> list[Order]:
        return sorted(fetch_all(self._dao.query), key=lambda order: order.created_at)
