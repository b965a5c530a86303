"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A customer's checkout produced a new order."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    items = Text(sanitize=False, required=True)  # JSON: list of line snapshots
    subtotal = Integer(required=True)
    shipping = Integer(required=True)
    total = Integer(required=True)
    address_id = Identifier(required=True)
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An administrator set the order's status."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(sanitize=False, required=True)
    new_status = String(sanitize=False, required=True)
