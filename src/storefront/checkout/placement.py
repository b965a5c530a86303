"""Checkout: turns a customer's cart into an order.

The handler validates every line against current stock before it mutates
anything, then decrements stock, records the order with catalogue snapshots
and clears the customer's whole cart. All of it happens in one unit of work.

``checkout()`` is the entry point callers should use: it holds a
process-wide lock around the unit of work so two parallel checkouts cannot
both pass the stock check on the same units.
"""

import json
import threading

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from storefront.cart.cart_item import CartItem
from storefront.catalogue.product import Product
from storefront.domain import logger, storefront
from storefront.exceptions import InsufficientStockError
from storefront.ordering.order import Order

_checkout_lock = threading.Lock()


@storefront.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    address_id = Identifier(required=True)
    items = Text(sanitize=False)  # JSON: list of {product_id, quantity, product_name?}; empty means "the whole cart"
    total = Integer(min_value=0)  # Client-computed total, checked when present


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lines = self._requested_lines(command)

        # 1. Validate every line before touching stock
        product_repo = current_domain.repository_for(Product)
        products = {}
        demand = {}
        resolved = []
        for line in lines:
            product_id = str(line["product_id"])
            if product_id not in products:
                products[product_id] = product_repo.find(product_id)
            product = products[product_id]

            # Repeated lines for one product draw on the same stock
            demand[product_id] = demand.get(product_id, 0) + line["quantity"]
            if product is None or not product.has_stock_for(demand[product_id]):
                name = product.name if product is not None else line.get("product_name") or product_id
                raise InsufficientStockError.for_product(name)
            resolved.append((product, line["quantity"]))

        snapshots = [
            {
                "product_id": str(product.id),
                "product_name": product.name,
                "product_image": product.image_url,
                "quantity": quantity,
                "price": product.price,
            }
            for product, quantity in resolved
        ]
        order = Order.place(
            customer_id=command.customer_id,
            lines=snapshots,
            address_id=command.address_id,
        )
        if command.total is not None and command.total != order.total:
            raise ValidationError({"total": [f"Order total {command.total} does not match computed total {order.total}"]})

        # 2. Decrement stock
        for product_id, quantity in demand.items():
            product = products[product_id]
            product.adjust_stock(-quantity, reason=f"order:{order.id}")
            product_repo.add(product)

        # 3. Record the order
        current_domain.repository_for(Order).add(order)

        # 4. The order consumes the whole cart
        cleared = current_domain.repository_for(CartItem).clear_for_customer(command.customer_id)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            lines=len(snapshots),
            total=order.total,
            cart_lines_cleared=cleared,
        )
        return str(order.id)

    def _requested_lines(self, command):
        if command.items:
            lines = json.loads(command.items) if isinstance(command.items, str) else command.items
        else:
            lines = [
                {"product_id": str(item.product_id), "quantity": item.quantity}
                for item in current_domain.repository_for(CartItem).list_for_customer(command.customer_id)
            ]

        if not lines:
            raise ValidationError({"items": ["Cannot place an order with no items"]})
        for line in lines:
            if not line.get("product_id"):
                raise ValidationError({"items": ["Every line needs a product_id"]})
            if not isinstance(line.get("quantity"), int) or line["quantity"] < 1:
                raise ValidationError({"items": ["Every line needs a quantity of at least 1"]})
        return lines


def checkout(customer_id, address_id, items=None, total=None):
    """Place an order for ``customer_id`` and return its id.

    Args:
        customer_id: Verified subject placing the order.
        address_id: Delivery address reference.
        items: Optional list of {product_id, quantity, product_name} dicts.
            When omitted, the customer's current cart is ordered.
        total: Optional client-computed total; must match the server total.
    """
    command = PlaceOrder(
        customer_id=customer_id,
        address_id=address_id,
        items=json.dumps(items) if items else None,
        total=total,
    )
    with _checkout_lock:
        return current_domain.process(command, asynchronous=False)
