"""Shared BDD fixtures and step definitions for the Storefront."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then, when
from storefront.cart.cart_item import CartItem
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from storefront.catalogue.product import Product
from storefront.catalogue.stock import AdjustStock
from storefront.checkout.placement import checkout
from storefront.exceptions import ForbiddenError, InsufficientStockError
from storefront.ordering.order import Order
from storefront.ordering.status import UpdateOrderStatus


@pytest.fixture()
def context():
    """Scenario state shared between steps."""
    return {"error": None, "order_id": None}


def _cart(customer_id):
    return current_domain.repository_for(CartItem).list_for_customer(customer_id)


def _order(context):
    return current_domain.repository_for(Order).get(context["order_id"])


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{product_id}" priced {price:d} with {stock:d} in stock'))
def a_product(add_product, product_id, price, stock):
    add_product(product_id=product_id, name=f"Product {product_id}", price=price, stock=stock)


@given(parsers.cfparse('customer "{customer_id}" has placed an order for {quantity:d} of "{product_id}"'))
def placed_order(context, customer_id, quantity, product_id):
    context["order_id"] = checkout(
        customer_id, "addr-001", items=[{"product_id": product_id, "quantity": quantity}]
    )


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('customer "{customer_id}" adds {quantity:d} of "{product_id}" to the cart'))
@when(parsers.cfparse('customer "{customer_id}" adds {quantity:d} of "{product_id}" to the cart'))
def add_to_cart(customer_id, quantity, product_id):
    current_domain.process(
        AddToCart(customer_id=customer_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


@when(parsers.cfparse('customer "{customer_id}" checks out'))
def checks_out(context, customer_id):
    context["error"] = None
    try:
        context["order_id"] = checkout(customer_id, "addr-001")
    except InsufficientStockError as exc:
        context["error"] = exc


@when(parsers.cfparse('customer "{customer_id}" changes the cart quantity to {quantity:d}'))
def change_own_quantity(customer_id, quantity):
    item = _cart(customer_id)[0]
    current_domain.process(
        UpdateCartQuantity(customer_id=customer_id, item_id=str(item.id), quantity=quantity),
        asynchronous=False,
    )


@when(parsers.cfparse('customer "{customer_id}" changes the cart line of "{owner_id}" to {quantity:d}'))
def change_cart_line(context, customer_id, owner_id, quantity):
    item = _cart(owner_id)[0]
    try:
        current_domain.process(
            UpdateCartQuantity(customer_id=customer_id, item_id=str(item.id), quantity=quantity),
            asynchronous=False,
        )
    except ForbiddenError as exc:
        context["error"] = exc


@when(parsers.cfparse('customer "{customer_id}" removes the cart line of "{owner_id}"'))
def remove_cart_line(context, customer_id, owner_id):
    item = _cart(owner_id)[0]
    try:
        current_domain.process(RemoveFromCart(customer_id=customer_id, item_id=str(item.id)), asynchronous=False)
    except ForbiddenError as exc:
        context["error"] = exc


@when(parsers.cfparse('"{product_id}" sells out elsewhere'))
def sells_out(product_id):
    stock = current_domain.repository_for(Product).get(product_id).stock
    current_domain.process(AdjustStock(product_id=product_id, delta=-stock, reason="sold elsewhere"), asynchronous=False)


@when(parsers.cfparse('the price of "{product_id}" changes to {price:d}'))
def price_changes(product_id, price):
    repo = current_domain.repository_for(Product)
    product = repo.get(product_id)
    product.price = price
    repo.add(product)


@when(parsers.cfparse('the order status is set to "{status}"'))
def set_status(context, status):
    try:
        current_domain.process(UpdateOrderStatus(order_id=context["order_id"], status=status), asynchronous=False)
    except ValidationError as exc:
        context["error"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the cart of "{customer_id}" has {lines:d} line with quantity {quantity:d}'))
def cart_has_line(customer_id, lines, quantity):
    cart = _cart(customer_id)
    assert len(cart) == lines
    assert cart[0].quantity == quantity


@then(parsers.cfparse('the cart of "{customer_id}" is empty'))
def cart_is_empty(customer_id):
    assert _cart(customer_id) == []


@then(parsers.cfparse('"{product_id}" has {stock:d} in stock'))
def product_stock(product_id, stock):
    assert current_domain.repository_for(Product).get(product_id).stock == stock


@then("the checkout fails with insufficient stock")
def checkout_failed(context):
    assert isinstance(context["error"], InsufficientStockError)


@then("the checkout succeeds")
def checkout_succeeded(context):
    assert context["error"] is None
    assert context["order_id"] is not None


@then(parsers.cfparse('customer "{customer_id}" has {count:d} orders'))
def order_count(customer_id, count):
    assert len(current_domain.repository_for(Order).list_for_customer(customer_id)) == count


@then(parsers.cfparse("the order subtotal is {amount:d}"))
def order_subtotal(context, amount):
    assert _order(context).subtotal == amount


@then(parsers.cfparse("the order total is {amount:d}"))
def order_total(context, amount):
    assert _order(context).total == amount


@then(parsers.cfparse('the order status is "{status}"'))
def order_status(context, status):
    assert _order(context).status == status


@then(parsers.cfparse('the order line for "{product_id}" is priced {price:d}'))
def order_line_price(context, product_id, price):
    item = next(i for i in _order(context).line_items if i.product_id == product_id)
    assert item.price == price


@then("the request is forbidden")
def request_forbidden(context):
    assert isinstance(context["error"], ForbiddenError)


@then("the status change is rejected")
def status_rejected(context):
    assert isinstance(context["error"], ValidationError)
