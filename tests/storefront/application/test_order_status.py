"""Application tests for order status changes."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain
from storefront.checkout.placement import checkout
from storefront.ordering.order import Order
from storefront.ordering.status import UpdateOrderStatus


@pytest.fixture()
def order_id(add_product):
    add_product(product_id="p1", stock=5, price=100)
    return checkout("cust-001", "addr-001", items=[{"product_id": "p1", "quantity": 1}])


def _set(order_id, status):
    return current_domain.process(UpdateOrderStatus(order_id=order_id, status=status), asynchronous=False)


class TestUpdateOrderStatus:
    def test_ship_then_deliver(self, order_id):
        _set(order_id, "Shipped")
        _set(order_id, "Delivered")
        assert current_domain.repository_for(Order).get(order_id).status == "Delivered"

    def test_delivered_back_to_placed(self, order_id):
        _set(order_id, "Delivered")
        _set(order_id, "On Process")
        assert current_domain.repository_for(Order).get(order_id).status == "On Process"

    def test_invalid_status_rejected(self, order_id):
        with pytest.raises(ValidationError):
            _set(order_id, "Cancelled")
        assert current_domain.repository_for(Order).get(order_id).status == "On Process"

    def test_unknown_order_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            _set("nope", "Shipped")

    def test_invalid_status_rejected_before_lookup(self):
        with pytest.raises(ValidationError):
            _set("nope", "Lost")


class TestOrderListing:
    def test_listing_per_customer_and_global(self, add_product):
        add_product(product_id="p1", stock=10)
        first = checkout("cust-001", "addr-001", items=[{"product_id": "p1", "quantity": 1}])
        second = checkout("cust-001", "addr-001", items=[{"product_id": "p1", "quantity": 1}])
        other = checkout("cust-002", "addr-009", items=[{"product_id": "p1", "quantity": 1}])

        repo = current_domain.repository_for(Order)
        assert [str(o.id) for o in repo.list_for_customer("cust-001")] == [first, second]
        assert [str(o.id) for o in repo.list_all()] == [first, second, other]
