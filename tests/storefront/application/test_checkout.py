"""Application tests for the checkout workflow."""

import threading

import pytest
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from storefront.cart.cart_item import CartItem
from storefront.cart.items import AddToCart
from storefront.catalogue.product import Product
from storefront.catalogue.stock import AdjustStock
from storefront.checkout.placement import checkout
from storefront.domain import storefront
from storefront.exceptions import InsufficientStockError
from storefront.ordering.order import Order


def _add_to_cart(product_id, quantity, customer_id="cust-001"):
    current_domain.process(
        AddToCart(customer_id=customer_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


def _stock(product_id):
    return current_domain.repository_for(Product).get(product_id).stock


def _cart(customer_id="cust-001"):
    return current_domain.repository_for(CartItem).list_for_customer(customer_id)


class TestSuccessfulCheckout:
    def test_cart_becomes_order(self, add_product):
        add_product(product_id="p1", price=100, stock=5)
        add_product(product_id="p2", price=250, stock=2)
        _add_to_cart("p1", 2)
        _add_to_cart("p2", 1)

        order_id = checkout("cust-001", "addr-001")

        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == "On Process"
        assert order.subtotal == 450
        assert order.shipping == 50
        assert order.total == 500
        assert [(i.product_id, i.quantity) for i in order.line_items] == [("p1", 2), ("p2", 1)]
        assert _stock("p1") == 3
        assert _stock("p2") == 1
        assert _cart() == []

    def test_explicit_items_override_cart(self, add_product):
        add_product(product_id="p1", price=100, stock=5)
        add_product(product_id="p2", price=100, stock=5)
        _add_to_cart("p1", 1)

        order_id = checkout("cust-001", "addr-001", items=[{"product_id": "p2", "quantity": 2}])

        order = current_domain.repository_for(Order).get(order_id)
        assert [i.product_id for i in order.line_items] == ["p2"]
        assert _stock("p1") == 5
        assert _stock("p2") == 3
        # The whole cart is consumed by the order
        assert _cart() == []

    def test_only_the_customers_cart_is_cleared(self, add_product):
        add_product(product_id="p1", stock=5)
        _add_to_cart("p1", 1)
        _add_to_cart("p1", 1, customer_id="cust-002")

        checkout("cust-001", "addr-001")

        assert len(_cart("cust-002")) == 1

    def test_matching_client_total_accepted(self, add_product):
        add_product(product_id="p1", price=300, stock=5)
        order_id = checkout("cust-001", "addr-001", items=[{"product_id": "p1", "quantity": 2}], total=600)
        assert current_domain.repository_for(Order).get(order_id).total == 600

    def test_prices_are_snapshots(self, add_product):
        add_product(product_id="p1", name="Desk Lamp", price=100, stock=5)
        order_id = checkout("cust-001", "addr-001", items=[{"product_id": "p1", "quantity": 1}])

        repo = current_domain.repository_for(Product)
        product = repo.get("p1")
        product.price = 999
        product.name = "Renamed Lamp"
        repo.add(product)

        item = current_domain.repository_for(Order).get(order_id).line_items[0]
        assert item.price == 100
        assert item.product_name == "Desk Lamp"

    def test_exact_stock_drains_to_zero(self, add_product):
        add_product(product_id="p1", stock=3)
        checkout("cust-001", "addr-001", items=[{"product_id": "p1", "quantity": 3}])
        assert _stock("p1") == 0


class TestFailedCheckout:
    def test_any_line_over_stock_aborts_everything(self, add_product):
        add_product(product_id="p1", stock=5)
        add_product(product_id="p2", name="Scarce", stock=1)
        _add_to_cart("p1", 2)
        _add_to_cart("p2", 1)
        current_domain.process(AdjustStock(product_id="p2", delta=-1), asynchronous=False)

        with pytest.raises(InsufficientStockError) as exc:
            checkout("cust-001", "addr-001")

        assert "Scarce" in exc.value.messages["stock"][0]
        assert _stock("p1") == 5
        assert _stock("p2") == 0
        assert current_domain.repository_for(Order).list_all() == []
        assert len(_cart()) == 2

    def test_repeated_lines_draw_on_the_same_stock(self, add_product):
        add_product(product_id="p1", stock=5)
        with pytest.raises(InsufficientStockError):
            checkout(
                "cust-001",
                "addr-001",
                items=[{"product_id": "p1", "quantity": 3}, {"product_id": "p1", "quantity": 3}],
            )
        assert _stock("p1") == 5

    def test_unknown_product_is_insufficient_stock(self, add_product):
        with pytest.raises(InsufficientStockError) as exc:
            checkout("cust-001", "addr-001", items=[{"product_id": "gone", "quantity": 1, "product_name": "Ghost"}])
        assert "Ghost" in exc.value.messages["stock"][0]

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError) as exc:
            checkout("cust-001", "addr-001")
        assert "items" in exc.value.messages

    def test_mismatched_total_rejected_before_mutation(self, add_product):
        add_product(product_id="p1", price=100, stock=5)
        _add_to_cart("p1", 1)

        with pytest.raises(ValidationError) as exc:
            checkout("cust-001", "addr-001", total=100)

        assert "total" in exc.value.messages
        assert _stock("p1") == 5
        assert len(_cart()) == 1
        assert current_domain.repository_for(Order).list_all() == []


class TestConcurrentCheckout:
    def test_parallel_checkouts_never_oversell(self, add_product):
        add_product(product_id="p1", stock=5)
        results = []

        def _buy(customer_id):
            with storefront.domain_context():
                try:
                    checkout(customer_id, "addr-001", items=[{"product_id": "p1", "quantity": 1}])
                    results.append("ok")
                except InsufficientStockError:
                    results.append("rejected")

        threads = [threading.Thread(target=_buy, args=(f"cust-{n}",)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results.count("ok") == 5
        assert results.count("rejected") == 3
        assert _stock("p1") == 0
