"""Authenticated shopping journeys.

CheckoutJourney walks one shopper from an empty cart to an order.
StockStampede has many shoppers competing for the same low-stock product;
the interesting numbers are 201 vs 400 on POST /orders and the product's
final stock, which must never go below zero.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, constant_pacing, task

from loadtests.data_generators import address_data, bearer_headers, cart_quantity, unique_subject
from loadtests.helpers.state import ShopperState


def _in_stock(products):
    return [p["id"] for p in products if p["stock"] > 0]


class CheckoutJourney(SequentialTaskSet):
    """Browse -> Add Address -> Add to Cart (x2) -> Update Quantity -> Checkout -> History."""

    def on_start(self):
        subject = unique_subject()
        self.state = ShopperState(subject=subject, headers=bearer_headers(subject))

    @task
    def browse(self):
        with self.client.get("/products", catch_response=True, name="GET /products") as resp:
            if resp.status_code != 200:
                resp.failure(f"List products failed: {resp.status_code}")
                self.interrupt()
                return
            self.state.product_ids = _in_stock(resp.json())
            if not self.state.product_ids:
                resp.failure("Catalogue has nothing in stock")
                self.interrupt()

    @task
    def add_address(self):
        with self.client.post(
            "/addresses",
            json=address_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /addresses",
        ) as resp:
            if resp.status_code == 201:
                self.state.address_id = resp.json()["id"]
            else:
                resp.failure(f"Add address failed: {resp.status_code}")
                self.interrupt()

    @task
    def add_first_item(self):
        self._add_to_cart()

    @task
    def add_second_item(self):
        self._add_to_cart()

    @task
    def update_quantity(self):
        if not self.state.cart_item_ids:
            return
        item_id = self.state.cart_item_ids[0]
        self.client.patch(
            f"/cart/{item_id}",
            json={"quantity": 1},
            headers=self.state.headers,
            name="PATCH /cart/{id}",
        )

    @task
    def checkout(self):
        with self.client.post(
            "/orders",
            json={"address_id": self.state.address_id},
            headers=self.state.headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["id"])
            elif resp.status_code == 400:
                # Lost the race for stock; expected under load
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code}")

    @task
    def order_history(self):
        self.client.get("/orders", headers=self.state.headers, name="GET /orders")

    @task
    def done(self):
        self.interrupt()

    def _add_to_cart(self):
        with self.client.post(
            "/cart",
            json={"product_id": random.choice(self.state.product_ids), "quantity": cart_quantity()},
            headers=self.state.headers,
            catch_response=True,
            name="POST /cart",
        ) as resp:
            if resp.status_code == 200:
                item_id = resp.json()["id"]
                if item_id not in self.state.cart_item_ids:
                    self.state.cart_item_ids.append(item_id)
            elif resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Add to cart failed: {resp.status_code}")


class StockStampede(SequentialTaskSet):
    """Every shopper orders one unit of the lowest-stock product still available."""

    def on_start(self):
        subject = unique_subject()
        self.state = ShopperState(subject=subject, headers=bearer_headers(subject))

    @task
    def pick_target(self):
        resp = self.client.get("/products", name="[STAMPEDE] GET /products")
        available = [p for p in resp.json() if p["stock"] > 0] if resp.status_code == 200 else []
        if not available:
            self.interrupt()
            return
        self.state.product_ids = [min(available, key=lambda p: p["stock"])["id"]]

    @task
    def buy(self):
        with self.client.post(
            "/orders",
            json={"address_id": "stampede", "items": [{"product_id": self.state.product_ids[0], "quantity": 1}]},
            headers=self.state.headers,
            catch_response=True,
            name="[STAMPEDE] POST /orders",
        ) as resp:
            if resp.status_code in (201, 400):
                resp.success()
            else:
                resp.failure(f"Unexpected status: {resp.status_code}")

    @task
    def verify_stock(self):
        with self.client.get(
            f"/products/{self.state.product_ids[0]}",
            catch_response=True,
            name="[STAMPEDE] GET /products/{id}",
        ) as resp:
            if resp.status_code == 200 and resp.json()["stock"] < 0:
                resp.failure("Stock went negative")
        self.interrupt()


# ---------------------------------------------------------------------------
# HttpUser classes
# ---------------------------------------------------------------------------


class ShopperUser(HttpUser):
    """Shoppers completing the full cart-to-order journey."""

    wait_time = between(1.0, 3.0)
    tasks = [CheckoutJourney]


class StampedeUser(HttpUser):
    """Many shoppers competing for the same scarce product.

    Launch 20-50 of these simultaneously and watch POST /orders 201 vs 400.
    """

    wait_time = constant_pacing(0.2)
    tasks = [StockStampede]
