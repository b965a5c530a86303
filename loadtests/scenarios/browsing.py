"""Anonymous catalogue browsing.

Read-only traffic against the public product and category endpoints.
"""

import random

from locust import HttpUser, between, task


class BrowsingUser(HttpUser):
    """Lists the catalogue and opens random product pages."""

    wait_time = between(0.5, 2.0)

    def on_start(self):
        self.product_ids = []

    @task(3)
    def list_products(self):
        with self.client.get("/products", catch_response=True, name="GET /products") as resp:
            if resp.status_code == 200:
                self.product_ids = [p["id"] for p in resp.json()]
            else:
                resp.failure(f"List products failed: {resp.status_code}")

    @task(1)
    def list_categories(self):
        self.client.get("/categories", name="GET /categories")

    @task(4)
    def view_product(self):
        if not self.product_ids:
            return
        self.client.get(f"/products/{random.choice(self.product_ids)}", name="GET /products/{id}")
