"""Integration tests for the cart and wishlist endpoints."""

import pytest


def _add(client, headers, product_id="p1", quantity=1, customer_id="cust-001"):
    return client.post("/cart", json={"product_id": product_id, "quantity": quantity}, headers=headers(customer_id))


class TestAuthentication:
    @pytest.mark.parametrize(
        "header",
        [{}, {"Authorization": "token-cust-001"}, {"Authorization": "Basic abc"}, {"Authorization": "Bearer bogus"}],
    )
    def test_cart_requires_valid_bearer_token(self, client, header):
        response = client.get("/cart", headers=header)
        assert response.status_code == 401
        assert response.json()["error"].startswith("Unauthorized")


class TestCartEndpoints:
    def test_add_and_list(self, client, headers, stocked):
        response = _add(client, headers, quantity=2)
        assert response.status_code == 200
        assert response.json()["quantity"] == 2

        listing = client.get("/cart", headers=headers()).json()
        assert [(i["product_id"], i["quantity"]) for i in listing] == [("p1", 2)]

    def test_repeated_add_merges(self, client, headers, stocked):
        first = _add(client, headers, quantity=3).json()
        second = _add(client, headers, quantity=3).json()
        assert first["id"] == second["id"]
        assert second["quantity"] == 6

    def test_unknown_product_is_404(self, client, headers):
        assert _add(client, headers, product_id="nope").status_code == 404

    def test_over_stock_is_400(self, client, headers, stocked):
        response = _add(client, headers, quantity=6)
        assert response.status_code == 400
        assert response.json()["error"] == "Not enough stock available"

    def test_zero_quantity_is_400(self, client, headers, stocked):
        assert _add(client, headers, quantity=0).status_code == 400

    def test_update_quantity(self, client, headers, stocked):
        item_id = _add(client, headers).json()["id"]
        response = client.patch(f"/cart/{item_id}", json={"quantity": 4}, headers=headers())
        assert response.status_code == 200
        assert response.json()["quantity"] == 4

    def test_update_by_other_customer_is_403(self, client, headers, stocked):
        item_id = _add(client, headers, quantity=2).json()["id"]
        response = client.patch(f"/cart/{item_id}", json={"quantity": 1}, headers=headers("cust-002"))
        assert response.status_code == 403
        assert client.get("/cart", headers=headers()).json()[0]["quantity"] == 2

    def test_delete(self, client, headers, stocked):
        item_id = _add(client, headers).json()["id"]
        response = client.delete(f"/cart/{item_id}", headers=headers())
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/cart", headers=headers()).json() == []

    def test_delete_by_other_customer_is_403(self, client, headers, stocked):
        item_id = _add(client, headers).json()["id"]
        assert client.delete(f"/cart/{item_id}", headers=headers("cust-002")).status_code == 403

    def test_delete_missing_is_404(self, client, headers):
        assert client.delete("/cart/nope", headers=headers()).status_code == 404


class TestWishlistEndpoints:
    def test_add_list_remove(self, client, headers, stocked):
        response = client.post("/wishlist", json={"product_id": "p2"}, headers=headers())
        assert response.status_code == 200
        item_id = response.json()["id"]

        assert [i["product_id"] for i in client.get("/wishlist", headers=headers()).json()] == ["p2"]

        assert client.delete(f"/wishlist/{item_id}", headers=headers()).json() == {"success": True}
        assert client.get("/wishlist", headers=headers()).json() == []

    def test_out_of_stock_is_400(self, client, headers, add_product):
        add_product(product_id="p0", stock=0)
        assert client.post("/wishlist", json={"product_id": "p0"}, headers=headers()).status_code == 400
