import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from storefront.api import (
    address_router,
    cart_router,
    category_router,
    order_router,
    product_router,
    register_error_handlers,
    wishlist_router,
)
from storefront.api.auth import get_token_verifier
from storefront.exceptions import InvalidTokenError


class StaticTokenVerifier:
    """Accepts tokens of the form ``token-<subject>``."""

    def verify(self, token):
        if not token.startswith("token-"):
            raise InvalidTokenError("unknown token")
        return token.removeprefix("token-")


@pytest.fixture()
def client():
    app = FastAPI()
    register_error_handlers(app)
    for router in (product_router, category_router, cart_router, wishlist_router, order_router, address_router):
        app.include_router(router)
    app.dependency_overrides[get_token_verifier] = StaticTokenVerifier
    return TestClient(app)


def auth(customer_id="cust-001"):
    return {"Authorization": f"Bearer token-{customer_id}"}


@pytest.fixture()
def headers():
    return auth


@pytest.fixture()
def stocked(add_product):
    """P1 and P2 in the catalogue, 5 and 10 units at 100 and 300."""
    add_product(product_id="p1", name="Headphones", price=100, stock=5)
    add_product(product_id="p2", name="Smart Watch", price=300, stock=10)
