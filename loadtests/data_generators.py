"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the storefront's validation rules
and match the exact field names expected by the API's Pydantic request schemas.
"""

import os
import random
import uuid

from faker import Faker
from jose import jwt

fake = Faker("en_IN")

JWT_SECRET = os.getenv("STOREFRONT_JWT_SECRET", "dev-secret-change-me")
JWT_ALGORITHM = os.getenv("STOREFRONT_JWT_ALGORITHM", "HS256")


def unique_subject() -> str:
    """Generate unique shopper subjects like 'lt-a1b2c3d4'."""
    return f"lt-{uuid.uuid4().hex[:8]}"


def bearer_headers(subject: str) -> dict:
    """Sign a token the server's JWT verifier accepts."""
    token = jwt.encode({"sub": subject}, JWT_SECRET, algorithm=JWT_ALGORITHM)
    return {"Authorization": f"Bearer {token}"}


def address_data() -> dict:
    """Generate AddAddressRequest payload matching schema field names."""
    return {
        "name": fake.name()[:100],
        "phone": f"9{random.randint(100000000, 999999999)}",
        "address_line1": fake.street_address()[:255],
        "address_line2": random.choice([None, fake.secondary_address()[:255]]),
        "city": fake.city()[:100],
        "state": fake.state()[:100],
        "pincode": fake.postcode()[:10],
        "is_default": random.random() < 0.3,
    }


def cart_quantity() -> int:
    """Mostly single units, occasionally a few."""
    return random.choices([1, 2, 3], weights=[70, 20, 10])[0]
