"""Storefront-specific failures.

Missing entities surface as ``protean.exceptions.ObjectNotFoundError`` and
malformed input as ``protean.exceptions.ValidationError``; the classes below
cover the remaining cases the HTTP layer maps to distinct status codes.
"""

from protean.exceptions import ValidationError


class ForbiddenError(Exception):
    """The subject does not own the cart or wishlist item it referenced."""

    def __init__(self, messages):
        self.messages = messages
        super().__init__(messages)


class InsufficientStockError(ValidationError):
    """Requested quantity exceeds available stock, or the product is unavailable."""

    @classmethod
    def for_product(cls, product_name, reason=None):
        return cls({"stock": [reason or f"Insufficient stock for {product_name}"]})


class InvalidTokenError(Exception):
    """The bearer token was rejected by the identity verifier."""
