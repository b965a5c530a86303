"""WishlistItem aggregate: at most one saved product per (customer, product)."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier

from storefront.domain import storefront
from storefront.exceptions import ForbiddenError
from storefront.utils.queries import fetch_all


@storefront.aggregate
class WishlistItem:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    added_at = DateTime()

    @classmethod
    def create(cls, customer_id, product_id):
        return cls(customer_id=customer_id, product_id=product_id, added_at=datetime.now(UTC))

    def ensure_owned_by(self, customer_id):
        if str(self.customer_id) != str(customer_id):
            raise ForbiddenError({"item_id": ["Wishlist item belongs to another customer"]})


@storefront.repository(part_of=WishlistItem)
class WishlistItemRepository:
    def list_for_customer(self, customer_id: str) -> list[WishlistItem]:
        return fetch_all(self._dao.query.filter(customer_id=str(customer_id)))

    def find_line(self, customer_id: str, product_id: str) -> WishlistItem | None:
        return self._dao.query.filter(customer_id=str(customer_id), product_id=str(product_id)).all().first
