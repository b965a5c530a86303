"""CartItem aggregate: one cart line per (customer, product).

Adding a product that already has a line merges into it. Stock is never
touched by the cart; callers check stock before adding or updating.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Integer

from storefront.cart.events import CartItemAdded, CartQuantityUpdated
from storefront.domain import storefront
from storefront.exceptions import ForbiddenError
from storefront.utils.queries import fetch_all


@storefront.aggregate
class CartItem:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id, product_id, quantity):
        now = datetime.now(UTC)
        item = cls(
            customer_id=customer_id,
            product_id=product_id,
            quantity=quantity,
            added_at=now,
            updated_at=now,
        )
        item.raise_(
            CartItemAdded(
                item_id=str(item.id),
                customer_id=str(customer_id),
                product_id=str(product_id),
                quantity_added=quantity,
                quantity=quantity,
            )
        )
        return item

    def ensure_owned_by(self, customer_id):
        if str(self.customer_id) != str(customer_id):
            raise ForbiddenError({"item_id": ["Cart item belongs to another customer"]})

    def increase_quantity(self, quantity):
        self.quantity += quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemAdded(
                item_id=str(self.id),
                customer_id=str(self.customer_id),
                product_id=str(self.product_id),
                quantity_added=quantity,
                quantity=self.quantity,
            )
        )

    def update_quantity(self, new_quantity):
        previous_quantity = self.quantity
        self.quantity = new_quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                item_id=str(self.id),
                customer_id=str(self.customer_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )


@storefront.repository(part_of=CartItem)
class CartItemRepository:
    def list_for_customer(self, customer_id: str) -> list[CartItem]:
        return fetch_all(self._dao.query.filter(customer_id=str(customer_id)))

    def find(self, item_id: str) -> CartItem | None:
        return self._dao.query.filter(id=item_id).all().first

    def find_line(self, customer_id: str, product_id: str) -> CartItem | None:
        return self._dao.query.filter(customer_id=str(customer_id), product_id=str(product_id)).all().first

    def delete_item(self, item_id: str) -> bool:
        """Delete a cart line; ``False`` when there was nothing to delete."""
        item = self.find(item_id)
        if item is None:
            return False
        self._dao.delete(item)
        return True

    def clear_for_customer(self, customer_id: str) -> int:
        items = self.list_for_customer(customer_id)
        for item in items:
            self._dao.delete(item)
        return len(items)
