"""Product aggregate: a sellable catalogue entry with a stock count.

Prices are whole rupees. ``stock`` is adjusted through ``adjust_stock`` only,
and can never drop below zero: an adjustment that would make it negative is
rejected rather than clamped.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.catalogue.events import ProductAdded, StockAdjusted
from storefront.domain import storefront
from storefront.utils.queries import fetch_all


@storefront.aggregate
class Product:
    name = String(sanitize=False, required=True, max_length=255)
    description = Text(sanitize=False)
    price = Integer(required=True, min_value=0)
    original_price = Integer(min_value=0)
    category_id = Identifier(required=True)
    stock = Integer(default=0)
    image_url = String(sanitize=False, max_length=1024)
    rating = Float(min_value=0.0, max_value=5.0)
    review_count = Integer(min_value=0)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name,
        price,
        category_id,
        stock=0,
        description=None,
        original_price=None,
        image_url=None,
        rating=None,
        review_count=None,
        product_id=None,
    ):
        now = datetime.now(UTC)
        values = dict(
            name=name,
            description=description,
            price=price,
            original_price=original_price,
            category_id=category_id,
            stock=stock,
            image_url=image_url,
            rating=rating,
            review_count=review_count,
            created_at=now,
            updated_at=now,
        )
        if product_id:
            values["id"] = product_id

        product = cls(**values)
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=product.name,
                category_id=str(product.category_id),
                price=product.price,
                stock=product.stock,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def has_stock_for(self, quantity):
        return self.stock >= quantity

    def adjust_stock(self, delta, reason=None):
        """Apply a signed ``delta`` to the stock count."""
        previous_stock = self.stock
        self.stock = previous_stock + delta
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockAdjusted(
                product_id=str(self.id),
                delta=delta,
                previous_stock=previous_stock,
                new_stock=self.stock,
                reason=reason,
            )
        )


@storefront.repository(part_of=Product)
class ProductRepository:
    def list_all(self) -> list[Product]:
        return fetch_all(self._dao.query)

    def find(self, product_id: str) -> Product | None:
        """Return the product, or ``None`` when the catalogue has no such id."""
        return self._dao.query.filter(id=product_id).all().first
