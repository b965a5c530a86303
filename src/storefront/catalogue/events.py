"""Domain events for the Product and Category aggregates."""

from protean.fields import Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(sanitize=False, required=True)
    category_id = Identifier(required=True)
    price = Integer(required=True)
    stock = Integer(required=True)


@storefront.event(part_of="Product")
class StockAdjusted:
    """The stock count of a product changed by a signed delta."""

    __version__ = 1

    product_id = Identifier(required=True)
    delta = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)
    reason = String(sanitize=False)


@storefront.event(part_of="Category")
class CategoryAdded:
    """A category was added to the catalogue."""

    __version__ = 1

    category_id = Identifier(required=True)
    name = String(sanitize=False, required=True)
    slug = String(sanitize=False, required=True)
