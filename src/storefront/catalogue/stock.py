"""Stock adjustment: command and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import logger, storefront


@storefront.command(part_of="Product")
class AdjustStock:
    """Apply a signed change to a product's stock count."""

    product_id = Identifier(required=True)
    delta = Integer(required=True)  # Can be negative
    reason = String(sanitize=False, max_length=255)


@storefront.command_handler(part_of=Product)
class StockAdjustmentHandler:
    @handle(AdjustStock)
    def adjust_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.adjust_stock(command.delta, reason=command.reason)
        repo.add(product)

        logger.info(
            "stock_adjusted",
            product_id=str(product.id),
            delta=command.delta,
            stock=product.stock,
        )
        return product.stock
