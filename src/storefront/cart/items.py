"""Cart item management: commands and handler.

Stock rules mirror what the storefront enforces on the way into the cart:
the product must exist and be in stock, and the quantity asked for must not
exceed the current stock. Only the requested quantity is compared, not the
merged line total; checkout does the final stock check.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart_item import CartItem
from storefront.catalogue.product import Product
from storefront.domain import logger, storefront
from storefront.exceptions import InsufficientStockError


@storefront.command(part_of="CartItem")
class AddToCart:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="CartItem")
class UpdateCartQuantity:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True)


@storefront.command(part_of="CartItem")
class RemoveFromCart:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command(part_of="CartItem")
class ClearCart:
    customer_id = Identifier(required=True)


@storefront.command_handler(part_of=CartItem)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        if product.stock == 0:
            raise InsufficientStockError.for_product(product.name, reason="Product is out of stock")
        if not product.has_stock_for(command.quantity):
            raise InsufficientStockError.for_product(product.name, reason="Not enough stock available")

        repo = current_domain.repository_for(CartItem)
        item = repo.find_line(command.customer_id, command.product_id)
        if item is None:
            item = CartItem.create(
                customer_id=command.customer_id,
                product_id=command.product_id,
                quantity=command.quantity,
            )
        else:
            item.increase_quantity(command.quantity)
        repo.add(item)

        logger.debug(
            "cart_item_added",
            customer_id=str(command.customer_id),
            product_id=str(command.product_id),
            quantity=item.quantity,
        )
        return str(item.id)

    @handle(UpdateCartQuantity)
    def update_cart_quantity(self, command):
        repo = current_domain.repository_for(CartItem)
        item = repo.get(command.item_id)
        item.ensure_owned_by(command.customer_id)

        product = current_domain.repository_for(Product).get(item.product_id)
        if command.quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if not product.has_stock_for(command.quantity):
            raise InsufficientStockError.for_product(product.name, reason="Not enough stock available")

        item.update_quantity(command.quantity)
        repo.add(item)
        return str(item.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(CartItem)
        item = repo.get(command.item_id)
        item.ensure_owned_by(command.customer_id)
        return repo.delete_item(str(item.id))

    @handle(ClearCart)
    def clear_cart(self, command):
        return current_domain.repository_for(CartItem).clear_for_customer(command.customer_id)
