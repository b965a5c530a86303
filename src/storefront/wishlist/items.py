"""Wishlist management: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.exceptions import InsufficientStockError
from storefront.wishlist.wishlist_item import WishlistItem


@storefront.command(part_of="WishlistItem")
class AddToWishlist:
    customer_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="WishlistItem")
class RemoveFromWishlist:
    customer_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command_handler(part_of=WishlistItem)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        if product.stock == 0:
            raise InsufficientStockError.for_product(
                product.name, reason="Cannot add out of stock items to wishlist"
            )

        repo = current_domain.repository_for(WishlistItem)
        item = repo.find_line(command.customer_id, command.product_id)
        if item is None:
            item = WishlistItem.create(customer_id=command.customer_id, product_id=command.product_id)
            repo.add(item)
        return str(item.id)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(WishlistItem)
        item = repo.get(command.item_id)
        item.ensure_owned_by(command.customer_id)
        repo._dao.delete(item)
        return True
