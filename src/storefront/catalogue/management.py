"""Catalogue management: insert commands and handler.

These are the only write paths into the catalogue besides stock
adjustment; both the local seed and the FakeStore import go through them.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Category")
class AddCategory:
    category_id = Identifier()
    name = String(sanitize=False, required=True, max_length=100)
    slug = String(sanitize=False, max_length=100)


@storefront.command(part_of="Product")
class AddProduct:
    product_id = Identifier()
    name = String(sanitize=False, required=True, max_length=255)
    description = Text(sanitize=False)
    price = Integer(required=True, min_value=0)
    original_price = Integer(min_value=0)
    category_id = Identifier(required=True)
    stock = Integer(default=0, min_value=0)
    image_url = String(sanitize=False, max_length=1024)
    rating = Float(min_value=0.0, max_value=5.0)
    review_count = Integer(min_value=0)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(AddCategory)
    def add_category(self, command):
        repo = current_domain.repository_for(Category)

        category = Category.create(
            name=command.name,
            slug=command.slug,
            category_id=command.category_id,
        )
        if repo.find_by_slug(category.slug) is not None:
            raise ValidationError({"slug": [f"Category slug '{category.slug}' already exists"]})

        repo.add(category)
        return str(category.id)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        # Unknown categories surface as ObjectNotFoundError
        current_domain.repository_for(Category).get(command.category_id)

        repo = current_domain.repository_for(Product)
        if command.product_id and repo.find(command.product_id) is not None:
            raise ValidationError({"product_id": [f"Product {command.product_id} already exists"]})

        product = Product.create(
            product_id=command.product_id,
            name=command.name,
            description=command.description,
            price=command.price,
            original_price=command.original_price,
            category_id=command.category_id,
            stock=command.stock or 0,
            image_url=command.image_url,
            rating=command.rating,
            review_count=command.review_count,
        )
        repo.add(product)
        return str(product.id)
