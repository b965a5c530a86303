import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture()
def add_product():
    """Factory: insert a product (and its category on first use) and return its id."""
    from protean.utils.globals import current_domain
    from storefront.catalogue.category import Category
    from storefront.catalogue.management import AddCategory, AddProduct

    def _add(product_id="p1", name="Test Product", price=100, stock=5, category_id="1", **extra):
        if current_domain.repository_for(Category).find_by_slug(f"category-{category_id}") is None:
            current_domain.process(
                AddCategory(category_id=category_id, name=f"Category {category_id}", slug=f"category-{category_id}"),
                asynchronous=False,
            )
        return current_domain.process(
            AddProduct(
                product_id=product_id,
                name=name,
                price=price,
                stock=stock,
                category_id=category_id,
                **extra,
            ),
            asynchronous=False,
        )

    return _add
