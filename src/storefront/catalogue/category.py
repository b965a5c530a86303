"""Category aggregate: immutable grouping of products, keyed by a unique slug."""

import re

from protean.fields import String

from storefront.catalogue.events import CategoryAdded
from storefront.domain import storefront
from storefront.utils.queries import fetch_all


def slugify(value):
    """Lower-case, hyphen-separated, URL-safe form of ``value``."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower())
    return slug.strip("-")


@storefront.aggregate
class Category:
    name = String(sanitize=False, required=True, max_length=100)
    slug = String(sanitize=False, required=True, max_length=100)

    @classmethod
    def create(cls, name, slug=None, category_id=None):
        values = {"name": name, "slug": slug or slugify(name)}
        if category_id:
            values["id"] = category_id

        category = cls(**values)
        category.raise_(
            CategoryAdded(
                category_id=str(category.id),
                name=category.name,
                slug=category.slug,
            )
        )
        return category


@storefront.repository(part_of=Category)
class CategoryRepository:
    def list_all(self) -> list[Category]:
        return fetch_all(self._dao.query)

    def find_by_slug(self, slug: str) -> Category | None:
        return self._dao.query.filter(slug=slug).all().first
