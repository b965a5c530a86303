"""Background catalogue enrichment from the FakeStore API.

Seeding is best-effort: it runs as a background task after startup, may race
with early requests, and a failure only gets logged. Everything it writes goes
through the regular ``AddCategory``/``AddProduct`` commands.

Re-seeding only adds what is missing. Products already imported as
``fs-<id>`` keep their local state (stock in particular) instead of being
overwritten with the remote copy.
"""

import asyncio
import math
import os

import requests
from protean.utils.globals import current_domain

from storefront.catalogue.category import Category, slugify
from storefront.catalogue.management import AddCategory, AddProduct
from storefront.catalogue.product import Product
from storefront.domain import logger

DEFAULT_BASE_URL = "https://fakestoreapi.com"
DEFAULT_TIMEOUT = 10.0


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def to_rupees(usd_price):
    """Approximate a USD price as a whole-rupee amount, never below 99."""
    return max(99, _round_half_up(usd_price * 100))


def stock_from_review_count(count):
    """Derive a stable 0-49 stock level from the review count, with some zeros."""
    count = count or 0
    if count % 7 == 0:
        return 0
    return count % 50


class FakeStoreSeeder:
    def __init__(self, domain, base_url=None, timeout=None, session=None):
        self.domain = domain
        self.base_url = (base_url or os.getenv("FAKESTORE_API_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout or float(os.getenv("FAKESTORE_TIMEOUT", DEFAULT_TIMEOUT))
        self.session = session or requests.Session()

    # -------------------------------------------------------------------
    # Remote reads
    # -------------------------------------------------------------------
    def _get_json(self, path):
        response = self.session.get(f"{self.base_url}{path}", timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def fetch_categories(self) -> list[str]:
        return self._get_json("/products/categories")

    def fetch_products(self) -> list[dict]:
        return self._get_json("/products")

    # -------------------------------------------------------------------
    # Import
    # -------------------------------------------------------------------
    def _import_categories(self, names):
        repo = current_domain.repository_for(Category)
        known = len(repo.list_all())
        added = 0

        for name in names:
            slug = slugify(name)
            if repo.find_by_slug(slug) is not None:
                continue
            known += 1
            current_domain.process(
                AddCategory(category_id=f"{known}-{slug}", name=name, slug=slug),
                asynchronous=False,
            )
            added += 1

        return {category.slug: str(category.id) for category in repo.list_all()}, added

    def _import_products(self, remote_products, category_ids):
        repo = current_domain.repository_for(Product)
        added = 0

        for remote in remote_products:
            category_id = category_ids.get(slugify(remote.get("category", "")))
            if category_id is None:
                continue

            product_id = f"fs-{remote['id']}"
            if repo.find(product_id) is not None:
                continue

            rating = remote.get("rating") or {}
            price = to_rupees(remote["price"])
            current_domain.process(
                AddProduct(
                    product_id=product_id,
                    name=remote["title"],
                    description=remote.get("description"),
                    price=price,
                    original_price=_round_half_up(price * 1.2),
                    category_id=category_id,
                    stock=stock_from_review_count(rating.get("count")),
                    image_url=remote.get("image"),
                    rating=rating.get("rate") or 0.0,
                    review_count=rating.get("count") or 0,
                ),
                asynchronous=False,
            )
            added += 1

        return added

    def run(self):
        """Fetch and import synchronously; returns (categories_added, products_added)."""
        category_names = self.fetch_categories()
        remote_products = self.fetch_products()

        with self.domain.domain_context():
            category_ids, categories_added = self._import_categories(category_names)
            products_added = self._import_products(remote_products, category_ids)

        logger.info(
            "fakestore_seeded",
            base_url=self.base_url,
            categories_added=categories_added,
            products_added=products_added,
        )
        return categories_added, products_added

    async def run_in_background(self):
        try:
            return await asyncio.to_thread(self.run)
        except Exception:
            # Non-fatal: the catalogue keeps whatever it already had
            logger.exception("fakestore_seeding_failed", base_url=self.base_url)
            return None

    def spawn(self) -> asyncio.Task:
        """Start seeding without waiting for it."""
        return asyncio.create_task(self.run_in_background(), name="fakestore-seeding")
