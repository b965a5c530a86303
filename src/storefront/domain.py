"""Storefront bounded context: catalogue, cart, wishlist, addresses, orders.

All aggregates share one domain so that checkout can read the catalogue,
write orders and clear the cart inside a single unit of work.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
