"""Query helpers shared by the storefront repositories."""

# Upper bound on rows returned by an unpaginated listing
LISTING_LIMIT = 10_000


def fetch_all(queryset):
    """Evaluate a DAO queryset without the default page size."""
    return queryset.limit(LISTING_LIMIT).all().items
