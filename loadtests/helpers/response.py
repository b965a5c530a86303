"""Response error extraction for load test observability.

Parses Storefront API error responses into human-readable messages. Errors
look like ``{"error": "msg", "details": {"field": ["msg", ...]}}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON, return raw text truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body, dict) and "error" in body:
        details = body.get("details")
        if isinstance(details, dict) and details:
            fields = " | ".join(f"{k}: {', '.join(map(str, v)) if isinstance(v, list) else v}" for k, v in details.items())
            return f"{body['error']} ({fields})"
        return str(body["error"])

    # Unknown shape
    return str(body)[:300]
