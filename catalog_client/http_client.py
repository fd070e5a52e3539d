"""HTTP client factory for interacting with the product catalog service."""

import httpx

# Placeholder bearer token accepted by the demo provider; real deployments
# supply their own through CATALOG_API_TOKEN.
DEFAULT_TOKEN = "2019-01-14T11:34:18.045Z"


def build_headers(token: str | None) -> dict[str, str]:
    """Default headers sent with every catalog request."""
    headers = {"Accept": "application/json"}
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def create_catalog_client(
    base_url: str,
    *,
    token: str | None = DEFAULT_TOKEN,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build an AsyncClient configured for the catalog service.

    The bearer token is attached once as a default header so every request
    carries the same credential. Passing ``token=None`` sends no
    ``Authorization`` header at all.
    """
    return httpx.AsyncClient(
        base_url=base_url,
        headers=build_headers(token),
        timeout=timeout,
        transport=transport,
    )
