"""
Consumer-side client for the product catalog service.

Exposes the ``Product`` value object, the async ``CatalogApiClient`` and the
error types raised when a call to the catalog fails.
"""

from catalog_client.client import DEFAULT_TOKEN, CatalogApiClient
from catalog_client.errors import (
    CatalogApiError,
    CatalogTransportError,
    ErrorKind,
    HttpStatusError,
    NotFoundError,
    RequestTimeoutError,
    ResponseDecodeError,
    UnauthorizedError,
)
from catalog_client.product import Product

__all__ = [
    "DEFAULT_TOKEN",
    "CatalogApiClient",
    "CatalogApiError",
    "CatalogTransportError",
    "ErrorKind",
    "HttpStatusError",
    "NotFoundError",
    "Product",
    "RequestTimeoutError",
    "ResponseDecodeError",
    "UnauthorizedError",
]
