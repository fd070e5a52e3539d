"""
Catalog API client for the product service.

Wraps a shared AsyncClient and exposes the two read operations the consumer
relies on, mapping JSON payloads into ``Product`` values and every failure
into a ``CatalogApiError`` subclass.
"""

import json
import logging
from typing import Any

import httpx

from catalog_client.errors import (
    CatalogTransportError,
    RequestTimeoutError,
    ResponseDecodeError,
    error_for_status,
)
from catalog_client.http_client import DEFAULT_TOKEN, create_catalog_client
from catalog_client.product import Product
from catalog_client.settings import Settings

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_TOKEN", "CatalogApiClient"]


class CatalogApiClient:
    """Typed wrapper around an AsyncClient bound to one catalog service."""

    __slots__ = ("base_url", "token", "_client")

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = DEFAULT_TOKEN,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.token = token
        self._client = create_catalog_client(
            base_url,
            token=token,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CatalogApiClient":
        """Factory that builds the client from Settings."""
        return cls(
            settings.catalog_service_url,
            token=settings.api_token,
            timeout=settings.api_timeout,
        )

    async def __aenter__(self) -> "CatalogApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP resources."""
        await self._client.aclose()

    async def get_all_products(self) -> list[Product]:
        """Fetch every product, in the order the service returns them."""
        logger.debug("Fetching all products")
        data = await self._request("GET", "/products")
        if not isinstance(data, list):
            raise self._decode_error("GET", "/products", "expected a JSON array")
        products: list[Product] = []
        for item in data:
            if not isinstance(item, dict):
                raise self._decode_error("GET", "/products", "expected an array of JSON objects")
            products.append(Product.from_raw(item))
        return products

    async def get_product(self, product_id: str) -> Product:
        """Fetch a single product by its identifier."""
        path = f"/product/{product_id}"
        logger.debug("Fetching product", extra={"product_id": product_id})
        data = await self._request("GET", path)
        if not isinstance(data, dict):
            raise self._decode_error("GET", path, "expected a JSON object")
        return Product.from_raw(data)

    @staticmethod
    def _decode_error(method: str, path: str, detail: str) -> ResponseDecodeError:
        logger.error(
            "Catalog API returned an unexpected payload",
            extra={"method": method, "path": path, "detail": detail},
        )
        return ResponseDecodeError(
            f"Catalog API returned an unexpected payload during {method} {path}: {detail}.",
            method=method,
            path=path,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Normalized request handler for all outgoing API calls."""
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            logger.error(
                "Catalog API request timed out",
                extra={"method": method, "path": path},
                exc_info=exc,
            )
            raise RequestTimeoutError(
                f"Catalog API request timed out ({method} {path}).",
                method=method,
                path=path,
            ) from exc
        except httpx.RequestError as exc:
            logger.error(
                "Catalog API request failed",
                extra={"method": method, "path": path},
                exc_info=exc,
            )
            raise CatalogTransportError(
                f"Catalog API request failed ({method} {path}): {exc!s}",
                method=method,
                path=path,
            ) from exc

        if not response.is_success:
            logger.warning(
                "Catalog API responded with error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                },
            )
            raise error_for_status(response.status_code, method=method, path=path)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error(
                "Catalog API returned invalid JSON",
                extra={"method": method, "path": path},
            )
            raise ResponseDecodeError(
                f"Catalog API returned invalid JSON during {method} {path}.",
                method=method,
                path=path,
            ) from exc
