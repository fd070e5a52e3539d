"""Entry point for querying the product catalog from the command line."""

import argparse
import asyncio
import json
import logging
import os
import sys

from catalog_client.client import CatalogApiClient
from catalog_client.errors import CatalogApiError
from catalog_client.product import Product
from catalog_client.settings import Settings


def _configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query the product catalog service.")
    parser.add_argument(
        "product_id",
        nargs="?",
        help="Fetch a single product by ID; omit to list every product.",
    )
    return parser.parse_args(argv)


async def _fetch(settings: Settings, product_id: str | None) -> list[Product] | Product:
    async with CatalogApiClient.from_settings(settings) as client:
        if product_id is None:
            return await client.get_all_products()
        return await client.get_product(product_id)


def main(argv: list[str] | None = None) -> int:
    """Run a single catalog query and print the result as JSON."""
    _configure_logging()
    logger = logging.getLogger("catalog-client")
    args = _parse_args(argv)
    settings = Settings.load()

    try:
        result = asyncio.run(_fetch(settings, args.product_id))
    except CatalogApiError as exc:
        logger.error("Catalog query failed: %s", exc)
        return 1

    if isinstance(result, Product):
        payload: object = result.to_dict()
    else:
        payload = [product.to_dict() for product in result]
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
