"""Environment-driven configuration utilities for the catalog client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from catalog_client.http_client import DEFAULT_TOKEN


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for runtime configuration."""

    catalog_service_url: str
    api_token: str = DEFAULT_TOKEN
    api_timeout: float = 30.0

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so developers can rely on a local .env file without
        exporting variables globally.
        """
        load_dotenv()

        catalog_service_url = os.getenv("CATALOG_SERVICE_URL", "").strip()
        if not catalog_service_url:
            raise ValueError("CATALOG_SERVICE_URL is required but was not provided.")

        api_token = os.getenv("CATALOG_API_TOKEN", "").strip() or DEFAULT_TOKEN

        api_timeout_raw = os.getenv("API_TIMEOUT", "").strip() or "30"
        try:
            api_timeout = float(api_timeout_raw)
        except ValueError as exc:
            raise ValueError("API_TIMEOUT must be a numeric value.") from exc
        if api_timeout <= 0:
            raise ValueError("API_TIMEOUT must be greater than zero.")

        return cls(
            catalog_service_url=catalog_service_url,
            api_token=api_token,
            api_timeout=api_timeout,
        )
