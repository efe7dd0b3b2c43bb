"""Open Food Facts product catalog client."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx


class CatalogClient(Protocol):
    """Interface for product catalog lookups."""

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product by barcode and return raw API data."""


@dataclass
class HttpxCatalogClient(CatalogClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    username: str
    password: str
    timeout_seconds: float
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls,
        base_url: str,
        username: str,
        password: str,
        timeout_seconds: float = 10.0,
    ) -> "HttpxCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(
            base_url=base_url,
            username=username,
            password=password,
            timeout_seconds=timeout_seconds,
            http_client=httpx.AsyncClient(),
        )

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product record by barcode."""
        url = f"{self.base_url}/api/v2/product/{quote(barcode, safe='')}.json"
        response = await self.http_client.get(
            url,
            auth=(self.username, self.password),
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
