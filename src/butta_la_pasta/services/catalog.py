"""Product name lookups against the external catalog."""

import logging
from dataclasses import dataclass

from butta_la_pasta.adapters.openfoodfacts_client import CatalogClient
from butta_la_pasta.domain.errors import CatalogUnavailableError
from butta_la_pasta.domain.pasta import CatalogEntry

_logger = logging.getLogger(__name__)


@dataclass
class CatalogService:
    """Resolve barcodes to product names."""

    client: CatalogClient

    async def resolve_display_name(self, barcode: str) -> CatalogEntry | None:
        """Return the catalog entry for a barcode, or None when it has no record.

        Raises CatalogUnavailableError when the catalog cannot be reached or
        answers with a non-success status.
        """
        try:
            payload = await self.client.get_product(barcode)
        except Exception as exc:
            raise CatalogUnavailableError(
                f"catalog lookup failed (status={_status_code_from_exception(exc)})"
            ) from exc

        if not isinstance(payload, dict):
            _logger.info("Catalog returned a malformed record: barcode=%s", barcode)
            return None
        if not payload.get("status"):
            _logger.info("Catalog has no record: barcode=%s", barcode)
            return None

        product = payload.get("product")
        name = product.get("product_name") if isinstance(product, dict) else None
        if not isinstance(name, str) or not name.strip():
            _logger.info("Catalog record has no product name: barcode=%s", barcode)
            return None
        return CatalogEntry(display_name=name.strip())


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
