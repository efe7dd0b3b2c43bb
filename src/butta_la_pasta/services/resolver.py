"""Read-through resolution of barcodes to cooking profiles."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from butta_la_pasta.domain.errors import (
    CatalogUnavailableError,
    InferenceError,
    PersistenceError,
    ResolutionNotFoundError,
)
from butta_la_pasta.domain.pasta import CookingProfile
from butta_la_pasta.services.catalog import CatalogService
from butta_la_pasta.services.inference import CookingTimesService
from butta_la_pasta.services.inflight import InFlightRegistry

_logger = logging.getLogger(__name__)


class PastaRepository(Protocol):
    """Persistence interface for cooking profiles."""

    def get_by_barcode(self, barcode: str) -> CookingProfile | None:
        """Return the cooking profile for a barcode, if present."""

    def create_pasta(
        self,
        barcode: str,
        name: str,
        cooking_time_minutes: int,
        al_dente_time_minutes: int | None,
    ) -> CookingProfile:
        """Create and return a new cooking profile."""


@dataclass
class PastaResolver:
    """Resolve barcodes from the store, enriching and storing on a miss."""

    repository: PastaRepository
    catalog: CatalogService
    inference: CookingTimesService
    in_flight: InFlightRegistry = field(default_factory=InFlightRegistry)
    fallback_cooking_minutes: int = 1

    async def resolve(self, barcode: str) -> CookingProfile:
        """Return the cooking profile for a barcode.

        Raises ResolutionNotFoundError when the catalog cannot name the
        product and PersistenceError when the new profile cannot be stored.
        """
        existing = self.repository.get_by_barcode(barcode)
        if existing:
            return existing
        return await self.in_flight.run(barcode, lambda: self._enrich(barcode))

    async def _enrich(self, barcode: str) -> CookingProfile:
        # A previous flight may have stored the profile since the first check.
        existing = self.repository.get_by_barcode(barcode)
        if existing:
            return existing

        try:
            entry = await self.catalog.resolve_display_name(barcode)
        except CatalogUnavailableError as exc:
            _logger.warning("Catalog unavailable: barcode=%s error=%s", barcode, exc)
            raise ResolutionNotFoundError(barcode) from exc
        if entry is None:
            raise ResolutionNotFoundError(barcode)

        name = entry.display_name
        _logger.info("Found product in catalog: barcode=%s name=%s", barcode, name)

        try:
            times = await self.inference.infer(name)
        except InferenceError as exc:
            _logger.error(
                "Failed to get cooking times: product=%s error=%s", name, exc
            )
            cooking_time = self.fallback_cooking_minutes
            al_dente_time = None
        else:
            _logger.info(
                "Got cooking times: product=%s cooking_time=%s al_dente_time=%s",
                name,
                times.cooking_time_minutes,
                times.al_dente_time_minutes,
            )
            cooking_time = times.cooking_time_minutes
            al_dente_time = times.al_dente_time_minutes

        try:
            return self.repository.create_pasta(
                barcode, name, cooking_time, al_dente_time
            )
        except Exception as exc:
            _logger.exception("Failed to store pasta: barcode=%s", barcode)
            raise PersistenceError(f"failed to store pasta {barcode}") from exc
