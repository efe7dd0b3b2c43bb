"""Domain models for pasta cooking profiles."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CookingProfile:
    """Cooking times stored for a scanned barcode."""

    id: int
    barcode: str
    name: str
    cooking_time_minutes: int
    al_dente_time_minutes: int | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class CatalogEntry:
    """Product record resolved from the external catalog."""

    display_name: str
