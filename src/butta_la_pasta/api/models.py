"""Response models for the pasta API."""

from datetime import datetime

from pydantic import BaseModel

from butta_la_pasta.domain.pasta import CookingProfile


class PastaResponse(BaseModel):
    """Cooking profile as returned to clients."""

    id: int
    barcode: str
    name: str
    cooking_time_minutes: int
    al_dente_time_minutes: int | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: CookingProfile) -> "PastaResponse":
        """Build a response from a stored cooking profile."""
        return cls(
            id=profile.id,
            barcode=profile.barcode,
            name=profile.name,
            cooking_time_minutes=profile.cooking_time_minutes,
            al_dente_time_minutes=profile.al_dente_time_minutes,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class ErrorResponse(BaseModel):
    """Structured error body."""

    Error: str
