"""Supabase-backed cooking profile repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from butta_la_pasta.domain.pasta import CookingProfile
from butta_la_pasta.services.resolver import PastaRepository

_COLUMNS = (
    "id, barcode, name, cooking_time_minutes, al_dente_time_minutes, "
    "created_at, updated_at"
)


@dataclass
class SupabasePastaRepository(PastaRepository):
    """Supabase implementation for cooking profile persistence."""

    client: Client
    table: str = "pasta"

    def get_by_barcode(self, barcode: str) -> CookingProfile | None:
        """Return the cooking profile for a barcode, if present."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("barcode", barcode)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def create_pasta(
        self,
        barcode: str,
        name: str,
        cooking_time_minutes: int,
        al_dente_time_minutes: int | None,
    ) -> CookingProfile:
        """Insert a new cooking profile row and return it."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "barcode": barcode,
                    "name": name,
                    "cooking_time_minutes": cooking_time_minutes,
                    "al_dente_time_minutes": al_dente_time_minutes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create pasta in Supabase")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> CookingProfile:
    """Parse a pasta row into a domain model."""
    al_dente = row.get("al_dente_time_minutes")
    return CookingProfile(
        id=int(row["id"]),
        barcode=str(row["barcode"]),
        name=str(row.get("name", "")),
        cooking_time_minutes=int(row["cooking_time_minutes"]),
        al_dente_time_minutes=int(al_dente) if al_dente is not None else None,
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
