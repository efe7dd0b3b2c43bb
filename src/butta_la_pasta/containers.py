"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from butta_la_pasta.adapters.openai_inference_client import OpenAIInferenceClient
from butta_la_pasta.adapters.openfoodfacts_client import HttpxCatalogClient
from butta_la_pasta.adapters.supabase_pasta_repository import SupabasePastaRepository
from butta_la_pasta.config import Settings
from butta_la_pasta.services.catalog import CatalogService
from butta_la_pasta.services.inference import CookingTimesService
from butta_la_pasta.services.inflight import InFlightRegistry
from butta_la_pasta.services.resolver import PastaResolver


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    pasta_resolver: PastaResolver
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    pasta_repository = SupabasePastaRepository(
        supabase_client, table=resolved_settings.supabase_table
    )
    catalog_client = HttpxCatalogClient.create(
        base_url=resolved_settings.catalog_base_url,
        username=resolved_settings.catalog_username,
        password=resolved_settings.catalog_password,
        timeout_seconds=resolved_settings.catalog_timeout_seconds,
    )
    inference_client = OpenAIInferenceClient.create(resolved_settings.openai_api_key)
    pasta_resolver = PastaResolver(
        repository=pasta_repository,
        catalog=CatalogService(catalog_client),
        inference=CookingTimesService(
            client=inference_client,
            model=resolved_settings.openai_model,
            store=resolved_settings.openai_store,
            timeout_seconds=resolved_settings.inference_timeout_seconds,
        ),
        in_flight=InFlightRegistry(),
        fallback_cooking_minutes=resolved_settings.fallback_cooking_minutes,
    )

    async def close_resources() -> None:
        await catalog_client.close()
        await inference_client.close()

    return AppContainer(
        settings=resolved_settings,
        pasta_resolver=pasta_resolver,
        close_resources=close_resources,
    )
