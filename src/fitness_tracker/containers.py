"""Dependency container wiring for the application."""

from dataclasses import dataclass
from pathlib import Path

from fitness_tracker.adapters.json_file_store import JsonFileKeyValueStore
from fitness_tracker.adapters.supabase_database import Database, SupabaseDatabase
from fitness_tracker.config import Settings
from fitness_tracker.services.sessions import SessionService
from fitness_tracker.services.templates import KeyValueStore, TemplateStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: KeyValueStore
    template_store: TemplateStore
    session_service: SessionService


@dataclass
class ServerContainer:
    """Holds the health-check server's dependencies."""

    settings: Settings
    database: Database


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default client container backed by the local data file."""
    resolved_settings = settings or Settings()
    storage = JsonFileKeyValueStore(Path(resolved_settings.data_file))
    template_store = TemplateStore(storage)
    return AppContainer(
        settings=resolved_settings,
        storage=storage,
        template_store=template_store,
        session_service=SessionService(template_store),
    )


def build_server_container(settings: Settings | None = None) -> ServerContainer:
    """Create the health-check server container."""
    resolved_settings = settings or Settings()
    return ServerContainer(
        settings=resolved_settings,
        database=SupabaseDatabase.from_settings(resolved_settings),
    )
