"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from fitness_tracker.adapters.supabase_database import Database
from fitness_tracker.config import Settings
from fitness_tracker.containers import AppContainer, ServerContainer
from fitness_tracker.services.sessions import SessionService
from fitness_tracker.services.templates import KeyValueStore, TemplateStore

CHICKEN = {
    "name": "Chicken Breast",
    "calories_per_100g": "165",
    "protein_per_100g": "31",
    "carbs_per_100g": "0",
    "fat_per_100g": "3.6",
}
RICE = {
    "name": "White Rice",
    "calories_per_100g": 130,
    "protein_per_100g": 2.7,
    "carbs_per_100g": 28,
    "fat_per_100g": 0.3,
}


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory durable store for tests."""

    values: dict[str, str] = field(default_factory=dict)
    writes: int = 0

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes += 1


@dataclass
class FakeDatabase(Database):
    """Fake database connection that records connect attempts."""

    succeed: bool = True
    connected: bool = False
    attempts: int = 0

    @property
    def status(self) -> str:
        return "connected" if self.connected else "unavailable"

    def connect(self) -> bool:
        self.attempts += 1
        self.connected = self.succeed
        return self.succeed


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        data_file=str(tmp_path / "data.json"),
    )


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def template_store(storage: InMemoryKeyValueStore) -> TemplateStore:
    return TemplateStore(storage)


@pytest.fixture
def session_service(template_store: TemplateStore) -> SessionService:
    return SessionService(template_store)


@pytest.fixture
def container(
    settings: Settings,
    storage: InMemoryKeyValueStore,
    template_store: TemplateStore,
    session_service: SessionService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        storage=storage,
        template_store=template_store,
        session_service=session_service,
    )


@pytest.fixture
def database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def server_container(settings: Settings, database: FakeDatabase) -> ServerContainer:
    return ServerContainer(settings=settings, database=database)
