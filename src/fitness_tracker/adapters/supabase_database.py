"""Supabase connection used by the health-check server."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from supabase import Client, create_client

from fitness_tracker.config import Settings

logger = logging.getLogger(__name__)


class Database(Protocol):
    """Interface for the database connection checked by the server."""

    @property
    def status(self) -> str:
        """Return the connection status label."""

    def connect(self) -> bool:
        """Open the connection and return whether it succeeded."""


@dataclass
class SupabaseDatabase:
    """Opens the database client once and reports whether it is available."""

    url: str | None
    service_key: str | None
    client: Client | None = field(default=None, init=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseDatabase":
        """Build the connection holder from application settings."""
        return cls(url=settings.supabase_url, service_key=settings.supabase_service_key)

    def connect(self) -> bool:
        """Create the client; failures are logged and leave it disconnected."""
        if not self.url or not self.service_key:
            logger.warning("Database credentials are not configured")
            return False
        try:
            self.client = create_client(self.url, self.service_key)
        except Exception:
            logger.exception("Database connection error")
            self.client = None
            return False
        logger.info("Database connected")
        return True

    @property
    def status(self) -> str:
        """Return ``connected`` or ``unavailable``."""
        return "connected" if self.client is not None else "unavailable"
