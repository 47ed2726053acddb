"""ASGI entrypoint for the health-check server."""

from fitness_tracker.api.app import create_app
from fitness_tracker.containers import build_server_container

app = create_app(build_server_container())
