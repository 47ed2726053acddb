"""Command-line entrypoint that serves the health-check API."""

import uvicorn

from fitness_tracker.api.app import create_app
from fitness_tracker.containers import build_server_container


def main() -> None:
    """Run the server on the configured host and port."""
    container = build_server_container()
    uvicorn.run(
        create_app(container),
        host=container.settings.host,
        port=container.settings.port,
    )


if __name__ == "__main__":
    main()
