"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from daily_ledger.app_logging import configure_logging
from daily_ledger.config import Settings


def main() -> None:
    """Run the ASGI app on the configured host and port."""
    configure_logging()
    settings = Settings()
    uvicorn.run("daily_ledger.api.asgi:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
