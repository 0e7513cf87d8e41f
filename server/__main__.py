"""Entry point: ``python -m server``."""

from __future__ import annotations

import uvicorn

from server.config import get_settings
from server.logging_config import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    uvicorn.run(
        "server.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
