"""Run the Clients API with uvicorn: ``python -m clients_api``."""
from __future__ import annotations

import logging

import uvicorn

from clients_api.app import create_app
from clients_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    logging.getLogger("clients_api").info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
