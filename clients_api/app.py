from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from clients_api.core.config import Settings, get_settings
from clients_api.core.logging_config import setup_logging
from clients_api.domain.clients import ClientError
from clients_api.repositories import StorageError, build_repository
from clients_api.routers import clients as clients_router
from clients_api.services.client_service import ClientService

logger = logging.getLogger(__name__)


async def _client_error_handler(request: Request, exc: ClientError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def _storage_error_handler(request: Request, exc: StorageError) -> PlainTextResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(settings: Settings | None = None, service: ClientService | None = None) -> FastAPI:
    """Factory compatível com uvicorn/gunicorn.

    Without an explicit ``service`` the storage backend named in settings is
    built and wrapped in a ClientService.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if service is None:
        service = ClientService(build_repository(settings), id_strategy=settings.id_strategy)

    app = FastAPI(title="Clients API")
    app.state.client_service = service
    app.add_exception_handler(ClientError, _client_error_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.include_router(clients_router.router)

    logger.info("Using %s storage backend", service.repository.name)
    return app
