from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from dotenv import load_dotenv

from endpoints.kv_endpoints import build_router, store_error_response
from persistence import AsyncStoreRepository, StoreError, new_file_store, new_memory_store
from persistence.paths import resolve_data_file
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    for name, repo in app.state.repositories.items():
        logger.info("SHUTDOWN: closing %s store", name)
        await repo.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the app with one memory store and one file store.

    Raises StartupError / DecodeError if the backing file cannot be opened or parsed.
    """
    load_dotenv("local.env")
    settings = settings or get_settings()

    file_store = new_file_store(
        resolve_data_file(settings.data_file),
        atomic=settings.atomic_writes,
        file_mode=settings.file_mode,
    )
    repositories = {
        "memory": AsyncStoreRepository(new_memory_store()),
        "file": AsyncStoreRepository(file_store),
    }

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.repositories = repositories

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError) -> PlainTextResponse:
        return store_error_response(request, exc, not_found_status=settings.not_found_status)

    if settings.debug_log_requests:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            logger.info("REQUEST: %s %s -> %s", request.method, request.url.path, response.status_code)
            return response

    for name, repo in repositories.items():
        app.include_router(build_router(repo, prefix=f"/{name}"))

    return app
