from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from persistence.errors import KeyNotFoundError, StoreError
from persistence.repositories import AsyncKeyValueRepository

logger = logging.getLogger(__name__)


def build_router(repo: AsyncKeyValueRepository, *, prefix: str) -> APIRouter:
    """
    Routes for one store:

      GET  {prefix}/{key}          -> value
      POST {prefix}/{key}/{value}  -> value
    """
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/") or "kv"])

    @router.get("/{key}", response_class=PlainTextResponse)
    async def get_value(key: str) -> PlainTextResponse:
        value = await repo.get(key)
        return PlainTextResponse(value)

    @router.post("/{key}/{value}", response_class=PlainTextResponse)
    async def set_value(key: str, value: str) -> PlainTextResponse:
        await repo.set(key, value)
        return PlainTextResponse(value)

    return router


def store_error_response(request: Request, exc: StoreError, *, not_found_status: int = 500) -> PlainTextResponse:
    status_code = not_found_status if isinstance(exc, KeyNotFoundError) else 500
    logger.warning("STORE ERROR: %s %s -> %s: %r", request.method, request.url.path, status_code, exc)
    return PlainTextResponse(str(exc), status_code=status_code)
