"""FastAPI application exposing the shorthand pipeline.

Endpoints:
- POST /webhook: Telegram update in, ``sendMessage`` webhook reply out;
  malformed updates are logged and answered with 200 ``{"ok": true}``
- POST /parse: ``{"text": ...}`` in, ``{"entry": ...}`` out; HTTP 400 on ParseError
- GET /health

Dependencies (account holder, clock) are attached to ``app.state`` by
``create_app``; ``create_app_from_env`` is the ``uvicorn --factory`` target.
"""
from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from beancount_shorthand import __version__
from beancount_shorthand.application.pipeline import parse_and_format
from beancount_shorthand.application.ports import Clock
from beancount_shorthand.domain.errors import AccountResolutionError, ParseError
from beancount_shorthand.infrastructure.clock import SystemClock
from beancount_shorthand.infrastructure.config.holder import AccountMapHolder
from beancount_shorthand.infrastructure.config.settings import get_settings
from beancount_shorthand.infrastructure.logging.config import configure_logging, get_logger
from beancount_shorthand.presentation.telegram.handlers import build_reply
from beancount_shorthand.presentation.telegram.models import Update

__all__ = ["ParseRequest", "create_app", "create_app_from_env", "error_payload"]

log = get_logger("beancount_shorthand.http")


class ParseRequest(BaseModel):
    text: str
    today: date | None = None


def error_payload(exc: ParseError) -> dict[str, Any]:
    """Map a ParseError to the JSON body of a 400 response.

    ``tag`` is set only for AccountResolutionError.
    """
    return {
        "kind": exc.kind.value,
        "detail": str(exc),
        "tag": exc.tag if isinstance(exc, AccountResolutionError) else None,
    }


def create_app(holder: AccountMapHolder, clock: Clock) -> FastAPI:
    app = FastAPI(title="beancount-shorthand", version=__version__)
    app.state.holder = holder
    app.state.clock = clock

    @app.exception_handler(ParseError)
    async def _parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
        log.info("parse_failed", path=request.url.path, kind=exc.kind.value, detail=str(exc))
        return JSONResponse(status_code=400, content=error_payload(exc))

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return {"status": "ok", "accounts": len(app.state.holder.current())}

    @app.post("/parse")
    async def parse(body: ParseRequest) -> dict[str, str]:
        today = body.today or app.state.clock.today()
        entry = parse_and_format(body.text, app.state.holder.current(), today=today)
        return {"entry": entry}

    @app.post("/webhook")
    async def webhook(request: Request) -> dict[str, Any]:
        # malformed updates still get 200
        try:
            update = Update.model_validate_json(await request.body())
        except ValidationError as exc:
            log.warning("webhook_bad_update", errors=exc.error_count())
            return {"ok": True}
        reply = build_reply(update, app.state.holder, app.state.clock)
        if reply is None:
            return {"ok": True}
        return reply.model_dump(exclude_none=True)

    return app


def create_app_from_env() -> FastAPI:
    """Build the app from environment settings.

    Raises ConfigError at start-up when the account table is missing or
    invalid, so a misconfigured deployment never serves requests.
    """
    settings = get_settings()
    configure_logging(settings=settings)
    holder = AccountMapHolder.from_settings(settings)
    log.info("http_app_initialized", env=settings.env, timezone=settings.timezone)
    return create_app(holder, SystemClock(settings.timezone))
