from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from .client import BlastClient
from .logging import configure_logging
from .models import SequenceRequest
from .relay import BlastRelay
from .settings import RelaySettings, settings as default_settings


async def _read_sequence(request: Request) -> str | None:
    try:
        data: Any = await request.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    try:
        return SequenceRequest.model_validate(data).sequence
    except ValidationError:
        return None


def create_app(relay: BlastRelay | None = None, settings: RelaySettings | None = None) -> FastAPI:
    cfg = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(cfg.log_level)
        if relay is not None:
            app.state.relay = relay
            yield
            return
        async with httpx.AsyncClient(timeout=cfg.request_timeout_seconds) as http_client:
            client = BlastClient(base_url=cfg.blast_url, http_client=http_client)
            app.state.relay = BlastRelay.from_settings(client, cfg)
            yield

    app = FastAPI(title="BLAST Relay", version="1.0.0", lifespan=lifespan)

    @app.post("/", response_class=PlainTextResponse)
    async def submit_sequence(request: Request) -> PlainTextResponse:
        sequence = await _read_sequence(request)
        result = await request.app.state.relay.handle_submission(sequence)
        return PlainTextResponse(result.body, status_code=result.status_code, media_type=result.media_type)

    return app


app = create_app()
