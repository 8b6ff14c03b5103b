# app/routes/claude.py
"""
Rasoi API - Claude Proxy Route.

Keeps the Anthropic key on the server; the client sends a Messages API
request body and gets the upstream response back as-is.
"""

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse
from typing import Any
import logging

import httpx

from app.dependencies import get_anthropic_relay
from app.services.anthropic_relay import AnthropicRelay
from app.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)
router = APIRouter()


def _relay_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": {"message": message}})


@router.post("/claude")
async def proxy_claude(
    body: Any = Body(default=None),
    relay: AnthropicRelay = Depends(get_anthropic_relay)
):
    """Forward a Messages API request to Anthropic."""
    try:
        status_code, data = await relay.forward(body)
    except ConfigurationError as e:
        return _relay_error(e.message)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Claude relay failed: {e}")
        return _relay_error(str(e))

    return JSONResponse(status_code=status_code, content=data)
