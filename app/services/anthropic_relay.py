"""
Rasoi API - Anthropic Relay.

Forwards a Messages API request body verbatim, adding the server-held key,
and hands back the upstream status and JSON body unchanged.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from app.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


class AnthropicRelay:
    """
    Thin pass-through to the Anthropic Messages API.

    Attributes:
        api_key: Server-held Anthropic key, never sent to clients.
        api_url: Upstream Messages endpoint.
        api_version: Value of the anthropic-version header.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_url: str = "https://api.anthropic.com/v1/messages",
        api_version: str = "2023-06-01",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.api_version = api_version
        self._transport = transport

    async def forward(self, body: Any) -> Tuple[int, Any]:
        """
        POST body upstream and return (status_code, json_body).

        Raises:
            ConfigurationError: If ANTHROPIC_API_KEY is not set.
            httpx.HTTPError: On transport failure.
            ValueError: If the upstream body is not JSON.
        """
        if not self.api_key:
            raise ConfigurationError("ANTHROPIC_API_KEY not set")

        headers: Dict[str, str] = {
            "content-type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": self.api_version,
        }

        # Long generations can take minutes
        timeout = httpx.Timeout(300.0, connect=10.0)
        async with httpx.AsyncClient(transport=self._transport, timeout=timeout) as client:
            response = await client.post(self.api_url, json=body, headers=headers)

        if response.status_code >= 400:
            logger.warning(f"Anthropic upstream returned {response.status_code}")

        return response.status_code, response.json()
