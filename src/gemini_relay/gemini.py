"""Single non-streaming call to the Gemini generateContent endpoint."""
from __future__ import annotations
import logging
from typing import Any

import httpx

from gemini_relay.config import Settings
from gemini_relay.errors import UnexpectedError, UpstreamError

LOGGER = logging.getLogger("gemini_relay.gemini")

async def generate_content(client: httpx.AsyncClient, settings: Settings, payload: dict[str, Any]) -> Any:
    """
    POST ``payload`` to Gemini and return the parsed JSON response unchanged.

    Raises:
        UpstreamError: Gemini answered with a non-2xx status.
        UnexpectedError: The request could not be sent or the body was not JSON.
    """
    LOGGER.info("Sending request to Gemini model %s", settings.gemini_model)
    try:
        r = await client.post(
            settings.generate_url,
            params={"key": settings.gemini_api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
        )
    except httpx.HTTPError as e:
        LOGGER.error("Gemini request failed: %s", e)
        raise UnexpectedError(f"Gemini request failed: {e}") from e

    if not r.is_success:
        error_body = r.text
        LOGGER.error("Gemini request failed with status %s: %s", r.status_code, error_body)
        raise UpstreamError(f"Gemini API error: {error_body}", r.status_code, error_body)

    try:
        data = r.json()
    except ValueError as e:
        LOGGER.error("Malformed Gemini response: %s", e)
        raise UnexpectedError("Malformed Gemini response") from e
    LOGGER.info("Received response from Gemini")
    return data
