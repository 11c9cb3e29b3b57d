"""FastAPI relay between authenticated callers and Gemini.

Endpoints:
- GET /health
- ANY /{path}   { "prompt": "...", "jsonSchema": {...} }
"""
from __future__ import annotations
import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from gemini_relay.common.logging_setup import setup_logging
from gemini_relay.common.schema import GenerateIn, HealthOut
from gemini_relay.common.templates import SYSTEM_INSTRUCTION, build_payload, is_present, load_system_instruction
from gemini_relay.config import Settings
from gemini_relay.errors import (
    AuthenticationError,
    ConfigurationError,
    RelayError,
    UnexpectedError,
    ValidationError,
)
from gemini_relay.gemini import generate_content
from gemini_relay.identity import resolve_identity

LOGGER = logging.getLogger("gemini_relay.app")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=CORS_HEADERS)

async def _read_body(request: Request) -> GenerateIn:
    """Parse the JSON body; a missing or empty prompt is a validation error."""
    try:
        raw = await request.json()
    except ValueError as e:
        raise UnexpectedError(f"Invalid JSON body: {e}") from e
    if not isinstance(raw, dict):
        raise ValidationError("Prompt is missing in the request body.")
    body = GenerateIn.model_validate(raw)
    if not is_present(body.prompt):
        raise ValidationError("Prompt is missing in the request body.")
    return body

def _startup_instruction(settings: Settings) -> str:
    """Load the system instruction once; fall back to the built-in text on error."""
    try:
        return load_system_instruction(settings.system_instruction_path)
    except OSError as e:
        LOGGER.warning("Failed to read system instruction %s: %s", settings.system_instruction_path, e)
        return SYSTEM_INSTRUCTION

def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the relay application.

    Args:
        settings: Configuration to serve with; read from the environment when omitted.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    system_instruction = _startup_instruction(settings)

    app = FastAPI(title="gemini-relay")
    app.state.settings = settings

    @app.get("/health", response_model=HealthOut)
    def health() -> HealthOut:
        return HealthOut(status="ok", model=settings.gemini_model)

    @app.api_route("/{path:path}", methods=METHODS)
    async def handle(request: Request) -> Response:
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", headers=CORS_HEADERS)

        LOGGER.info("Relay invoked: %s %s", request.method, request.url.path)
        try:
            authorization = request.headers.get("Authorization")
            if not authorization:
                raise ConfigurationError("Missing Authorization header.")

            async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
                LOGGER.info("Verifying user authentication token")
                try:
                    identity = await resolve_identity(client, settings, authorization)
                except AuthenticationError as e:
                    LOGGER.error("Authentication failed: %s", e.message)
                    return _error(401, "Authentication failed.")
                LOGGER.info("Authentication succeeded for user %s", identity.user_id)

                if not settings.gemini_api_key:
                    raise ConfigurationError("GEMINI_API_KEY is not set in the environment.")

                body = await _read_body(request)
                payload = build_payload(body.prompt, body.json_schema, system_instruction)
                data = await generate_content(client, settings, payload)

            return JSONResponse(data, status_code=200, headers=CORS_HEADERS)
        except RelayError as e:
            LOGGER.error("Request failed (%s): %s", e.kind.value, e.message)
            return _error(e.status_code, e.message)
        except Exception as e:
            LOGGER.exception("Unexpected error: %s", e)
            return _error(500, str(e))

    return app

app = create_app()
