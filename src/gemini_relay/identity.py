"""Resolve the caller's identity from a Supabase Auth bearer credential."""
from __future__ import annotations
import logging

import httpx

from gemini_relay.common.schema import AuthenticatedIdentity
from gemini_relay.config import Settings
from gemini_relay.errors import AuthenticationError, ConfigurationError

LOGGER = logging.getLogger("gemini_relay.identity")

async def resolve_identity(client: httpx.AsyncClient, settings: Settings, authorization: str) -> AuthenticatedIdentity:
    """
    Ask Supabase Auth who owns ``authorization``.

    Args:
        client: Client used for the lookup.
        settings: Supplies the project URL and anon key.
        authorization: Raw Authorization header, forwarded unchanged.

    Raises:
        ConfigurationError: SUPABASE_URL is not configured.
        AuthenticationError: The credential was rejected or could not be checked.
    """
    if not settings.supabase_url:
        raise ConfigurationError("SUPABASE_URL is not set in the environment.")

    url = f"{settings.supabase_url.rstrip('/')}/auth/v1/user"
    headers = {"apikey": settings.supabase_anon_key, "Authorization": authorization}
    try:
        r = await client.get(url, headers=headers)
    except httpx.HTTPError as e:
        raise AuthenticationError(f"Auth request failed: {e}") from e

    if not r.is_success:
        raise AuthenticationError(f"Auth service returned {r.status_code}: {r.text}")
    try:
        data = r.json()
    except ValueError as e:
        raise AuthenticationError("Auth service returned malformed JSON.") from e

    user_id = data.get("id") if isinstance(data, dict) else None
    if not user_id:
        raise AuthenticationError("No user found.")
    return AuthenticatedIdentity(user_id=str(user_id), email=data.get("email"))
