"""Error kinds raised while handling a relay request.

Every kind except AUTHENTICATION surfaces to the caller as a 500 with
``{"error": <message>}``; authentication failures are answered with 401.
"""
from __future__ import annotations
from enum import Enum

class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    UPSTREAM = "upstream"
    UNEXPECTED = "unexpected"

def status_for(kind: ErrorKind) -> int:
    """HTTP status for an error kind."""
    if kind is ErrorKind.AUTHENTICATION:
        return 401
    return 500

class RelayError(Exception):
    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return status_for(self.kind)

class ConfigurationError(RelayError):
    """Required configuration or request header is missing."""
    kind = ErrorKind.CONFIGURATION

class AuthenticationError(RelayError):
    """Identity provider rejected or could not resolve the credential."""
    kind = ErrorKind.AUTHENTICATION

class ValidationError(RelayError):
    kind = ErrorKind.VALIDATION

class UpstreamError(RelayError):
    """Gemini answered with a non-success status."""
    kind = ErrorKind.UPSTREAM

    def __init__(self, message: str, upstream_status: int, detail: str) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        self.detail = detail

class UnexpectedError(RelayError):
    kind = ErrorKind.UNEXPECTED
