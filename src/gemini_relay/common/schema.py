"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

class GenerateIn(BaseModel):
    """Inbound body. Both fields are passed on without interpretation."""
    model_config = ConfigDict(extra="ignore")

    prompt: Any = None
    json_schema: Any = Field(default=None, alias="jsonSchema")

class HealthOut(BaseModel):
    status: str
    model: str

@dataclass(frozen=True)
class AuthenticatedIdentity:
    """Caller resolved from a bearer credential; lives for one request."""
    user_id: str
    email: str | None = None
