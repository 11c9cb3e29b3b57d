"""Process-wide configuration, read once from the environment."""
from __future__ import annotations
import os
from dataclasses import dataclass

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-preview-09-2025"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

@dataclass(frozen=True)
class Settings:
    supabase_url: str = ""
    supabase_anon_key: str = ""
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_base_url: str = DEFAULT_GEMINI_BASE_URL
    system_instruction_path: str | None = None
    http_timeout: float = 120.0
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables; secrets default to empty."""
        return cls(
            supabase_url=os.getenv("SUPABASE_URL", ""),
            supabase_anon_key=os.getenv("SUPABASE_ANON_KEY", ""),
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
            gemini_base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL).rstrip("/"),
            system_instruction_path=os.getenv("SYSTEM_INSTRUCTION_PATH") or None,
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "120.0")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            host=os.getenv("RELAY_HOST", "0.0.0.0"),
            port=int(os.getenv("RELAY_PORT", "8000")),
        )

    @property
    def generate_url(self) -> str:
        return f"{self.gemini_base_url}/models/{self.gemini_model}:generateContent"
