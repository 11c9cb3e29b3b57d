"""Launch the relay with uvicorn using environment settings."""
from __future__ import annotations

import uvicorn

from gemini_relay.config import Settings
from gemini_relay.serve.app import create_app

def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    main()
