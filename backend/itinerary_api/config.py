"""
Process configuration for the Itinerary API.

Values are read once at startup (from the environment, after loading a .env
file if one exists) and handed to the app and the completion client.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from itinerary_api.integrations.exceptions import IntegrationError

DEFAULT_PORT = 5000
DEFAULT_HOST = "0.0.0.0"


@dataclass(frozen=True)
class Settings:
    openai_api_key: str = field(repr=False)
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    openai_base_url: Optional[str] = None
    log_level: str = "info"


def _parse_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return ["*"]
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Build Settings from the environment, failing fast on a missing API key."""
    load_dotenv(dotenv_path)

    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key:
        raise IntegrationError("OPENAI_API_KEY is not set in the environment variables.")

    raw_port = os.getenv("PORT")
    try:
        port = int(raw_port) if raw_port else DEFAULT_PORT
    except ValueError:
        raise IntegrationError(f"PORT must be an integer, got {raw_port!r}")

    return Settings(
        openai_api_key=api_key,
        port=port,
        host=os.getenv("HOST") or DEFAULT_HOST,
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS")),
        openai_base_url=os.getenv("OPENAI_BASE_URL") or None,
        log_level=(os.getenv("LOG_LEVEL") or "info").lower(),
    )
