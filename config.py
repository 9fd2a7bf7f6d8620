"""Application settings

Values come from environment variables, optionally loaded from a .env file.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_json: bool = False
    seed_data: bool = True


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8000)),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_json=_as_bool(os.getenv("LOG_JSON", "false")),
        seed_data=_as_bool(os.getenv("SEED_DATA", "true")),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
