"""Gateway settings.

Values come from the process environment. A ``.env`` file at the project root
fills in keys the environment does not define yet.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

ENV_FILE = Path(__file__).resolve().parent.parent / ".env"

_TRUTHY = {"1", "true", "yes", "on"}


def read_env_file(path: Path = ENV_FILE) -> Dict[str, str]:
    """``KEY=VALUE`` pairs from `path`. Comments, blank lines and empty values are skipped."""
    if not path.is_file():
        return {}
    pairs: Dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = line.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        key, value = key.strip(), value.strip().strip("'\"")
        if key and value:
            pairs[key] = value
    return pairs


for _key, _value in read_env_file().items():
    os.environ.setdefault(_key, _value)


def env_flag(name: str, fallback: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return fallback
    return raw.strip().lower() in _TRUTHY


def _port() -> int:
    raw = os.getenv("WAGW_PORT", "")
    return int(raw) if raw.isdigit() else 8080


def _cors_origins() -> List[str]:
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    return origins if origins and "*" not in origins else ["*"]


def _docs_url() -> Optional[str]:
    if not env_flag("WAGW_ENABLE_DOCS", True):
        return None
    return os.getenv("DOCS_URL") or "/docs"


class Settings(BaseModel):
    """Gateway settings.

    Attributes:
        storage_enabled: media references point at the stored object URL
            (``message.mediaUrl``) instead of the message id (``S3_ENABLED``).
        docs_url: OpenAPI UI path, None when ``WAGW_ENABLE_DOCS=0``.
    """

    app_name: str = Field(default_factory=lambda: os.getenv("APP_NAME", "WhatsApp Gateway Canonicalization API"))
    app_version: str = "0.1.0"

    host: str = Field(default_factory=lambda: os.getenv("WAGW_HOST", "0.0.0.0"))
    port: int = Field(default_factory=_port)

    env: str = Field(default_factory=lambda: os.getenv("ENV", "dev"))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    cors_origins: List[str] = Field(default_factory=_cors_origins)
    docs_url: Optional[str] = Field(default_factory=_docs_url)

    storage_enabled: bool = Field(default_factory=lambda: env_flag("S3_ENABLED"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
