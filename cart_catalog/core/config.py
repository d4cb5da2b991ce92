"""Environment-driven configuration for the cart catalog."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from cart_catalog.core.constants import DEFAULT_LOG_LEVEL
from cart_catalog.core.exceptions import ConfigurationException


def _str_to_bool(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"true", "1", "yes", "y"}


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationException(name, f"expected a number, got {raw!r}") from exc


@dataclass(slots=True)
class Settings:
    redis_url: str
    log_level: str
    socket_timeout: float | None
    atomic_writes: bool


def load_settings() -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    redis_url = os.getenv("REDIS_URL", "").strip()
    if not redis_url:
        raise ConfigurationException("REDIS_URL", "environment variable is not set")

    return Settings(
        redis_url=redis_url,
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        socket_timeout=_optional_float("REDIS_SOCKET_TIMEOUT"),
        atomic_writes=_str_to_bool(os.getenv("CART_ATOMIC_WRITES")),
    )
