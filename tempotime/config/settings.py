"""Process-wide settings, read from ``TEMPOTIME_*`` environment variables.

Priority chain (highest to lowest):
  1. Init kwargs: values passed to :class:`Settings` directly
  2. Env vars: ``TEMPOTIME_*`` prefix
  3. Code defaults: baked into the model below

The library reads settings through :func:`get_settings`, which caches one
frozen instance per process. Call :func:`reset_settings` after changing
the environment to have it re-read.
"""

from __future__ import annotations

import threading
from typing import Literal

from pydantic_settings import BaseSettings

ZoneProvider = Literal["auto", "iana", "static"]


class Settings(BaseSettings):
    """Library-wide behavior switches.

    Attributes:
        strict: Raise instead of silently ignoring unknown unit names and
            unresolvable zone names.
        zone_provider: Where zone names are looked up. ``"iana"`` uses
            the zoneinfo database only, ``"static"`` uses the built-in
            fixed-offset table only, ``"auto"`` tries IANA first.
        two_digit_year_base: Century added to a ``yy`` year when parsing.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TEMPOTIME_",
    }

    strict: bool = False
    zone_provider: ZoneProvider = "auto"
    two_digit_year_base: int = 2000


_lock = threading.Lock()
_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        with _lock:
            if _settings is None:
                _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    global _settings
    with _lock:
        _settings = None


__all__ = ["Settings", "ZoneProvider", "get_settings", "reset_settings"]
