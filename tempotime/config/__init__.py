"""Settings and logging setup for Tempotime.

Modules:
    settings: Environment-driven library settings (strict mode, zone provider)
    logging: Optional structlog output configuration for host applications
"""

from __future__ import annotations

from tempotime.config.logging import configure_logging
from tempotime.config.settings import Settings, get_settings, reset_settings

__all__: list[str] = [
    "Settings",
    "configure_logging",
    "get_settings",
    "reset_settings",
]
