"""Runtime settings.

Sources are merged in priority order:
    1. Defaults (defined on Settings)
    2. ``SHOP_*`` environment variables
    3. Explicit overrides (CLI options), ignored when None
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

from shop.domain.model.value_objects import DEFAULT_CURRENCY

ENV_PREFIX = "SHOP_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    currency: str = DEFAULT_CURRENCY
    log_level: str = "WARNING"
    log_file: str | None = None

    def __post_init__(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        if not self.currency or not self.currency.strip():
            raise ValueError("Currency must not be empty")
        object.__setattr__(self, "log_level", self.log_level.upper())
        object.__setattr__(self, "currency", self.currency.strip().upper())

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(environ: dict[str, str] | None = None, **overrides: str | None) -> Settings:
    """Build Settings from the environment, then apply non-None overrides."""
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    for name in ("currency", "log_level", "log_file"):
        raw = env.get(f"{ENV_PREFIX}{name.upper()}")
        if raw:
            values[name] = raw

    settings = Settings(**values)
    explicit = {k: v for k, v in overrides.items() if v is not None}
    if explicit:
        settings = replace(settings, **explicit)
    return settings
