"""Centralized config for the storefront catalog.

Environment variables (optional):
- CATALOG_BACKEND: "memory" (mock dataset, default) or "database"
- SIMULATED_DELAY_MS: artificial latency added by the product service (default: 300)
- DEFAULT_PRICE_MIN / DEFAULT_PRICE_MAX: price filter bounds when a query omits them

Database connection settings live in database.connection.DatabaseSettings.
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


CATALOG_BACKEND = os.getenv("CATALOG_BACKEND", "memory").strip().lower()
USE_DB_CATALOG = CATALOG_BACKEND == "database" or _env_bool("USE_DB_CATALOG", default=False)

SIMULATED_DELAY_MS = _env_int("SIMULATED_DELAY_MS", 300)

DEFAULT_PRICE_MIN = _env_int("DEFAULT_PRICE_MIN", 0)
DEFAULT_PRICE_MAX = _env_int("DEFAULT_PRICE_MAX", 10000)
