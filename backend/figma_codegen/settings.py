"""Runtime settings — tunable parameters for the integration layers.

All values read from environment variables with sensible defaults.
Infrastructure config (API host, tokens) stays in figma_codegen/config.py.
"""

from __future__ import annotations

import os


def _int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))


def _str(key: str, default: str) -> str:
    return os.getenv(key, default)


# =====================================================================
# HTTP Clients (Figma API)
# =====================================================================

FIGMA_HTTP_TIMEOUT = _float("FIGMA_HTTP_TIMEOUT", 60.0)
FIGMA_HTTP_MAX_CONNECTIONS = _int("FIGMA_HTTP_MAX_CONNECTIONS", 5)
FIGMA_HTTP_MAX_KEEPALIVE = _int("FIGMA_HTTP_MAX_KEEPALIVE", 3)


# =====================================================================
# Logging
# =====================================================================

# One of DEBUG | INFO | WARNING | ERROR
LOG_LEVEL = _str("LOG_LEVEL", "INFO").upper()
