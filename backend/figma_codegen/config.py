"""Configuration constants — single source of truth for all env vars.

Only the integration layers (Figma client, HTTP API, MCP server) read these.
The code generator takes everything it needs as arguments.
"""

import os

# Server binding (uvicorn)
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# CORS origins for the HTTP API (comma-separated)
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]

# Figma REST API: Personal Access Token for design file access
FIGMA_TOKEN = os.getenv("FIGMA_TOKEN", "")
