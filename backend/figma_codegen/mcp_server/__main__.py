"""
Figma Codegen MCP Server entrypoint.

Usage:
    python -m figma_codegen.mcp_server
"""

from .server import main

if __name__ == "__main__":
    raise SystemExit(main())
