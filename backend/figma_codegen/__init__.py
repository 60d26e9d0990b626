"""Figma → React code generation package.

Subpackages:
- codegen: Document tree model and the JSX generator (pure, no I/O)
- integrations: Figma REST API client
- mcp_server: MCP tools exposing the client and the generator
"""
