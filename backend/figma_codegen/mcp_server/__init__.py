"""MCP server exposing Figma browsing and code generation tools."""
