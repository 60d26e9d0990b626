"""HTTP API for the Figma code generator."""
