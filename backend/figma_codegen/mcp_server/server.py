"""
Figma Codegen MCP Server - Tool definitions and handlers

Exposes Figma tools over the stdio transport:
- list_projects: Projects of a team
- list_project_files: Files of a project
- get_file: File JSON, or specific nodes when ids are given
- generate_frontend: Fetch a file and return generated React/Vite files

Each tool takes an optional token; FIGMA_TOKEN is used when it is omitted.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from .. import config
from ..codegen import NoFrameFoundError, generate_files
from ..integrations.figma_client import FigmaClient, FigmaClientError
from ..logging_config import get_mcp_logger

logger = logging.getLogger("figma_codegen.mcp_server")

mcp = FastMCP("figma-codegen")


class MCPError(Exception):
    """MCP tool call error"""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


def _make_client(token: Optional[str]) -> FigmaClient:
    resolved = token or config.FIGMA_TOKEN
    if not resolved:
        raise MCPError(
            code="missing_token",
            message="Figma token required (pass token or set FIGMA_TOKEN env var).",
        )
    return FigmaClient(token=resolved)


def _figma_error(e: FigmaClientError) -> MCPError:
    return MCPError(code="figma_api_error", message=str(e))


# =============================================================================
# Tool Implementations
# =============================================================================


@mcp.tool(
    name="list_projects",
    description="List Figma projects for a team. Returns id, name and last_modified per project.",
)
async def list_projects(team_id: str, token: Optional[str] = None) -> Dict[str, Any]:
    """List projects of a Figma team (team_id is shown in the Figma UI URL)."""
    client = _make_client(token)
    try:
        projects = await client.list_team_projects(team_id)
    except FigmaClientError as e:
        raise _figma_error(e) from e
    finally:
        await client.close()
    return {"projects": projects}


@mcp.tool(
    name="list_project_files",
    description="List files in a Figma project. Returns id (file key), name and thumbnail_url per file.",
)
async def list_project_files(project_id: str, token: Optional[str] = None) -> Dict[str, Any]:
    """List files of a Figma project."""
    client = _make_client(token)
    try:
        files = await client.list_project_files(project_id)
    except FigmaClientError as e:
        raise _figma_error(e) from e
    finally:
        await client.close()
    return {"files": files}


@mcp.tool(
    name="get_file",
    description="Fetch full Figma file JSON, or only the given nodes if node_ids are provided.",
)
async def get_file(
    file_id: str,
    node_ids: Optional[List[str]] = None,
    token: Optional[str] = None,
) -> Dict[str, Any]:
    """Fetch a Figma file or a subset of its nodes."""
    client = _make_client(token)
    try:
        if node_ids:
            data = await client.get_file_nodes(file_id, node_ids)
        else:
            data = await client.get_file(file_id)
    except FigmaClientError as e:
        raise _figma_error(e) from e
    finally:
        await client.close()
    return {"file": data}


@mcp.tool(
    name="generate_frontend",
    description=(
        "Fetch a Figma file and return generated frontend files "
        "(React + Vite minimal skeleton) as a mapping of file name to content.\n\n"
        "node_id selects the frame to generate from; without it the first "
        "top-level frame of the file is used."
    ),
)
async def generate_frontend(
    file_id: str,
    node_id: Optional[str] = None,
    token: Optional[str] = None,
) -> Dict[str, Any]:
    """Generate React files from a Figma file."""
    client = _make_client(token)
    try:
        file_json = await client.get_file(file_id)
    except FigmaClientError as e:
        raise _figma_error(e) from e
    finally:
        await client.close()

    try:
        files = generate_files(file_json, node_id or None)
    except NoFrameFoundError as e:
        raise MCPError(
            code="no_frame_found",
            message=str(e),
            details={"file_id": file_id, "node_id": node_id},
        ) from e

    logger.info(f"generate_frontend: file={file_id}, node={node_id}, files={list(files)}")
    return {"files": files}


def main() -> int:
    """Run the server over stdio (MCP clients launch this as a subprocess)."""
    get_mcp_logger()
    if not config.FIGMA_TOKEN:
        logger.warning("FIGMA_TOKEN not set — tools will require an explicit token argument.")
    mcp.run()
    return 0
