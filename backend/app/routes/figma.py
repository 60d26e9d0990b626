"""Figma → React generation API endpoints.

Generates React/Vite project files either from a Figma document posted by
the caller or from a file fetched through the Figma REST API, and lists
team projects / project files for browsing.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from figma_codegen import config
from figma_codegen.codegen import NoFrameFoundError, generate_files
from figma_codegen.integrations.figma_client import FigmaClient, FigmaClientError

logger = logging.getLogger("figma_codegen.routes.figma")

router = APIRouter(prefix="/api/v2/figma", tags=["figma"])


# --- Schemas ---


class GenerateRequest(BaseModel):
    """Request for POST /api/v2/figma/generate."""

    document: Dict[str, Any] = Field(
        ...,
        description="Figma file JSON (GET /v1/files/:key response) or its document node",
    )
    node_id: Optional[str] = Field(
        None, description="Node to generate from, e.g. '1:23'. Defaults to the first frame."
    )


class GenerateFromUrlRequest(BaseModel):
    """Request for POST /api/v2/figma/generate-from-url."""

    figma_url: str = Field(
        ...,
        description=(
            "Figma URL, e.g. https://www.figma.com/design/{fileKey}/{name}?node-id={nodeId}"
        ),
    )
    node_id: Optional[str] = Field(
        None, description="Overrides the node-id taken from the URL"
    )


class GenerateResponse(BaseModel):
    """Generated files, file name → content."""

    files: Dict[str, str]


class ProjectItem(BaseModel):
    id: str
    name: str
    last_modified: Optional[str] = None


class ProjectListResponse(BaseModel):
    projects: List[ProjectItem] = Field(default_factory=list)


class FileItem(BaseModel):
    id: str
    name: str
    thumbnail_url: Optional[str] = None


class FileListResponse(BaseModel):
    files: List[FileItem] = Field(default_factory=list)


# --- Helpers ---


def _generate(file_json: Dict[str, Any], node_id: Optional[str]) -> GenerateResponse:
    try:
        files = generate_files(file_json, node_id)
    except NoFrameFoundError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return GenerateResponse(files=files)


def _require_client() -> FigmaClient:
    if not config.FIGMA_TOKEN:
        raise HTTPException(
            status_code=400,
            detail=(
                "Figma integration not configured. "
                "Set FIGMA_TOKEN environment variable with a valid Figma Personal Access Token. "
                "See: https://www.figma.com/developers/api#access-tokens"
            ),
        )
    try:
        return FigmaClient(token=config.FIGMA_TOKEN)
    except FigmaClientError as e:
        raise HTTPException(status_code=400, detail=str(e))


# --- Endpoints ---


@router.post("/generate", response_model=GenerateResponse)
async def generate_from_document(payload: GenerateRequest):
    """Generate React files from a posted Figma document.

    Usage:
        POST /api/v2/figma/generate
        { "document": {...}, "node_id": "1:23" }
    """
    return _generate(payload.document, payload.node_id)


@router.post("/generate-from-url", response_model=GenerateResponse)
async def generate_from_url(payload: GenerateFromUrlRequest):
    """Fetch a Figma file and generate React files from it.

    Requires FIGMA_TOKEN environment variable.
    """
    file_key, url_node_id = _parse_figma_url(payload.figma_url)
    client = _require_client()
    node_id = payload.node_id or url_node_id

    try:
        file_json = await client.get_file(file_key)
    except FigmaClientError as e:
        raise HTTPException(status_code=502, detail=f"Figma API error: {e}")
    finally:
        await client.close()

    logger.info(f"generate-from-url: file={file_key}, node={node_id}")
    return _generate(file_json, node_id)


@router.get("/teams/{team_id}/projects", response_model=ProjectListResponse)
async def list_team_projects(team_id: str):
    """List projects of a Figma team."""
    client = _require_client()
    try:
        projects = await client.list_team_projects(team_id)
    except FigmaClientError as e:
        raise HTTPException(status_code=502, detail=f"Figma API error: {e}")
    finally:
        await client.close()
    return ProjectListResponse(projects=[ProjectItem(**p) for p in projects])


@router.get("/projects/{project_id}/files", response_model=FileListResponse)
async def list_project_files(project_id: str):
    """List files of a Figma project."""
    client = _require_client()
    try:
        files = await client.list_project_files(project_id)
    except FigmaClientError as e:
        raise HTTPException(status_code=502, detail=f"Figma API error: {e}")
    finally:
        await client.close()
    return FileListResponse(files=[FileItem(**f) for f in files])


# --- Figma URL Parsing ---


def _parse_figma_url(url: str) -> Tuple[str, Optional[str]]:
    """Parse a Figma URL into (file_key, node_id).

    Supports:
        https://www.figma.com/design/{fileKey}/{name}?node-id={nodeId}
        https://www.figma.com/file/{fileKey}/{name}
        https://www.figma.com/design/{fileKey}?node-id={nodeId}

    Node ID format: URL uses '16650-538', API uses '16650:538'. The node-id
    is optional; without it the generator picks the first frame.

    Raises:
        HTTPException if URL format is invalid
    """
    path_match = re.search(r"figma\.com/(?:design|file)/([a-zA-Z0-9]+)", url)
    if not path_match:
        raise HTTPException(
            status_code=400,
            detail=(
                "Invalid Figma URL. Expected format: "
                "https://www.figma.com/design/{fileKey}/...?node-id={nodeId}"
            ),
        )
    file_key = path_match.group(1)

    node_match = re.search(r"[?&]node-id=([^&#]+)", url)
    if not node_match:
        return file_key, None

    # Decode percent-encoding (e.g. %3A → :) then convert dashes to colons
    raw_node_id = unquote(node_match.group(1))
    return file_key, raw_node_id.replace("-", ":")
