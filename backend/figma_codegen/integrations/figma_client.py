"""Figma REST API client.

Fetches team projects, project files and file node trees using Personal
Access Token (PAT) authentication.

Environment:
    FIGMA_TOKEN — Figma Personal Access Token (used when no token= is passed)

Usage:
    client = FigmaClient()
    projects = await client.list_team_projects("1234567890")
    file_json = await client.get_file("6kGd851qaAX4TiL44vpIrO")
    files = generate_files(file_json)
"""

import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from ..settings import (
    FIGMA_HTTP_MAX_CONNECTIONS,
    FIGMA_HTTP_MAX_KEEPALIVE,
    FIGMA_HTTP_TIMEOUT,
)

logger = logging.getLogger("figma_codegen.integrations.figma")

FIGMA_API_BASE = "https://api.figma.com"


class FigmaClientError(Exception):
    """Raised when a Figma API call fails."""


class FigmaClient:
    """Async Figma REST API client.

    Args:
        token: Figma PAT. Falls back to FIGMA_TOKEN env var.
        timeout: HTTP request timeout in seconds.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        timeout: float = FIGMA_HTTP_TIMEOUT,
    ):
        self._token = token or os.getenv("FIGMA_TOKEN", "")
        if not self._token:
            raise FigmaClientError(
                "Figma token not configured. Set FIGMA_TOKEN environment variable "
                "or pass token= to FigmaClient()."
            )
        self._client: Optional[httpx.AsyncClient] = None
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=FIGMA_API_BASE,
                headers={"X-FIGMA-TOKEN": self._token},
                timeout=self._timeout,
                limits=httpx.Limits(
                    max_connections=FIGMA_HTTP_MAX_CONNECTIONS,
                    max_keepalive_connections=FIGMA_HTTP_MAX_KEEPALIVE,
                ),
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "FigmaClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _get(self, path: str, params: Optional[Dict] = None) -> Dict[str, Any]:
        """Make a GET request to the Figma API."""
        client = await self._get_client()
        try:
            resp = await client.get(path, params=params)
        except httpx.TimeoutException as e:
            raise FigmaClientError(f"Figma API timeout: {path}") from e
        except httpx.ConnectError as e:
            raise FigmaClientError(f"Figma API connection error: {path}") from e

        if resp.status_code == 403:
            raise FigmaClientError(
                "Figma API returned 403 Forbidden. Check that FIGMA_TOKEN is valid "
                "and has file_content:read scope."
            )
        if resp.status_code == 404:
            raise FigmaClientError(f"Figma resource not found: {path}")
        if resp.status_code == 429:
            raise FigmaClientError("Figma API rate limit exceeded. Retry later.")
        if resp.status_code != 200:
            raise FigmaClientError(
                f"Figma API error {resp.status_code}: {resp.text[:200]}"
            )

        return resp.json()

    # ------------------------------------------------------------------
    # Teams / projects
    # ------------------------------------------------------------------

    async def list_team_projects(self, team_id: str) -> List[Dict[str, Any]]:
        """List projects of a team.

        GET /v1/teams/:team_id/projects
        """
        data = await self._get(f"/v1/teams/{team_id}/projects")
        projects = [
            {
                "id": str(p.get("id", "")),
                "name": p.get("name", ""),
                "last_modified": p.get("last_modified"),
            }
            for p in data.get("projects", [])
        ]
        logger.info(f"list_team_projects: team={team_id}, projects={len(projects)}")
        return projects

    async def list_project_files(self, project_id: str) -> List[Dict[str, Any]]:
        """List files in a project.

        GET /v1/projects/:project_id/files
        """
        data = await self._get(f"/v1/projects/{project_id}/files")
        files = [
            {
                "id": f.get("key", ""),
                "name": f.get("name", ""),
                "thumbnail_url": f.get("thumbnail_url"),
            }
            for f in data.get("files", [])
        ]
        logger.info(f"list_project_files: project={project_id}, files={len(files)}")
        return files

    # ------------------------------------------------------------------
    # Files / nodes
    # ------------------------------------------------------------------

    async def get_file(self, file_key: str) -> Dict[str, Any]:
        """Fetch a whole file, including its document tree.

        GET /v1/files/:key
        """
        data = await self._get(f"/v1/files/{file_key}")
        pages = data.get("document", {}).get("children", [])
        logger.info(f"get_file: file={file_key}, pages={len(pages)}")
        return data

    async def get_file_nodes(
        self,
        file_key: str,
        node_ids: List[str],
    ) -> Dict[str, Any]:
        """Fetch specific nodes from a Figma file.

        GET /v1/files/:key/nodes?ids=...
        """
        ids_param = ",".join(node_ids)
        data = await self._get(f"/v1/files/{file_key}/nodes", params={"ids": ids_param})
        logger.info(
            f"get_file_nodes: file={file_key}, requested={len(node_ids)}, "
            f"returned={len(data.get('nodes', {}))}"
        )
        return data
