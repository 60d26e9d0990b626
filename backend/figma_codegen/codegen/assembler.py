"""Figma document → React/Vite project files.

Locates the generation frame, flattens its subtree into absolutely
positioned JSX and packages the result as a mapping of file name to file
content:

- Full set: ``App.jsx``, ``index.html``, ``package.json``, ``README.md``
- Fallback set (no frame located): ``App.jsx``, ``README.md``

The generator only reads its arguments. Fetching the file, tokens and
writing the files to disk are the caller's concern.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .attributes import round_half_away
from .flattener import flatten_nodes
from .locator import find_frame_node
from .models import BoundingBox, DocumentNode, parse_document

logger = logging.getLogger("figma_codegen.codegen.assembler")

# Used when the frame itself has no absoluteBoundingBox
DEFAULT_FRAME_BOX = BoundingBox(x=0, y=0, width=800, height=600)

APP_JSX = "App.jsx"
INDEX_HTML = "index.html"
PACKAGE_JSON = "package.json"
README_MD = "README.md"

PACKAGE_MANIFEST: Dict[str, Any] = {
    "name": "figma-generated-app",
    "version": "0.0.0",
    "private": True,
    "scripts": {
        "dev": "vite",
    },
    "dependencies": {
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
    },
    "devDependencies": {
        "vite": "^5.0.0",
    },
}

INDEX_HTML_TEMPLATE = """<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Figma Generated App</title>
  </head>
  <body>
    <div id="root"></div>
    <script type="module">
      import React from "react";
      import { createRoot } from "react-dom/client";
      import App from "./App.jsx";
      const root = createRoot(document.getElementById("root"));
      root.render(React.createElement(App));
    </script>
  </body>
</html>
"""

README_TEMPLATE = """This code was auto-generated from a Figma file by a local MCP server.
Run:
  npm install
  npm run dev
Then open: http://localhost:5173 (Vite default)
"""

FALLBACK_README_TEMPLATE = "Generated from Figma file: fallback frame ({name})\n"

APP_TEMPLATE = """import React from "react";

export default function App() {{
  return (
    <div style={{{{ position: 'relative', width: {width}, height: {height}, border: '1px solid #e5e7eb' }}}}>
{children}
    </div>
  );
}}
"""


class NoFrameFoundError(Exception):
    """Raised when neither the locator nor the fallback yields a frame."""

    def __init__(self, message: str = "No frame found in file."):
        super().__init__(message)


def react_app_from_frame(frame: DocumentNode) -> str:
    """Render ``App.jsx`` for ``frame``: a relative root sized to the frame
    holding one absolutely positioned div per descendant."""
    origin = frame.box or DEFAULT_FRAME_BOX
    fragments = flatten_nodes(frame.children, origin)
    children_jsx = "\n".join(f"      {fragment}" for fragment in fragments)
    return APP_TEMPLATE.format(
        width=round_half_away(origin.width),
        height=round_half_away(origin.height),
        children=children_jsx,
    )


def _fallback_frame(document: DocumentNode) -> Optional[DocumentNode]:
    """First child of the first page, if the document has one."""
    if not document.children:
        return None
    first_page = document.children[0]
    if not first_page.children:
        return None
    return first_page.children[0]


def generate_files_from_document(
    document: DocumentNode,
    node_id: Optional[str] = None,
) -> Dict[str, str]:
    """Generate the artifact mapping from an already parsed document tree.

    Raises:
        NoFrameFoundError: no frame located and no fallback frame exists.
    """
    frame = find_frame_node(document, node_id)
    if frame is None:
        fallback = _fallback_frame(document)
        if fallback is None:
            raise NoFrameFoundError()
        logger.warning(
            f"generate_files: no frame located (node_id={node_id}), "
            f"falling back to '{fallback.name}' ({fallback.id})"
        )
        return {
            APP_JSX: react_app_from_frame(fallback),
            README_MD: FALLBACK_README_TEMPLATE.format(name=fallback.name),
        }

    app_jsx = react_app_from_frame(frame)
    logger.info(
        f"generate_files: frame '{frame.name}' ({frame.id}), "
        f"{sum(1 for _ in frame.walk()) - 1} nodes emitted"
    )
    return {
        APP_JSX: app_jsx,
        INDEX_HTML: INDEX_HTML_TEMPLATE,
        PACKAGE_JSON: json.dumps(PACKAGE_MANIFEST, indent=2),
        README_MD: README_TEMPLATE,
    }


def generate_files(
    file_json: Dict[str, Any],
    node_id: Optional[str] = None,
) -> Dict[str, str]:
    """Generate React/Vite project files from a raw Figma file payload.

    Args:
        file_json: ``GET /v1/files/:key`` response, or the document node
        node_id: Optional id of the node to generate from

    Returns:
        Ordered mapping of file name to file content

    Raises:
        NoFrameFoundError: nothing in the file can be generated from
    """
    return generate_files_from_document(parse_document(file_json), node_id)
