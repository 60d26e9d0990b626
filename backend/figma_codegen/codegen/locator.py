"""Locate the frame to generate from inside a Figma document tree."""

from __future__ import annotations

import logging
from collections import deque
from typing import Optional

from .models import DocumentNode, NodeType

logger = logging.getLogger("figma_codegen.codegen.locator")

# Direct page children accepted as a top-level visual container.
# The deep search only accepts FRAME; the asymmetry is intentional.
_TOP_LEVEL_TYPES = frozenset({
    NodeType.FRAME,
    NodeType.COMPONENT,
    NodeType.INSTANCE,
    NodeType.GROUP,
    NodeType.RECTANGLE,
})


def find_node_by_id(document: DocumentNode, node_id: str) -> Optional[DocumentNode]:
    """Breadth-first search for the first node whose id equals ``node_id``."""
    for node in document.walk():
        if node.id == node_id:
            return node
    return None


def find_first_top_level_frame(document: DocumentNode) -> Optional[DocumentNode]:
    """First direct page child of a container type, scanning pages in order."""
    for page in document.children:
        for child in page.children:
            if child.type in _TOP_LEVEL_TYPES:
                return child
    return None


def find_first_deep_frame(document: DocumentNode) -> Optional[DocumentNode]:
    """Breadth-first search below the document root for a FRAME node."""
    queue = deque(document.children)
    while queue:
        node = queue.popleft()
        if node.type is NodeType.FRAME:
            return node
        queue.extend(node.children)
    return None


def find_frame_node(
    document: DocumentNode,
    node_id: Optional[str] = None,
) -> Optional[DocumentNode]:
    """Return the generation target, or None when nothing qualifies.

    With ``node_id`` the exact node is returned wherever it sits in the tree.
    Without it, the first container-typed child of any page wins, then the
    first FRAME found anywhere.
    """
    if node_id:
        found = find_node_by_id(document, node_id)
        if found is None:
            logger.info(f"find_frame_node: node {node_id} not in document")
        return found

    frame = find_first_top_level_frame(document)
    if frame is not None:
        return frame

    frame = find_first_deep_frame(document)
    if frame is not None:
        logger.info(
            f"find_frame_node: no top-level container, using nested frame {frame.id}"
        )
    return frame
