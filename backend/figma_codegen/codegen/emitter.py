"""Single-node JSX emission.

Every node becomes one absolutely positioned ``<div>`` in the coordinate
space of the generation frame. Containers never nest their children; the
flattener emits descendants as siblings.
"""

from __future__ import annotations

import re
from typing import List

from .attributes import color_of, format_number, offset_of
from .models import BoundingBox, DocumentNode, NodeType

CHILDREN_PLACEHOLDER = "{/* children inserted by generator */}"

_BARE_AMPERSAND_RE = re.compile(r"&(?!(?:amp|lt|gt);)")


def escape_jsx_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for use as JSX text.

    ``&`` goes first so the entities produced for ``<`` and ``>`` are not
    escaped again. An ``&`` that already starts one of those three entities
    is left alone, so escaping twice gives the same result as once.
    """
    text = _BARE_AMPERSAND_RE.sub("&amp;", str(text))
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _style_parts(node: DocumentNode, origin: BoundingBox) -> List[str]:
    offset = offset_of(node, origin)
    parts = [
        "position: 'absolute'",
        f"left: {offset.left}",
        f"top: {offset.top}",
        f"width: {offset.width}",
        f"height: {offset.height}",
    ]
    if node.fills:
        color = color_of(node.first_solid_fill)
        if color is not None:
            parts.append(f"background: '{color.to_css()}'")
    return parts


def _text_body(node: DocumentNode, parts: List[str]) -> str:
    if node.font_size is not None:
        parts.append(f"fontSize: '{format_number(node.font_size)}px'")
    return escape_jsx_text(node.characters)


def _container_body(node: DocumentNode, parts: List[str]) -> str:
    return CHILDREN_PLACEHOLDER if node.has_children else ""


_BODY_BUILDERS = {
    NodeType.TEXT: _text_body,
    NodeType.DOCUMENT: _container_body,
    NodeType.PAGE: _container_body,
    NodeType.FRAME: _container_body,
    NodeType.COMPONENT: _container_body,
    NodeType.INSTANCE: _container_body,
    NodeType.GROUP: _container_body,
    NodeType.RECTANGLE: _container_body,
    NodeType.OTHER: _container_body,
}


def node_to_jsx(node: DocumentNode, origin: BoundingBox) -> str:
    """Render one node as a positioned ``<div>`` relative to ``origin``."""
    parts = _style_parts(node, origin)
    body = _BODY_BUILDERS[node.type](node, parts)
    return f"<div style={{{{{', '.join(parts)}}}}}>{body}</div>"
