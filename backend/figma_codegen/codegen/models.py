"""Figma document tree model used by the code generator.

Parses the raw JSON returned by ``GET /v1/files/:key`` into read-only
``DocumentNode`` objects. Parsing is tolerant: absent or malformed optional
fields fall back to defaults instead of failing, so a partially exported
file still produces a usable tree.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class NodeType(str, Enum):
    """Node kinds the generator distinguishes. Everything else is OTHER."""

    DOCUMENT = "DOCUMENT"
    PAGE = "PAGE"
    FRAME = "FRAME"
    COMPONENT = "COMPONENT"
    INSTANCE = "INSTANCE"
    GROUP = "GROUP"
    RECTANGLE = "RECTANGLE"
    TEXT = "TEXT"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, raw: Any) -> "NodeType":
        # Figma's REST API reports pages as CANVAS
        if raw == "CANVAS":
            return cls.PAGE
        try:
            return cls(raw)
        except ValueError:
            return cls.OTHER


def _number(value: Any, default: float = 0.0) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    try:
        number = float(value)
    except OverflowError:
        return default
    # JSON admits NaN and Infinity
    return number if math.isfinite(number) else default


@dataclass(frozen=True)
class BoundingBox:
    """Absolute rectangle in document coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Optional["BoundingBox"]:
        if not isinstance(data, dict):
            return None
        return cls(
            x=_number(data.get("x")),
            y=_number(data.get("y")),
            width=_number(data.get("width")),
            height=_number(data.get("height")),
        )


ZERO_BOX = BoundingBox()


@dataclass(frozen=True)
class Color:
    """Figma color channels, floats in 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Optional["Color"]:
        if not isinstance(data, dict):
            return None
        return cls(
            r=_number(data.get("r")),
            g=_number(data.get("g")),
            b=_number(data.get("b")),
        )


@dataclass(frozen=True)
class Fill:
    """A single paint entry from a node's ``fills`` list."""

    type: str
    color: Optional[Color] = None
    opacity: Any = None  # kept raw; only numeric values count as alpha

    @property
    def is_solid(self) -> bool:
        return self.type == "SOLID"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Fill":
        return cls(
            type=str(data.get("type", "")),
            color=Color.from_dict(data.get("color")),
            opacity=data.get("opacity"),
        )


@dataclass(frozen=True)
class DocumentNode:
    """One node of a Figma document tree."""

    id: str
    type: NodeType
    raw_type: str = ""
    name: str = ""
    box: Optional[BoundingBox] = None
    fills: Tuple[Fill, ...] = ()
    characters: str = ""
    font_size: Optional[float] = None
    children: Tuple["DocumentNode", ...] = field(default_factory=tuple)

    @property
    def has_children(self) -> bool:
        return len(self.children) > 0

    @property
    def first_solid_fill(self) -> Optional[Fill]:
        for fill in self.fills:
            if fill.is_solid:
                return fill
        return None

    def walk(self):
        """Yield every node in the subtree, breadth-first."""
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DocumentNode":
        """Recursively build a node from its raw JSON dict."""
        raw_children = data.get("children")
        children: List[DocumentNode] = []
        if isinstance(raw_children, list):
            for child in raw_children:
                if isinstance(child, dict):
                    children.append(cls.from_dict(child))

        raw_fills = data.get("fills")
        fills: List[Fill] = []
        if isinstance(raw_fills, list):
            fills = [Fill.from_dict(f) for f in raw_fills if isinstance(f, dict)]

        style = data.get("style")
        font_size = None
        if isinstance(style, dict):
            size = style.get("fontSize")
            # 0 is treated as "no explicit size"
            if _number(size):
                font_size = _number(size)

        characters = data.get("characters")
        raw_type = data.get("type", "")

        return cls(
            id=str(data.get("id", "")),
            type=NodeType.parse(raw_type),
            raw_type=str(raw_type),
            name=str(data.get("name", "")),
            box=BoundingBox.from_dict(data.get("absoluteBoundingBox")),
            fills=tuple(fills),
            characters=characters if isinstance(characters, str) else "",
            font_size=font_size,
            children=tuple(children),
        )


def parse_document(file_json: Dict[str, Any]) -> DocumentNode:
    """Parse a Figma file payload or a bare document node.

    Accepts either the full ``GET /v1/files/:key`` response (which wraps the
    tree in a ``document`` key) or the document node itself.
    """
    document = file_json.get("document")
    if isinstance(document, dict):
        return DocumentNode.from_dict(document)
    return DocumentNode.from_dict(file_json)
