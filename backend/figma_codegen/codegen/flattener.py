"""Flatten a node subtree into an ordered list of JSX fragments."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List

from .emitter import node_to_jsx
from .models import BoundingBox, DocumentNode


def flatten_nodes(nodes: Iterable[DocumentNode], origin: BoundingBox) -> List[str]:
    """Emit one fragment per node, breadth-first from ``nodes``.

    Siblings keep their listed order and every ply is emitted before the
    next, so ``[B, C(children=[D])]`` yields B, C, D. Hidden nodes are not
    filtered.
    """
    fragments: List[str] = []
    queue = deque(nodes)
    while queue:
        node = queue.popleft()
        fragments.append(node_to_jsx(node, origin))
        queue.extend(node.children)
    return fragments
