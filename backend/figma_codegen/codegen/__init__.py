"""Figma document tree → absolutely positioned React markup."""

from .assembler import (
    NoFrameFoundError,
    generate_files,
    generate_files_from_document,
    react_app_from_frame,
)
from .locator import find_frame_node
from .models import DocumentNode, NodeType, parse_document

__all__ = [
    "DocumentNode",
    "NoFrameFoundError",
    "NodeType",
    "find_frame_node",
    "generate_files",
    "generate_files_from_document",
    "parse_document",
    "react_app_from_frame",
]
