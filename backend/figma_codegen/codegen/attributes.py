"""Visual attribute extraction: fill → CSS color, box → pixel offsets.

Pure functions with no side effects.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from .models import ZERO_BOX, BoundingBox, DocumentNode, Fill

Number = Union[int, float]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 → 3, -2.5 → -3).

    Python's built-in ``round`` uses banker's rounding, which would shift
    half-pixel coordinates inconsistently.
    """
    return int(Decimal(repr(value)).to_integral_value(rounding=ROUND_HALF_UP))


def format_number(value: Number) -> str:
    """Render a number for generated source: ``1.0`` → ``1``, ``0.5`` → ``0.5``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


@dataclass(frozen=True)
class Rgba:
    r: int
    g: int
    b: int
    a: Number = 1

    def to_css(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {format_number(self.a)})"


@dataclass(frozen=True)
class Offset:
    """Node geometry relative to the generation frame, in whole pixels."""

    left: int
    top: int
    width: int
    height: int


def color_of(fill: Optional[Fill]) -> Optional[Rgba]:
    """Convert a SOLID fill into an RGBA color; anything else yields None."""
    if fill is None or not fill.is_solid or fill.color is None:
        return None
    opacity = fill.opacity
    alpha = opacity if _is_finite_number(opacity) else 1
    return Rgba(
        r=round_half_away(fill.color.r * 255),
        g=round_half_away(fill.color.g * 255),
        b=round_half_away(fill.color.b * 255),
        a=alpha,
    )


def offset_of(node: DocumentNode, origin: BoundingBox) -> Offset:
    """Position of ``node`` relative to ``origin``; a missing box counts as zero."""
    box = node.box or ZERO_BOX
    return Offset(
        left=round_half_away(box.x - origin.x),
        top=round_half_away(box.y - origin.y),
        width=round_half_away(box.width),
        height=round_half_away(box.height),
    )
