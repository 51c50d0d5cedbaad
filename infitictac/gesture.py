"""Recognition of hand-drawn crosses and circles inside a board cell."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .constants import GestureType

_MIN_POINTS = 10
_MIN_CROSS_POINTS = 15
_CLOSED_DISTANCE = 0.3
_RING_INNER = 0.25
_RING_OUTER = 0.6
_RING_SHARE = 0.6
_NEAR = 0.3
_FAR = 0.7


@dataclass(frozen=True)
class CellBounds:
    """Rectangle of a cell in screen coordinates."""

    left: float
    top: float
    width: float
    height: float


def recognize_gesture(
    points: Sequence[tuple[float, float]], cell_bounds: CellBounds
) -> GestureType:
    """Classify a stroke drawn over ``cell_bounds`` as a circle, a cross or nothing."""
    if len(points) < _MIN_POINTS:
        return GestureType.NONE

    local = [
        ((x - cell_bounds.left) / cell_bounds.width, (y - cell_bounds.top) / cell_bounds.height)
        for x, y in points
    ]

    (sx, sy), (ex, ey) = local[0], local[-1]
    is_closed = math.hypot(sx - ex, sy - ey) < _CLOSED_DISTANCE

    on_ring = sum(
        1 for x, y in local if _RING_INNER < math.hypot(x - 0.5, y - 0.5) < _RING_OUTER
    )
    if is_closed and on_ring > len(local) * _RING_SHARE:
        return GestureType.CIRCLE

    top_left = any(x < _NEAR and y < _NEAR for x, y in local)
    bottom_right = any(x > _FAR and y > _FAR for x, y in local)
    top_right = any(x > _FAR and y < _NEAR for x, y in local)
    bottom_left = any(x < _NEAR and y > _FAR for x, y in local)

    if ((top_left and bottom_right) or (top_right and bottom_left)) and len(points) > _MIN_CROSS_POINTS:
        return GestureType.CROSS

    return GestureType.NONE