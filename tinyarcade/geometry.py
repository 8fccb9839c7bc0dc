"""Plane geometry used by the games: points, rectangles and collision tests."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vector2:
    """A point or direction in screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float


def check_collision_circle_rec(center: Vector2, radius: float, rect: Rect) -> bool:
    """Return True when the circle touches or overlaps the rectangle."""
    half_w = rect.width / 2
    half_h = rect.height / 2
    dx = abs(center.x - (rect.x + half_w))
    dy = abs(center.y - (rect.y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_distance_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_distance_sq <= radius * radius


def check_collision_recs(a: Rect, b: Rect) -> bool:
    """Return True when the two rectangles overlap; shared edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def normalize(vector: Vector2) -> Vector2:
    """Return a unit vector in the same direction; the zero vector stays zero."""
    length = math.hypot(vector.x, vector.y)
    if length == 0:
        return Vector2(0.0, 0.0)
    return Vector2(vector.x / length, vector.y / length)