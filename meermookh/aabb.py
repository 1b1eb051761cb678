"""Axis-aligned rectangles and the collision checks between them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Protocol

from meermookh import config


@dataclass
class Rect:
    """A rectangle given by its top-left corner and its size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def copy(self) -> Rect:
        """Return an independent copy of this rectangle."""
        return replace(self)


class Side(str, Enum):
    """The side of an obstacle that was hit."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class Drawable(Protocol):
    """Anything that occupies a rectangle and can draw itself."""

    def draw(self, surface: Any, tileset: Any) -> None: ...

    def get_rect(self) -> Optional[Rect]: ...


@dataclass(frozen=True)
class CollisionInfo:
    """The outcome of a collision check."""

    is_collided: bool = False
    is_standing: bool = False
    entity: Optional[Drawable] = None
    side: Optional[Side] = None


def simple_aabb(r1: Optional[Rect], r2: Optional[Rect]) -> bool:
    """Whether two rectangles overlap; a missing rectangle never does."""
    if r1 is None or r2 is None:
        return False
    return (
        r1.x < r2.x + r2.width
        and r1.x + r1.width > r2.x
        and r1.y < r2.y + r2.height
        and r1.y + r1.height > r2.y
    )


def check_collision_recs(r1: Rect, r2: Rect) -> bool:
    """Whether two rectangles overlap."""
    return simple_aabb(r1, r2)


def check_collision_circle_rec(
    center: Sequence[float], radius: float, rect: Rect
) -> bool:
    """Whether a circle touches or overlaps a rectangle."""
    cx, cy = center
    half_w = rect.width / 2
    half_h = rect.height / 2
    dx = math.fabs(cx - (rect.x + half_w))
    dy = math.fabs(cy - (rect.y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius


def _search_area(rect: Rect) -> Rect:
    """The quarter of the window that holds the rectangle's top-left corner."""
    w_center = config.WINDOW_W // 2
    h_center = config.WINDOW_H // 2
    area = Rect(0, 0, w_center, h_center)
    if rect.y >= h_center:
        area.y = h_center
        area.height = config.WINDOW_H - h_center
    if rect.x >= w_center:
        area.x = w_center
        area.width = config.WINDOW_W - w_center
    return area


def _nearby(rect: Rect, tiles: Iterable[Drawable]) -> list[Drawable]:
    area = _search_area(rect)
    return [t for t in tiles if simple_aabb(t.get_rect(), area)]


def check(rect: Rect, tiles: Iterable[Drawable]) -> CollisionInfo:
    """Find the first tile in the rectangle's quarter of the window that it hits."""
    for tile in _nearby(rect, tiles):
        t_rect = tile.get_rect()
        if t_rect is None or not check_collision_recs(rect, t_rect):
            continue

        bottom, top = rect.bottom, rect.y
        left, right = rect.x, rect.right
        t_top, t_bottom = t_rect.y, t_rect.bottom
        t_left, t_right = t_rect.x, t_rect.right

        if t_top - 5 <= bottom <= t_top + 5:
            return CollisionInfo(True, True, tile, Side.TOP)

        if bottom > t_top and top < t_bottom:
            side = Side.LEFT if right - t_left < t_right - left else Side.RIGHT
        else:
            side = Side.TOP if bottom - t_top < t_bottom - top else Side.BOTTOM
        return CollisionInfo(True, False, tile, side)

    return CollisionInfo()