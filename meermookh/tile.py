"""Map tiles and their place in the tileset image."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from meermookh import config
from meermookh.aabb import Rect


def source_rect(idx: int) -> Rect:
    """The rectangle of tile ``idx`` (counted from 1) inside the tileset."""
    index = idx - 1
    width = config.TILESET_WIDTH
    # Truncating division, so that index -1 stays in row 0.
    row = abs(index) // width * (1 if index >= 0 else -1)
    col = index - row * width
    size = config.BASE_TILE_SIZE
    return Rect(col * size, row * size, size, size)


class Tile:
    """One square of the map, drawn from a part of the tileset."""

    def __init__(self, position: Sequence[float], idx: int) -> None:
        x, y = position
        size = config.BASE_TILE_SIZE
        self.index = idx
        self.rect = Rect(float(x), float(y), size, size)
        self.src_rect = source_rect(idx)

    def __repr__(self) -> str:
        return f"Tile(index={self.index}, rect={self.rect})"

    def draw(self, surface: Any, tileset: Any) -> None:
        """Blit this tile's part of ``tileset`` onto ``surface``."""
        src = self.src_rect
        surface.blit(
            tileset,
            (self.rect.x, self.rect.y),
            (src.x, src.y, src.width, src.height),
        )

    def get_rect(self) -> Rect:
        return self.rect