"""Reading tile maps stored as TMX files with CSV layer data."""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from meermookh import config
from meermookh.tile import Tile

log = logging.getLogger(__name__)

MAP_ROWS = 30
MAP_COLUMNS = 60
DEFAULT_FLOOR_TILE_TYPE = "3"
EMPTY_TILE = "0"
DEFAULT_MAP_DIRECTORY = Path("tmx")

_INTEGER = re.compile(r"[+-]?[0-9]+")

Layer = list[list[str]]


class MapError(ValueError):
    """A map file could not be understood."""


@dataclass
class Tilemap:
    """Map layers as grids of tile ids, and the tiles built from them."""

    layers: dict[int, Layer] = field(default_factory=dict)
    tiles: list[Tile] = field(default_factory=list)


def _parse_layer(data: str) -> Layer:
    cells = data.strip().replace("\n", "").split(",")
    if len(cells) < MAP_ROWS * MAP_COLUMNS:
        raise MapError("Not enough tile data in layer")
    return [
        cells[row * MAP_COLUMNS:(row + 1) * MAP_COLUMNS] for row in range(MAP_ROWS)
    ]


def _layer_tiles(layer: Layer) -> list[Tile]:
    tiles = []
    size = config.BASE_TILE_SIZE
    for y, row in enumerate(layer):
        for x, tile_id in enumerate(row):
            if tile_id == EMPTY_TILE:
                continue
            if not _INTEGER.fullmatch(tile_id):
                log.warning("Failed to convert tile ID %r to int", tile_id)
                continue
            tiles.append(Tile((x * size, y * size), int(tile_id)))
    return tiles


def parse_map(text: Union[str, bytes]) -> Tilemap:
    """Build a tilemap from the text of a TMX document."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise MapError(f"invalid map document: {exc}") from exc
    if root.tag != "map":
        raise MapError(f"expected element <map> but found <{root.tag}>")

    tilemap = Tilemap()
    for i, layer_element in enumerate(root.findall("layer")):
        data = layer_element.findtext("data", default="")
        tilemap.layers[i] = _parse_layer(data)

    for layer in tilemap.layers.values():
        tilemap.tiles.extend(_layer_tiles(layer))
    return tilemap


def load_map(
    name: str, directory: Optional[Union[str, PathLike]] = None
) -> Tilemap:
    """Read the map ``name`` from ``directory`` (``./tmx`` by default)."""
    base = DEFAULT_MAP_DIRECTORY if directory is None else Path(directory)
    return parse_map((base / name).read_bytes())