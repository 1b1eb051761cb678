"""Window, tile and screen settings shared by the whole game."""

from enum import Enum

WINDOW_W = 1600
WINDOW_H = 960
BASE_TILE_SIZE = 32
PLAYER_WIDTH = 32
PLAYER_HEIGHT = 32

# Number of 32x32 tiles in one row of the tileset image.
TILESET_WIDTH = 11


class ScreenType(str, Enum):
    """The screen the game is currently showing."""

    START = "start"
    GAME = "game"
    DEAD = "dead"