# meermookh

A small side-scrolling platformer built on pygame. The level is a tile map in
TMX format. The player runs, jumps and swings at an enemy that walks toward
them once they come within its detection range and hits them when close.
Falling off the bottom of the window drains health until the player gets back
up or dies.

## Installing

```
pip install .
```

## Playing

Run the game from a directory that holds:

- `tmx/main_map.tmx`: the level. Each `<layer>` carries comma-separated tile
  ids in its `<data>` element, 30 rows of 60 tiles of 32 pixels each; id `0`
  is an empty cell.
- `assets/`: textures, every file named `name.png` or `name.jpg` and loaded
  under `name`. A texture named `tileset` is required, laid out 11 tiles to a
  row. Any other kind of file in this directory stops the game with an
  `AssetError`.

Then start it with:

```
meermookh
```

The command takes no options beyond `--help`.

Controls:

| Key                          | Action            |
|------------------------------|-------------------|
| Space                        | start / jump      |
| A / D                        | move left / right |
| Left mouse button, Left Ctrl | attack            |

The game screen shows your health and your frags, the number of enemies you
have killed. Health turns red at 25 or below. When it reaches zero the death
screen appears; press Space there to quit. Closing the window quits at any time.

## Using the pieces

The modules can be used on their own:

- `meermookh.mapparser.parse_map(text)` reads a TMX document into a `Tilemap`
  with its `layers` (grids of tile ids) and `tiles` (`Tile` objects).
  `load_map(name, directory)` reads the file from `directory`, `./tmx` by
  default. Malformed XML, a root other than `<map>`, or a layer with too
  little data raises `MapError`.
- `meermookh.aabb.check(rect, tiles)` tests a `Rect` against tiles and returns
  a `CollisionInfo` telling whether it hit, which `Side`, and whether the
  rectangle is standing on top. `simple_aabb` and `check_collision_circle_rec`
  are the underlying rectangle and circle tests.
- `meermookh.tile.source_rect(idx)` gives the rectangle of tile id `idx`
  (counted from 1) inside the tileset image.
- `meermookh.player.Player` and `meermookh.enemies.Enemy` take the tiles, the
  frame's `Controls` and an explicit time in `update`, so they can be stepped
  without a window.
- `meermookh.game.Game` can be given a ready `Tilemap`. Its `update` and
  `manage_enemies` advance the world without drawing.

## What it does not do

There is a single hard-coded level and a single enemy. Enemies only chase:
their patrol and attack states do nothing beyond letting the hit cooldown run
out. Nothing is saved between runs, and the background texture drawn by
`Game.draw_background` is not shown during play.

## Running the tests

```
pip install .[test]
pytest
```