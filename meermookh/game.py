"""The game loop, its screens and the world it updates each frame."""

from __future__ import annotations

import argparse
import logging
import time
from os import PathLike
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import pygame

from meermookh import config
from meermookh.config import ScreenType
from meermookh.enemies import Enemy
from meermookh.events import player_killed_enemy
from meermookh.mapparser import Tilemap, load_map
from meermookh.player import Controls, Player

log = logging.getLogger(__name__)

MAP_NAME = "main_map.tmx"
DEFAULT_ASSET_DIRECTORY = Path("assets")
ALLOWED_FORMATS = ("png", "jpg")
TARGET_FPS = 60
WINDOW_TITLE = "meer mookh"

BLACK = (0, 0, 0, 255)
GRAY = (130, 130, 130)
RAYWHITE = (245, 245, 245, 255)
BACKGROUND_SCALE = 0.90
HUD_FONT_SIZE = 20
SCREEN_FONT_SIZE = 32


class AssetError(RuntimeError):
    """A texture could not be found or the asset directory is malformed."""


class Game:
    """The world: a tile map, the player and the enemies, plus the screen shown."""

    def __init__(
        self,
        tilemap: Optional[Tilemap] = None,
        map_directory: Optional[Union[str, PathLike]] = None,
        map_name: str = MAP_NAME,
    ) -> None:
        self.enemies: list[Enemy] = [
            Enemy((250 + i * 100, 500)) for i in range(1)
        ]
        self.tilemap = (
            tilemap if tilemap is not None else load_map(map_name, map_directory)
        )
        self.player = Player((100, 700), self.enemies)
        for enemy in self.enemies:
            enemy.attach_player_rect(self.player.rect)
            enemy.set_player(self.player)

        self.loaded_textures: dict[str, Any] = {}
        self.current_screen = ScreenType.START
        self.should_run = True
        self._fonts: dict[int, Any] = {}

    def __repr__(self) -> str:
        return (
            f"Game(screen={self.current_screen.value}, "
            f"enemies={len(self.enemies)}, player={self.player!r})"
        )

    def update(
        self, controls: Controls = Controls(), now: Optional[float] = None
    ) -> None:
        """Advance the player and every enemy by one frame."""
        if now is None:
            now = time.monotonic()
        self.manage_enemies()

        tiles = list(self.tilemap.tiles)
        self.player.update(tiles, controls, now)
        if self.player.hp <= 0:
            self.current_screen = ScreenType.DEAD

        for enemy in list(self.enemies):
            enemy.update(tiles, now)

    def manage_enemies(self) -> None:
        """Drop enemies that left the window or died, crediting each kill."""
        survivors = []
        for enemy in self.enemies:
            rect = enemy.rect
            off_screen = rect.x >= config.WINDOW_W or rect.y >= config.WINDOW_H
            dead = enemy.hp <= 0
            if dead:
                player_killed_enemy(self.player)
            if not (off_screen or dead):
                survivors.append(enemy)
        # The player holds the same list, so it must change in place.
        self.enemies[:] = survivors

    def render(self, surface: Any) -> None:
        """Draw the tiles, the enemies and the player onto ``surface``."""
        tileset = self.loaded_textures.get("tileset")
        if tileset is None:
            raise AssetError("tileset texture is not loaded")

        for tile in self.tilemap.tiles:
            tile.draw(surface, tileset)
        for enemy in self.enemies:
            enemy.draw(surface)
        self.player.draw(surface, self._font(HUD_FONT_SIZE))

    def start(self) -> None:
        """Open the window and run the game until it is closed or quit."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((config.WINDOW_W, config.WINDOW_H))
            pygame.display.set_caption(WINDOW_TITLE)
            self.load_textures()
            clock = pygame.time.Clock()

            self.should_run = True
            self.current_screen = ScreenType.START
            while True:
                space_pressed = False
                attack_pressed = False
                closed = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        closed = True
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_SPACE:
                            space_pressed = True
                        elif event.key == pygame.K_LCTRL:
                            attack_pressed = True
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        attack_pressed = True
                if closed:
                    break

                keys = pygame.key.get_pressed()
                controls = Controls(
                    left=bool(keys[pygame.K_a]),
                    right=bool(keys[pygame.K_d]),
                    jump=bool(keys[pygame.K_SPACE]),
                    attack=attack_pressed,
                )

                surface.fill(RAYWHITE)
                if self.current_screen is ScreenType.START:
                    self.draw_start_screen(surface, space_pressed)
                elif self.current_screen is ScreenType.GAME:
                    self.draw_game_screen(surface, controls)
                elif self.current_screen is ScreenType.DEAD:
                    self.draw_dead_screen(surface, space_pressed)

                if not self.should_run:
                    break

                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            self._unload_textures()
            pygame.quit()

    def draw_background(self, surface: Any) -> None:
        """Draw the sky texture, slightly shrunk and darkened."""
        texture = self.loaded_textures.get("game-bg-sky")
        if texture is None:
            raise AssetError('"game-bg-sky" texture is not present in loaded textures')
        width, height = texture.get_size()
        scaled = pygame.transform.scale(
            texture,
            (int(width * BACKGROUND_SCALE), int(height * BACKGROUND_SCALE)),
        )
        scaled.fill(GRAY, special_flags=pygame.BLEND_RGB_MULT)
        surface.blit(scaled, (0, 0))

    def draw_game_screen(
        self,
        surface: Any,
        controls: Controls = Controls(),
        now: Optional[float] = None,
    ) -> None:
        self.update(controls, now)
        self.render(surface)

    def draw_dead_screen(self, surface: Any, space_pressed: bool) -> None:
        """Show the death message; space ends the game."""
        self._draw_text(surface, "TI UMER!!!! DOLBOEB", (600, 400))
        self._draw_text(surface, "press space to quit", (600, 500))
        if space_pressed:
            self.should_run = False

    def draw_start_screen(self, surface: Any, space_pressed: bool) -> None:
        """Show the start prompt; space begins play."""
        self._draw_text(surface, "press space to play", (600, 600))
        if space_pressed:
            self.current_screen = ScreenType.GAME

    def load_textures(
        self, directory: Optional[Union[str, PathLike]] = None
    ) -> None:
        """Load every ``name.png`` or ``name.jpg`` in ``directory`` under ``name``."""
        base = DEFAULT_ASSET_DIRECTORY if directory is None else Path(directory)
        try:
            entries = sorted(base.iterdir())
        except OSError as exc:
            raise AssetError(f"failed to open asset directory: {exc}") from exc

        for entry in entries:
            parts = entry.name.split(".")
            if len(parts) != 2 or parts[1] not in ALLOWED_FORMATS:
                raise AssetError(f"Invalid file found at /assets/{entry.name}")
            name = parts[0]
            texture = pygame.image.load(str(entry))
            self.loaded_textures[name] = texture
            width, height = texture.get_size()
            log.info("Loaded texture: %s (size: %dx%d)", name, width, height)

        log.info("Loaded %d textures.", len(self.loaded_textures))

    def _unload_textures(self) -> None:
        self.loaded_textures.clear()

    def _font(self, size: int) -> Any:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _draw_text(self, surface: Any, text: str, position: tuple[int, int]) -> None:
        rendered = self._font(SCREEN_FONT_SIZE).render(text, True, BLACK)
        surface.blit(rendered, position)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(
        prog="meermookh", description="A side-scrolling arcade game."
    )
    parser.parse_args(argv)
    Game().start()
    return 0