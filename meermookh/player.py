"""The player character: movement, jumping, attacks and health."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

import pygame

from meermookh import config
from meermookh.aabb import Drawable, Rect, check, check_collision_circle_rec
from meermookh.enemies import Enemy

log = logging.getLogger(__name__)

BLACK = (0, 0, 0, 255)
RED = (230, 41, 55, 255)
PLAYER_COLOR = (128, 128, 128, 255)

FALL_DAMAGE = 5
FALL_DAMAGE_INTERVAL = 0.075
ATTACK_DURATION = 0.3


@dataclass(frozen=True)
class Controls:
    """The input state for one frame."""

    left: bool = False
    right: bool = False
    jump: bool = False
    attack: bool = False


class Player:
    """The player, who moves, jumps and hits enemies within reach."""

    def __init__(
        self, position: Sequence[float], enemies: Optional[list[Enemy]] = None
    ) -> None:
        x, y = position
        self.rect = Rect(float(x), float(y), config.PLAYER_WIDTH, config.PLAYER_HEIGHT)
        self.speed = 5
        self.damage = 35.0
        self.hp = 100
        self.jump_height = 150.0
        self.frags = 0
        self.attack_radius = 64
        self.can_jump = False
        self.is_standing = False
        self.is_jumping = False
        self.is_falling_below_screen = False
        self.is_attacking = False
        self.enemies: list[Enemy] = enemies if enemies is not None else []
        self._attack_ends_at = 0.0
        self._next_fall_damage_at = 0.0

    def __repr__(self) -> str:
        return f"Player(rect={self.rect}, hp={self.hp}, frags={self.frags})"

    def get_rect(self) -> Rect:
        """A copy of the player's rectangle."""
        return self.rect.copy()

    def draw(self, surface: Any, font: Any) -> None:
        """Draw the health and frag counters and the player onto ``surface``."""
        color = RED if self.hp <= 25 else BLACK
        surface.blit(font.render(f"HP: {self.hp}", True, color), (50, 50))
        surface.blit(font.render(f"Frags: {self.frags}", True, color), (50, 75))
        half_w = self.rect.width / 2
        half_h = self.rect.height / 2
        pygame.draw.rect(
            surface,
            PLAYER_COLOR,
            pygame.Rect(
                int(self.rect.x - half_w),
                int(self.rect.y - half_h),
                int(self.rect.width),
                int(self.rect.height),
            ),
        )

    def update(
        self,
        tiles: Iterable[Drawable],
        controls: Controls = Controls(),
        now: Optional[float] = None,
    ) -> None:
        """Advance the player by one frame."""
        if now is None:
            now = time.monotonic()
        tiles = list(tiles)
        can_jump_now = self.can_jump and not self.is_jumping

        self.handle_collision(tiles)

        if not self.is_standing:
            self.rect.y += self.speed
        if controls.left:
            self.rect.x -= self.speed
        if controls.right:
            self.rect.x += self.speed

        if controls.attack:
            self.attack(now)
        if controls.jump and can_jump_now:
            self.jump()

        self._apply_fall_damage(now)

    def _apply_fall_damage(self, now: float) -> None:
        if self.rect.y >= config.WINDOW_H:
            if not self.is_falling_below_screen:
                self.is_falling_below_screen = True
                self._next_fall_damage_at = now + FALL_DAMAGE_INTERVAL
            while now >= self._next_fall_damage_at:
                self.deal_damage(FALL_DAMAGE)
                log.debug("Damage. Current hp: %d", self.hp)
                self._next_fall_damage_at += FALL_DAMAGE_INTERVAL
        else:
            self.is_falling_below_screen = False

    def handle_collision(self, tiles: Iterable[Drawable]) -> None:
        """Update the standing and jumping flags from the tiles touched."""
        info = check(self.get_rect(), tiles)
        if not info.is_collided:
            self.reset_collision()
            return
        self.is_standing = info.is_standing
        if info.is_standing:
            self.can_jump = True
            self.is_jumping = False

    def reset_collision(self) -> None:
        self.is_standing = False
        self.can_jump = False

    def deal_damage(self, amount: int) -> None:
        """Lose ``amount`` health, never going below zero."""
        self.hp = max(self.hp - amount, 0)

    def add_frags(self, amount: int) -> None:
        self.frags += amount

    def attack(self, now: Optional[float] = None) -> None:
        """Hit every enemy within the attack radius, unless still attacking."""
        if now is None:
            now = time.monotonic()
        if self.is_attacking and now >= self._attack_ends_at:
            self.is_attacking = False
        if self.is_attacking:
            return
        self.is_attacking = True
        self._attack_ends_at = now + ATTACK_DURATION

        center = (self.rect.x, self.rect.y)
        for enemy in self.enemies:
            if enemy is None:
                continue
            if check_collision_circle_rec(center, self.attack_radius, enemy.rect):
                enemy.apply_damage(self.damage)

    def jump(self) -> None:
        """Rise by the jump height; landing on a tile allows the next jump."""
        self.is_jumping = True
        self.can_jump = False
        self.rect.y -= self.jump_height