"""Enemies that chase the player and hit it when close enough."""

from __future__ import annotations

import math
import time
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Optional, Protocol

import pygame

from meermookh import config
from meermookh.aabb import Drawable, Rect, check, check_collision_circle_rec

RED = (230, 41, 55, 255)
ORANGE = (255, 161, 0, 255)
PINK = (255, 109, 194, 255)


class EnemyAction(str, Enum):
    """What an enemy is currently doing."""

    PATROL = "patrol"
    CHASE = "chase"
    ATTACK = "attack"


class Target(Protocol):
    """Something an enemy can hurt."""

    def deal_damage(self, amount: int) -> None: ...

    def get_rect(self) -> Rect: ...


def _normalized(dx: float, dy: float) -> tuple[float, float]:
    length = math.hypot(dx, dy)
    if length == 0:
        return 0.0, 0.0
    return dx / length, dy / length


class Enemy:
    """A square enemy that falls under gravity and chases a target rectangle."""

    def __init__(self, position: Sequence[float]) -> None:
        x, y = position
        size = config.BASE_TILE_SIZE
        self.rect = Rect(float(x), float(y), size, size)
        self.hp = 100.0
        self.is_standing = False
        self.speed = 2.0
        self.gravity = 5.0
        self.damage = 10
        self.detection_area_radius = 128.0
        self.attack_area_radius = 64.0
        self.color: tuple[int, ...] = RED
        self.state = EnemyAction.CHASE
        self.player_rect: Optional[Rect] = None
        self.player: Optional[Target] = None
        self.is_attacking = False
        self.attack_cooldown = 0.75
        self._attack_ready_at = 0.0

    def __repr__(self) -> str:
        return f"Enemy(rect={self.rect}, hp={self.hp}, state={self.state.value})"

    def draw(self, surface: Any) -> None:
        """Draw the enemy and its detection range onto ``surface``."""
        half_w = self.rect.width / 2
        half_h = self.rect.height / 2
        pygame.draw.rect(
            surface,
            self.color,
            pygame.Rect(
                int(self.rect.x - half_w),
                int(self.rect.y - half_h),
                int(self.rect.width),
                int(self.rect.height),
            ),
        )
        center = (int(self.rect.x), int(self.rect.y))
        if self.state is EnemyAction.CHASE:
            pygame.draw.circle(
                surface, ORANGE, center, int(self.detection_area_radius), 1
            )
            if self.player_rect is not None and check_collision_circle_rec(
                center, self.attack_area_radius, self.player_rect
            ):
                pygame.draw.circle(
                    surface, PINK, center, int(self.attack_area_radius), 1
                )

    def update(self, tiles: Iterable[Drawable], now: Optional[float] = None) -> None:
        """Act according to the current state, then fall unless standing."""
        if now is None:
            now = time.monotonic()
        self._manage_state(now)
        info = check(self.rect, tiles)
        self.is_standing = info.is_standing
        if not info.is_standing:
            self.rect.y += self.gravity

    def attach_player_rect(self, rect: Rect) -> None:
        """Follow ``rect``, which the player keeps moving in place."""
        self.player_rect = rect

    def set_player(self, player: Optional[Target]) -> None:
        self.player = player

    def set_color(self, color: tuple[int, ...]) -> None:
        self.color = color

    def apply_damage(self, damage: float) -> None:
        self.hp -= damage

    def _expire_attack_cooldown(self, now: float) -> None:
        if self.is_attacking and now >= self._attack_ready_at:
            self.is_attacking = False

    def chase_state(self, now: float) -> None:
        """Move toward the player when it is in sight, and hit it when close."""
        self._expire_attack_cooldown(now)
        target = self.player_rect
        if target is None:
            return
        center = (self.rect.x, self.rect.y)
        if not check_collision_circle_rec(center, self.detection_area_radius, target):
            return

        dx, dy = _normalized(target.x - self.rect.x, target.y - self.rect.y)
        self.rect.x += dx * self.speed
        self.rect.y += dy * self.speed

        if not check_collision_circle_rec(center, self.attack_area_radius, target):
            return
        if not self.is_attacking and self.player is not None:
            self.is_attacking = True
            self._attack_ready_at = now + self.attack_cooldown
            self.player.deal_damage(self.damage)

    def patrol_state(self, now: float) -> None:
        """Stay in place; a running attack cooldown still runs out."""
        self._expire_attack_cooldown(now)

    def attack_state(self, now: float) -> None:
        """Hits are dealt while chasing; here only the cooldown runs out."""
        self._expire_attack_cooldown(now)

    def _manage_state(self, now: float) -> None:
        if self.state is EnemyAction.PATROL:
            self.patrol_state(now)
        elif self.state is EnemyAction.CHASE:
            self.chase_state(now)
        elif self.state is EnemyAction.ATTACK:
            self.attack_state(now)