"""Game events that change the player's score."""

from __future__ import annotations

from meermookh.player import Player


def player_killed_enemy(player: Player) -> None:
    """Credit the player with one frag."""
    player.add_frags(1)