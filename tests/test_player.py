from meermookh import config
from meermookh.enemies import Enemy
from meermookh.player import Controls, Player
from meermookh.tile import Tile


class FakeFont:
    def __init__(self):
        self.calls = []

    def render(self, text, antialias, color):
        import pygame

        self.calls.append((text, color))
        return pygame.Surface((1, 1))


def ground_for(player):
    return [Tile((player.rect.x, player.rect.y + 32), 1)]


def test_deal_damage_clamps_at_zero():
    player = Player((100, 700))
    player.deal_damage(1000)
    assert player.hp == 0


def test_add_frags_accumulates():
    player = Player((100, 700))
    player.add_frags(1)
    player.add_frags(2)
    assert player.frags == 3


def test_falls_and_moves_left():
    player = Player((100, 100))
    player.update([], Controls(left=True), now=0.0)
    assert player.rect.y == 100 + player.speed
    assert player.rect.x == 100 - player.speed


def test_handle_collision_standing():
    player = Player((100, 100))
    player.handle_collision(ground_for(player))
    assert player.is_standing is True
    assert player.can_jump is True


def test_reset_collision():
    player = Player((100, 100))
    player.handle_collision(ground_for(player))
    player.reset_collision()
    assert player.is_standing is False
    assert player.can_jump is False


def test_no_collision_resets_flags():
    player = Player((100, 100))
    player.handle_collision(ground_for(player))
    player.handle_collision([])
    assert (player.is_standing, player.can_jump) == (False, False)


def test_jump_after_landing():
    player = Player((100, 100))
    tiles = ground_for(player)
    player.update(tiles, Controls(jump=True), now=0.0)
    assert player.rect.y == 100
    player.update(tiles, Controls(jump=True), now=0.1)
    assert player.rect.y == 100 - player.jump_height
    assert player.is_jumping is True
    assert player.can_jump is False


def test_attack_hits_only_near_enemies_with_cooldown():
    near = Enemy((120, 100))
    far = Enemy((600, 100))
    player = Player((100, 100), [near, far])
    player.attack(0.0)
    assert near.hp == 100 - player.damage
    assert far.hp == 100
    player.attack(0.1)
    assert near.hp == 100 - player.damage
    player.attack(0.5)
    assert near.hp == 100 - 2 * player.damage


def test_attack_from_controls():
    enemy = Enemy((120, 100))
    player = Player((100, 100), [enemy])
    player.update(ground_for(player), Controls(attack=True), now=0.0)
    assert enemy.hp == 100 - player.damage


def test_fall_damage_below_screen_and_stops():
    player = Player((100, config.WINDOW_H))
    player.update([], now=0.0)
    assert player.hp == 100
    assert player.is_falling_below_screen is True
    player.update([], now=0.2)
    hurt = player.hp
    assert hurt < 100
    player.rect.y = 100
    player.update([], now=1.0)
    assert player.is_falling_below_screen is False
    assert player.hp == hurt


def test_draw_shows_counters():
    import pygame

    surface = pygame.Surface((300, 300))
    font = FakeFont()
    player = Player((100, 100))
    player.draw(surface, font)
    assert [text for text, _ in font.calls] == ["HP: 100", "Frags: 0"]
    assert surface.get_at((90, 90)) == (128, 128, 128, 255)


def test_draw_low_hp_uses_other_color():
    import pygame

    surface = pygame.Surface((300, 300))
    font = FakeFont()
    player = Player((100, 100))
    player.draw(surface, font)
    healthy_color = font.calls[0][1]
    player.deal_damage(80)
    player.draw(surface, font)
    assert font.calls[2][1] != healthy_color
    assert font.calls[2][0] == "HP: 20"