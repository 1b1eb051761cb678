import pytest

from meermookh import config
from meermookh.aabb import (
    CollisionInfo,
    Rect,
    Side,
    check,
    check_collision_circle_rec,
    check_collision_recs,
    simple_aabb,
)


class Block:
    def __init__(self, rect):
        self.rect = rect

    def draw(self, surface, tileset):
        pass

    def get_rect(self):
        return self.rect


def test_rect_copy_is_independent():
    r = Rect(1, 2, 3, 4)
    c = r.copy()
    c.x = 100
    assert r.x == 1
    assert c == Rect(100, 2, 3, 4)


def test_overlapping_rects_collide():
    assert simple_aabb(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))
    assert check_collision_recs(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))


def test_touching_edges_do_not_collide():
    assert not simple_aabb(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10))
    assert not check_collision_recs(Rect(0, 0, 10, 10), Rect(0, 10, 10, 10))


@pytest.mark.parametrize("a,b", [(None, Rect(0, 0, 1, 1)), (Rect(0, 0, 1, 1), None), (None, None)])
def test_missing_rect_never_collides(a, b):
    assert simple_aabb(a, b) is False


def test_aabb_is_symmetric():
    pairs = [
        (Rect(0, 0, 10, 10), Rect(9, 9, 2, 2)),
        (Rect(0, 0, 10, 10), Rect(20, 0, 5, 5)),
        (Rect(3, 3, 1, 1), Rect(0, 0, 10, 10)),
    ]
    for a, b in pairs:
        assert simple_aabb(a, b) == simple_aabb(b, a)


def test_circle_inside_rect():
    assert check_collision_circle_rec((5, 5), 1, Rect(0, 0, 10, 10))


def test_circle_far_away():
    assert not check_collision_circle_rec((100, 100), 10, Rect(0, 0, 10, 10))


def test_circle_near_corner_uses_distance():
    rect = Rect(0, 0, 10, 10)
    # Diagonal from the corner (10, 10): inside the bounding box but not the circle.
    assert not check_collision_circle_rec((17, 17), 8, rect)
    assert check_collision_circle_rec((15, 15), 8, rect)


def test_no_tiles_means_no_collision():
    assert check(Rect(100, 100, 32, 32), []) == CollisionInfo()


def test_standing_on_tile():
    tile = Block(Rect(100, 130, 32, 32))
    info = check(Rect(100, 100, 32, 32), [tile])
    assert info.is_collided
    assert info.is_standing
    assert info.side is Side.TOP
    assert info.entity is tile


def test_side_hit_from_left():
    tile = Block(Rect(100, 200, 32, 32))
    info = check(Rect(90, 200, 32, 32), [tile])
    assert info.is_collided
    assert not info.is_standing
    assert info.side is Side.LEFT


def test_side_hit_from_right():
    tile = Block(Rect(100, 200, 32, 32))
    info = check(Rect(120, 200, 32, 32), [tile])
    assert info.is_collided
    assert info.side is Side.RIGHT


def test_separate_rect_does_not_collide():
    tile = Block(Rect(300, 300, 32, 32))
    assert not check(Rect(100, 100, 32, 32), [tile]).is_collided


def test_tiles_outside_quarter_are_ignored():
    # The tile overlaps the player but lies wholly in the right half of the window.
    x = config.WINDOW_W // 2 - 10
    tile = Block(Rect(config.WINDOW_W // 2 + 1, 100, 32, 32))
    player = Rect(x, 100, 32, 32)
    assert simple_aabb(player, tile.get_rect())
    assert not check(player, [tile]).is_collided


def test_tile_without_rect_is_skipped():
    info = check(Rect(100, 100, 32, 32), [Block(None)])
    assert info.is_collided is False