from game.horizon.backdrop import NEBULA_RADIUS_MAX, NEBULA_RADIUS_MIN, Backdrop, FieldStar
from game.horizon.utils import make_rng


def test_field_stars_wrap_to_top():
    backdrop = Backdrop(make_rng(0), 800, 600)
    s = backdrop.stars[0]
    s.y, s.speed = 599.9, 0.5
    backdrop.update(800, 600)
    assert s.y == -5.0
    assert 0 <= s.x <= 800


def test_nebulae_bounce_inside_bounds():
    backdrop = Backdrop(make_rng(0), 800, 600)
    for _ in range(5000):
        backdrop.update(800, 600)
    for n in backdrop.nebulae:
        assert -1 <= n.x <= 801
        assert -1 <= n.y <= 601
        assert NEBULA_RADIUS_MIN - 1 <= n.r <= NEBULA_RADIUS_MAX + 1


def test_twinkle_stays_within_brightness():
    star = FieldStar(x=10, y=10, size=1, speed=0.2, brightness=0.8)
    for frame in range(0, 1000, 37):
        assert 0.8 * 0.4 - 1e-9 <= Backdrop.twinkle(star, frame) <= 0.8 + 1e-9
