import pytest

from game.horizon.entities import (
    Entity,
    EntityKind,
    Explosion,
    Particle,
    advance,
    age_particle,
    is_offscreen,
)


def test_asteroid_and_star_drift_down():
    asteroid = Entity(EntityKind.ASTEROID, 10, 20, 30, 30, speed=2)
    star = Entity(EntityKind.STAR, 10, 20, 15, 15, speed=1.5)
    advance(asteroid)
    advance(star)
    assert asteroid.y == 22
    assert star.y == 21.5


def test_bullet_moves_up():
    bullet = Entity(EntityKind.BULLET, 10, 100, 4, 15, speed=8)
    advance(bullet)
    assert bullet.y == 92


def test_player_has_no_drift():
    player = Entity(EntityKind.PLAYER, 10, 100, 25, 25, speed=8)
    advance(player)
    assert (player.x, player.y) == (10, 100)


@pytest.mark.parametrize("y, gone", [(600, False), (601, True), (-40, False)])
def test_asteroid_despawn_boundary(y, gone):
    asteroid = Entity(EntityKind.ASTEROID, 0, y, 30, 30, speed=1)
    assert is_offscreen(asteroid, 600) is gone


def test_bullet_despawns_once_fully_above_top():
    bullet = Entity(EntityKind.BULLET, 0, -15, 4, 15, speed=8)
    assert not is_offscreen(bullet, 600)  # bottom edge exactly at 0
    bullet.y = -15.5
    assert is_offscreen(bullet, 600)


def test_player_never_offscreen():
    player = Entity(EntityKind.PLAYER, 0, 10_000, 25, 25)
    assert not is_offscreen(player, 600)


def test_entity_geometry():
    e = Entity(EntityKind.STAR, 10, 20, 30, 40)
    assert e.right == 40
    assert e.bottom == 60
    assert e.center == (25, 40)


def test_particle_ages_with_gravity():
    p = Particle(x=0, y=0, vx=1, vy=-1, life=3, max_life=3, size=2, gravity=0.1)
    age_particle(p)
    assert (p.x, p.y) == (1, -1)
    assert p.life == 2
    assert p.vy == pytest.approx(-0.9)
    assert p.alpha == pytest.approx(2 / 3)


def test_explosion_grows_as_it_fades():
    flash = Explosion(x=0, y=0)
    assert flash.scale == pytest.approx(1.0)
    flash.life = 0
    assert flash.alpha == 0
    assert flash.scale == pytest.approx(3.0)
