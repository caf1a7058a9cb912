import numpy as np

from game.horizon.config import make_config
from game.horizon.entities import Entity, EntityKind
from game.horizon.env import HorizonEnv


def quiet_env(**kwargs):
    return HorizonEnv(config=make_config(asteroid_spawn_rate=0.0, star_spawn_rate=0.0), **kwargs)


def test_reset_returns_bounded_observation():
    env = HorizonEnv()
    obs, info = env.reset(seed=3)
    assert obs.shape == env.observation_space.shape
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0


def test_step_moves_player_and_shoots():
    env = quiet_env()
    env.reset(seed=0)
    x0 = env.session.player.x
    obs, reward, terminated, truncated, info = env.step(np.array([4, 1]))
    assert env.session.player.x == x0 + 8
    assert info["num_bullets"] == 1
    assert reward == 0.0
    assert not terminated and not truncated


def test_shot_cooldown_follows_simulated_clock():
    env = quiet_env()
    env.reset(seed=0)
    bullets = 0
    for _ in range(24):  # 24 frames at 60 FPS is 400ms
        _, _, _, _, info = env.step(np.array([0, 1]))
        bullets = max(bullets, info["num_bullets"])
    # one shot per 200ms: two fit in 400ms and the first is still on screen
    assert bullets == 2


def test_asteroid_on_player_terminates_with_penalty():
    env = quiet_env(death_penalty=50.0)
    env.reset(seed=0)
    p = env.session.player
    env.session.asteroids.append(Entity(EntityKind.ASTEROID, p.x, p.y, 30, 30, 0.0))
    _, reward, terminated, _, _ = env.step(np.array([0, 0]))
    assert terminated
    assert reward == -50.0


def test_star_pickup_rewards_points():
    env = quiet_env()
    env.reset(seed=0)
    p = env.session.player
    env.session.stars.append(Entity(EntityKind.STAR, p.x, p.y, 15, 15, 0.0))
    _, reward, _, _, info = env.step(np.array([0, 0]))
    assert reward == 20.0
    assert info["stars_collected"] == 1


def test_truncates_at_max_steps():
    env = quiet_env(max_steps=3)
    env.reset(seed=0)
    truncated = False
    for _ in range(3):
        _, _, _, truncated, _ = env.step(np.array([0, 0]))
    assert truncated


def test_nearest_asteroids_in_observation():
    env = quiet_env(k_asteroids=2, m_stars=1)
    env.reset(seed=0)
    p = env.session.player
    env.session.asteroids.append(Entity(EntityKind.ASTEROID, p.x, p.y - 200, 25, 25, 0.0))
    obs, *_ = env.step(np.array([0, 0]))
    # player(2) + ready(1), then the nearest asteroid's relative centre
    assert obs[3] == 0.0
    assert obs[4] < 0  # above the player
    assert (obs[5], obs[6]) == (0.0, 0.0)  # second slot empty
