"""
Game configuration for Dark Horizon
Tunables grouped by section, plus the scoring variants
"""

from dataclasses import dataclass, fields, replace

# ==============================================================================
# VIEWPORT / TIMING
# ==============================================================================

VIEW_CONFIG = {
    "width": 800,
    "height": 600,
    "fps": 60,
}

# ==============================================================================
# ENTITY TUNABLES
# ==============================================================================

PLAYER_CONFIG = {
    "player_size": 25.0,
    "player_speed": 8.0,
    "player_spawn_y_offset": 100.0,  # distance from the bottom edge
    "pointer_smoothing": 0.1,
}

ASTEROID_CONFIG = {
    "asteroid_min_size": 25.0,
    "asteroid_size_variation": 25.0,
    "asteroid_spawn_y": -40.0,
    "asteroid_margin": 40.0,
    "asteroid_speed_desktop": 1.2,
    "asteroid_speed_mobile": 0.2,
    "asteroid_speed_variation": 2.0,
}

STAR_CONFIG = {
    "star_min_size": 15.0,
    "star_size_variation": 15.0,
    "star_spawn_y": -20.0,
    "star_margin": 20.0,
    "star_speed": 1.0,
}

BULLET_CONFIG = {
    "bullet_width": 4.0,
    "bullet_height": 15.0,
    "bullet_speed": 8.0,
    "bullet_spawn_offset": -2.0,
    "shot_cooldown_ms": 200.0,
}

# ==============================================================================
# SPAWN / SCORING
# ==============================================================================

GAME_CONFIG = {
    "asteroid_spawn_rate": 0.02,  # probability per tick
    "star_spawn_rate": 0.01,
    "asteroid_points": 10,
    "star_points": 20,
}

# Point weighting differs between the two game variants. "classic" is the
# default; "voyager" keeps the inverse weighting.
VARIANT_CONFIGS = {
    "classic": {
        "name": "classic",
        "description": "Asteroids worth 10, stars worth 20",
        "asteroid_points": 10,
        "star_points": 20,
    },
    "voyager": {
        "name": "voyager",
        "description": "Asteroids worth 20, stars worth 10",
        "asteroid_points": 20,
        "star_points": 10,
    },
}

# ==============================================================================
# AGENT INTERFACE
# ==============================================================================

ENV_CONFIG = {
    "max_steps": 3600,  # 60s at 60 FPS
    "k_asteroids": 5,
    "m_stars": 3,
    "death_penalty": 50.0,
}


@dataclass(frozen=True)
class GameConfig:
    """Resolved, immutable set of tunables for one session"""
    width: float = 800
    height: float = 600
    fps: int = 60

    player_size: float = 25.0
    player_speed: float = 8.0
    player_spawn_y_offset: float = 100.0
    pointer_smoothing: float = 0.1

    asteroid_min_size: float = 25.0
    asteroid_size_variation: float = 25.0
    asteroid_spawn_y: float = -40.0
    asteroid_margin: float = 40.0
    asteroid_speed_desktop: float = 1.2
    asteroid_speed_mobile: float = 0.2
    asteroid_speed_variation: float = 2.0

    star_min_size: float = 15.0
    star_size_variation: float = 15.0
    star_spawn_y: float = -20.0
    star_margin: float = 20.0
    star_speed: float = 1.0

    bullet_width: float = 4.0
    bullet_height: float = 15.0
    bullet_speed: float = 8.0
    bullet_spawn_offset: float = -2.0
    shot_cooldown_ms: float = 200.0

    asteroid_spawn_rate: float = 0.02
    star_spawn_rate: float = 0.01
    asteroid_points: int = 10
    star_points: int = 20

    is_mobile: bool = False
    variant: str = "classic"

    @property
    def asteroid_base_speed(self) -> float:
        return self.asteroid_speed_mobile if self.is_mobile else self.asteroid_speed_desktop

    def with_overrides(self, **overrides) -> "GameConfig":
        return replace(self, **overrides)


def make_config(variant: str = "classic", is_mobile: bool = False, **overrides) -> GameConfig:
    """
    Build a GameConfig from the section dicts, a scoring variant and overrides.
    Unknown keys in the section dicts are ignored.
    """
    if variant not in VARIANT_CONFIGS:
        raise ValueError(f"Unknown variant: {variant}")

    known = {f.name for f in fields(GameConfig)}
    params = {}
    for section in (VIEW_CONFIG, PLAYER_CONFIG, ASTEROID_CONFIG, STAR_CONFIG,
                    BULLET_CONFIG, GAME_CONFIG, VARIANT_CONFIGS[variant]):
        params.update({k: v for k, v in section.items() if k in known})
    params.update(overrides)
    params["variant"] = variant
    params["is_mobile"] = is_mobile
    return GameConfig(**params)


if __name__ == "__main__":
    for name, variant in VARIANT_CONFIGS.items():
        cfg = make_config(name)
        print(f"  {name:10} | {variant['description']:35} | "
              f"asteroid speed {cfg.asteroid_base_speed} (desktop) / "
              f"{make_config(name, is_mobile=True).asteroid_base_speed} (mobile)")
