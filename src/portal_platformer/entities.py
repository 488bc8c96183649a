"""Game entities: Player, obstacles, stars, portal.

Every entity exposes a `rect` so collision checks treat them uniformly.
Obstacles, stars and the portal are immutable once placed; only the
player moves.
"""

from dataclasses import dataclass
from typing import Tuple

from .config import PlayerConfig, WorldConfig
from .geometry import Rect


Color = Tuple[int, int, int]

# Visual tags (RGB)
COLOR_PLAYER: Color = (0, 0, 255)
COLOR_OBSTACLE: Color = (255, 0, 0)
COLOR_STAR: Color = (255, 215, 0)
COLOR_PORTAL: Color = (128, 0, 128)


@dataclass
class Player:
    """Player with per-tick velocity and an airborne flag."""
    x: float
    y: float
    width: float = 50.0
    height: float = 50.0
    vx: float = 0.0
    vy: float = 0.0
    speed: float = 5.0
    jump_strength: float = 18.0
    airborne: bool = False
    color: Color = COLOR_PLAYER

    @classmethod
    def at_start(cls, player: PlayerConfig, world: WorldConfig) -> "Player":
        """Create a player standing on the ground at the configured start."""
        return cls(
            x=player.start_x,
            y=world.ground_line - player.height,
            width=player.width,
            height=player.height,
            speed=player.speed,
            jump_strength=player.jump_strength,
        )

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def position(self) -> Tuple[float, float]:
        """Current position (x, y)."""
        return self.x, self.y

    @property
    def velocity(self) -> Tuple[float, float]:
        """Current velocity (vx, vy)."""
        return self.vx, self.vy


@dataclass(frozen=True)
class Obstacle:
    """Ground obstacle. Touching one ends the game."""
    x: float
    y: float
    width: float
    height: float
    color: Color = COLOR_OBSTACLE

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Star:
    """Collectible star, a square hitbox of side `size`."""
    x: float
    y: float
    size: float = 15.0
    color: Color = COLOR_STAR

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.size, self.size)

    @property
    def center(self) -> Tuple[float, float]:
        half = self.size / 2
        return self.x + half, self.y + half


@dataclass(frozen=True)
class Portal:
    """End-of-level trigger."""
    x: float
    y: float
    width: float = 80.0
    height: float = 100.0
    color: Color = COLOR_PORTAL

    @classmethod
    def for_world(cls, world: WorldConfig) -> "Portal":
        """Portal near the right edge, raised above the ground line."""
        return cls(
            x=world.portal_x,
            y=world.ground_line - world.portal_lift,
            width=world.portal_width,
            height=world.portal_height,
        )

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)
