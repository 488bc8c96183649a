"""Configuration system for the portal platformer.

Three parameter groups, each a plain dataclass:
- PlayerConfig: start position offset, size, per-tick movement constants
- WorldConfig: screen, ground band, gravity, portal geometry, timing
- PlacementConfig: random ranges and retry bounds for procedural placement

All physics constants are per tick. The loop advances one tick per frame
regardless of wall time, so these values assume the configured fps (60).
"""

import math
from dataclasses import dataclass, field, fields, asdict
from typing import Tuple, Dict, Any


class ConfigError(ValueError):
    """Raised when a configuration value is unusable."""


def check_range(name: str, low: float, high: float) -> None:
    """Validate a sampling range [low, high).

    Rejects NaN bounds, negative bounds and inverted ranges.
    """
    if math.isnan(low) or math.isnan(high):
        raise ConfigError(f"{name}: range ({low}, {high}) contains NaN")
    if low < 0 or high < 0:
        raise ConfigError(f"{name}: range ({low}, {high}) is negative")
    if high < low:
        raise ConfigError(f"{name}: range ({low}, {high}) is inverted")


def _check_positive(name: str, value: float) -> None:
    if math.isnan(value) or value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")


def _check_non_negative(name: str, value: float) -> None:
    if math.isnan(value) or value < 0:
        raise ConfigError(f"{name} must be non-negative, got {value}")


@dataclass
class PlayerConfig:
    """Player size and movement, in pixels and pixels per tick."""

    start_x: float = 200.0
    width: float = 50.0
    height: float = 50.0
    speed: float = 5.0  # Horizontal step per tick while a direction key is held
    jump_strength: float = 18.0  # Upward velocity applied on jump

    def __post_init__(self):
        _check_non_negative("start_x", self.start_x)
        _check_positive("width", self.width)
        _check_positive("height", self.height)
        _check_non_negative("speed", self.speed)
        _check_non_negative("jump_strength", self.jump_strength)


@dataclass
class WorldConfig:
    """Screen, ground band, gravity and portal geometry."""

    screen_width: int = 1280
    screen_height: int = 720
    ground_height: float = 100.0  # Thickness of the ground band at the bottom
    gravity: float = 0.6  # Added to vy every tick

    portal_width: float = 80.0
    portal_height: float = 100.0
    portal_inset: float = 100.0  # Portal x = screen_width - portal_inset
    portal_lift: float = 80.0  # Portal top = ground_line - portal_lift

    transition_delay: float = 3.0  # Seconds the level screen stays up
    fps: int = 60

    def __post_init__(self):
        _check_positive("screen_width", self.screen_width)
        _check_positive("screen_height", self.screen_height)
        _check_non_negative("ground_height", self.ground_height)
        if self.ground_height >= self.screen_height:
            raise ConfigError(
                f"ground_height {self.ground_height} leaves no room on a "
                f"{self.screen_height}px screen"
            )
        _check_non_negative("gravity", self.gravity)
        _check_positive("portal_width", self.portal_width)
        _check_positive("portal_height", self.portal_height)
        _check_non_negative("portal_inset", self.portal_inset)
        _check_non_negative("portal_lift", self.portal_lift)
        if self.portal_inset >= self.screen_width:
            raise ConfigError(
                f"portal_inset {self.portal_inset} puts the portal off a "
                f"{self.screen_width}px screen"
            )
        _check_non_negative("transition_delay", self.transition_delay)
        _check_positive("fps", self.fps)

    @property
    def ground_line(self) -> float:
        """y-coordinate of the top of the ground band."""
        return self.screen_height - self.ground_height

    @property
    def portal_x(self) -> float:
        """x-coordinate of the portal's left edge."""
        return self.screen_width - self.portal_inset


@dataclass
class PlacementConfig:
    """Random ranges and retry bounds for obstacle and star placement.

    Ranges are half-open [low, high). Gap multipliers scale with the
    player's width.
    """

    obstacle_size_range: Tuple[float, float] = (30.0, 80.0)
    min_gap_factor: float = 3.0
    max_gap_factor: float = 6.0
    first_obstacle_offset: float = 300.0  # From the player's start x
    obstacle_attempts: int = 10
    portal_clearance_factor: float = 2.0  # Fill stops within this many player widths of the portal
    max_fill_attempts: int = 100  # Total place_obstacle calls per level

    star_offset_range: Tuple[float, float] = (300.0, 900.0)
    star_base_height: float = 70.0  # Lowest star sits this far above the ground line
    star_band: float = 150.0  # Vertical spread above star_base_height
    star_size: float = 15.0
    star_attempts: int = 20
    star_count: int = 5
    star_value: int = 100

    def __post_init__(self):
        # JSON round trips turn tuples into lists
        self.obstacle_size_range = tuple(self.obstacle_size_range)
        self.star_offset_range = tuple(self.star_offset_range)

        check_range("obstacle_size_range", *self.obstacle_size_range)
        check_range("star_offset_range", *self.star_offset_range)
        check_range("gap factors", self.min_gap_factor, self.max_gap_factor)
        _check_positive("star_size", self.star_size)
        _check_non_negative("star_base_height", self.star_base_height)
        _check_non_negative("star_band", self.star_band)
        for name in ("obstacle_attempts", "star_attempts", "max_fill_attempts"):
            _check_positive(name, getattr(self, name))
        _check_non_negative("star_count", self.star_count)
        _check_non_negative("star_value", self.star_value)


@dataclass
class GameConfig:
    """Complete game configuration combining all parameter groups."""
    player: PlayerConfig = field(default_factory=PlayerConfig)
    world: WorldConfig = field(default_factory=WorldConfig)
    placement: PlacementConfig = field(default_factory=PlacementConfig)

    def __post_init__(self):
        # The player must start clear of the portal
        start_right = self.player.start_x + self.player.width
        if self.world.portal_x <= start_right:
            raise ConfigError(
                f"portal at x={self.world.portal_x} overlaps the player start "
                f"(right edge {start_right})"
            )

    @property
    def screen_size(self) -> Tuple[int, int]:
        return self.world.screen_width, self.world.screen_height

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary."""
        return {
            "player": asdict(self.player),
            "world": asdict(self.world),
            "placement": asdict(self.placement),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameConfig":
        """Create from a nested dictionary; unknown keys are ignored."""
        def build(dc_cls, values):
            known = {f.name for f in fields(dc_cls)}
            return dc_cls(**{k: v for k, v in (values or {}).items() if k in known})

        return cls(
            player=build(PlayerConfig, d.get("player")),
            world=build(WorldConfig, d.get("world")),
            placement=build(PlacementConfig, d.get("placement")),
        )


# Predefined configurations for play and testing
CONFIGS = {
    # Original feel
    "default": GameConfig(),

    # Low gravity, long hang time
    "moon": GameConfig(
        world=WorldConfig(gravity=0.25),
        player=PlayerConfig(jump_strength=11.0),
    ),

    # Strong gravity, short hops
    "heavy": GameConfig(
        world=WorldConfig(gravity=1.1),
        player=PlayerConfig(jump_strength=22.0, speed=6.0),
    ),

    # Wide gaps, few stars
    "sparse": GameConfig(
        placement=PlacementConfig(min_gap_factor=5.0, max_gap_factor=8.0, star_count=3),
    ),
}
