"""Procedural placement of obstacles and stars.

Placement is rejection sampling: draw a candidate, reject it if it lands
past the portal or overlaps something already placed, retry up to a fixed
bound. A placement call that runs out of attempts returns None and the
caller moves on. Filling a level is bounded as well, so geometry that
leaves no valid slot yields a shorter obstacle field instead of a stall.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import GameConfig, PlayerConfig, WorldConfig, PlacementConfig, check_range
from .entities import Obstacle, Star, Portal
from .geometry import Rect, any_overlap, overlaps

logger = logging.getLogger(__name__)


# Why the obstacle fill loop stopped
STOP_CLEARANCE = "clearance"  # Last obstacle reached the portal clearance zone
STOP_NO_SLOT = "no_slot"  # Minimum gap from the last obstacle already passes the portal
STOP_ATTEMPT_CAP = "attempt_cap"  # max_fill_attempts used up


@dataclass
class LevelLayout:
    """Result of populating a level."""
    obstacles: List[Obstacle] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)

    # Metadata for analysis
    fill_attempts: int = 0
    obstacle_misses: int = 0
    star_misses: int = 0
    stop_reason: str = STOP_CLEARANCE


def _uniform(rng: random.Random, low: float, high: float) -> float:
    """Sample from the half-open range [low, high)."""
    return low + rng.random() * (high - low)


class LevelGenerator:
    """Places obstacles on the ground and stars in a band above it.

    Obstacles are chained left to right: each one sits a random gap (a
    multiple of the player's width) past the previous one. Stars are
    scattered at random ahead of the player.
    """

    def __init__(
        self,
        player: PlayerConfig,
        world: WorldConfig,
        placement: PlacementConfig,
    ):
        self.player = player
        self.world = world
        self.placement = placement

        check_range("obstacle_size_range", *placement.obstacle_size_range)
        check_range("star_offset_range", *placement.star_offset_range)

        self.min_gap = player.width * placement.min_gap_factor
        self.max_gap = player.width * placement.max_gap_factor
        check_range("obstacle gap", self.min_gap, self.max_gap)

    @property
    def ground_line(self) -> float:
        return self.world.ground_line

    def place_obstacle(
        self,
        obstacles: Sequence[Obstacle],
        portal: Portal,
        rng: random.Random,
        stars: Sequence[Star] = (),
        player_x: Optional[float] = None,
    ) -> Optional[Obstacle]:
        """Try to place one obstacle after the last existing one.

        Args:
            obstacles: Obstacles already placed, in placement order.
            portal: The level's portal. Candidates must start left of it.
            rng: Random source.
            stars: Stars already placed; candidates may not overlap them.
            player_x: Reference x for the first obstacle. Defaults to the
                configured player start.

        Returns:
            The new obstacle, or None if every attempt was rejected.
        """
        if player_x is None:
            player_x = self.player.start_x
        low, high = self.placement.obstacle_size_range

        for _ in range(self.placement.obstacle_attempts):
            width = _uniform(rng, low, high)
            height = _uniform(rng, low, high)
            if obstacles:
                x = obstacles[-1].x + _uniform(rng, self.min_gap, self.max_gap)
            else:
                x = player_x + self.placement.first_obstacle_offset
            y = self.ground_line - height

            candidate = Rect(x, y, width, height)
            if x < portal.x and not self._blocked(candidate, obstacles, stars, portal):
                return Obstacle(x, y, width, height)

        return None

    def place_star(
        self,
        stars: Sequence[Star],
        portal: Portal,
        rng: random.Random,
        obstacles: Sequence[Obstacle] = (),
        player_x: Optional[float] = None,
    ) -> Optional[Star]:
        """Try to place one star ahead of the player.

        Stars may not overlap other stars, obstacles or the portal.

        Returns:
            The new star, or None if every attempt was rejected.
        """
        if player_x is None:
            player_x = self.player.start_x
        near, far = self.placement.star_offset_range
        size = self.placement.star_size

        for _ in range(self.placement.star_attempts):
            x = player_x + _uniform(rng, near, far)
            y = (self.ground_line - self.placement.star_base_height
                 - _uniform(rng, 0.0, self.placement.star_band))

            candidate = Rect(x, y, size, size)
            if x < portal.x and not self._blocked(candidate, obstacles, stars, portal):
                return Star(x, y, size)

        return None

    def _blocked(self, candidate: Rect, obstacles, stars, portal: Portal) -> bool:
        return (
            any_overlap(candidate, obstacles)
            or any_overlap(candidate, stars)
            or overlaps(candidate, portal)
        )

    def generate(
        self,
        portal: Portal,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> LevelLayout:
        """Populate a level: obstacles up to the portal, then stars.

        Args:
            portal: The level's portal.
            rng: Random source. A fresh one seeded with `seed` if None.
            seed: Seed used only when `rng` is None.

        Returns:
            LevelLayout with the placed entities and fill statistics.
        """
        if rng is None:
            rng = random.Random(seed)

        layout = LevelLayout()
        self._fill_obstacles(layout, portal, rng)

        for _ in range(self.placement.star_count):
            star = self.place_star(layout.stars, portal, rng, obstacles=layout.obstacles)
            if star is None:
                layout.star_misses += 1
                logger.debug("Star placement exhausted %d attempts",
                             self.placement.star_attempts)
            else:
                layout.stars.append(star)

        return layout

    def _fill_obstacles(self, layout: LevelLayout, portal: Portal, rng: random.Random) -> None:
        clearance = portal.x - self.player.width * self.placement.portal_clearance_factor
        obstacles = layout.obstacles

        while True:
            if obstacles:
                last = obstacles[-1]
                if last.x >= clearance:
                    layout.stop_reason = STOP_CLEARANCE
                    return
                if last.x + self.min_gap >= portal.x:
                    layout.stop_reason = STOP_NO_SLOT
                    logger.debug("No obstacle slot left after x=%.1f", last.x)
                    return
            if layout.fill_attempts >= self.placement.max_fill_attempts:
                layout.stop_reason = STOP_ATTEMPT_CAP
                logger.debug("Obstacle fill hit the cap of %d attempts with %d placed",
                             layout.fill_attempts, len(obstacles))
                return

            layout.fill_attempts += 1
            obstacle = self.place_obstacle(obstacles, portal, rng, stars=layout.stars)
            if obstacle is None:
                layout.obstacle_misses += 1
                logger.debug("Obstacle placement exhausted %d attempts",
                             self.placement.obstacle_attempts)
            else:
                obstacles.append(obstacle)

    @classmethod
    def from_config(cls, config: GameConfig) -> "LevelGenerator":
        """Create generator from full game config."""
        return cls(
            player=config.player,
            world=config.world,
            placement=config.placement,
        )
