"""World state: everything the frame update mutates and the renderer reads.

One WorldState per game instance. Nothing here is module-global, so
several worlds can run side by side and tests can seed each one.
"""

import logging
import random
from enum import Enum, auto
from typing import List, Optional

from .config import GameConfig
from .entities import Player, Obstacle, Star, Portal
from .level_gen import LevelGenerator, LevelLayout

logger = logging.getLogger(__name__)


class Phase(Enum):
    PLAYING = auto()
    GAME_OVER = auto()
    TRANSITIONING = auto()


class WorldState:
    """Player, obstacles, stars, portal, score and camera for one level.

    Args:
        config: Game configuration. Uses defaults if None.
        seed: Seed for the placement random source. Same seed, same levels.
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        self.config = config or GameConfig()
        self.rng = random.Random(seed)
        self.generator = LevelGenerator.from_config(self.config)
        self.portal = Portal.for_world(self.config.world)

        self.level = 1
        self.player = Player.at_start(self.config.player, self.config.world)
        self.obstacles: List[Obstacle] = []
        self.stars: List[Star] = []
        self.score = 0
        self.camera_offset = 0.0
        self.phase = Phase.PLAYING
        self.layout: Optional[LevelLayout] = None

        self.reset()

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def level_transition(self) -> bool:
        return self.phase is Phase.TRANSITIONING

    @property
    def ground_line(self) -> float:
        return self.config.world.ground_line

    def reset(self) -> LevelLayout:
        """Clear the level, put the player back at the start, repopulate.

        Score and flags are cleared. The level number is kept; use
        `advance_level` to move on.
        """
        self.obstacles = []
        self.stars = []
        self.score = 0
        self.camera_offset = 0.0
        self.phase = Phase.PLAYING
        self.player = Player.at_start(self.config.player, self.config.world)

        self.layout = self.generator.generate(self.portal, rng=self.rng)
        self.obstacles = list(self.layout.obstacles)
        self.stars = list(self.layout.stars)

        logger.info("Level %d ready: %d obstacles, %d stars (fill stopped: %s)",
                    self.level, len(self.obstacles), len(self.stars),
                    self.layout.stop_reason)
        return self.layout

    def advance_level(self) -> LevelLayout:
        """Move to the next level number and reset."""
        self.level += 1
        return self.reset()

    def restart(self) -> LevelLayout:
        """Back to level 1."""
        self.level = 1
        return self.reset()

    def get_state(self) -> dict:
        """Snapshot for logging and observation."""
        return {
            "level": self.level,
            "phase": self.phase.name.lower(),
            "score": self.score,
            "player_position": self.player.position,
            "player_velocity": self.player.velocity,
            "player_airborne": self.player.airborne,
            "obstacles": len(self.obstacles),
            "stars": len(self.stars),
        }
