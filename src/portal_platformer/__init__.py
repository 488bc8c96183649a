"""portal-platformer: 2D side-scroller with procedural obstacles, stars and a portal.

The player runs and jumps across ground obstacles placed by rejection
sampling, collects stars for points, and enters a portal to move on to the
next level. World state is an explicit object, the frame update returns
events instead of blocking, and level transitions run on a cancellable
timer. A Gymnasium environment exposes the same update to agents.
"""

from .config import PlayerConfig, WorldConfig, PlacementConfig, GameConfig, ConfigError, CONFIGS
from .geometry import Rect, overlaps, any_overlap
from .entities import Player, Obstacle, Star, Portal
from .level_gen import LevelGenerator, LevelLayout
from .world import WorldState, Phase
from .events import GameEvent, GameEventType
from .controls import Controls
from .update import update_world
from .scheduler import Scheduler, ScheduledCall

__all__ = [
    "PlayerConfig",
    "WorldConfig",
    "PlacementConfig",
    "GameConfig",
    "ConfigError",
    "CONFIGS",
    "Rect",
    "overlaps",
    "any_overlap",
    "Player",
    "Obstacle",
    "Star",
    "Portal",
    "LevelGenerator",
    "LevelLayout",
    "WorldState",
    "Phase",
    "GameEvent",
    "GameEventType",
    "Controls",
    "update_world",
    "Scheduler",
    "ScheduledCall",
]
