"""Game events surfaced to the presentation layer.

The frame update never blocks or alerts. It returns events and the host
decides how to show them.
"""

from dataclasses import dataclass
from enum import Enum, auto


class GameEventType(Enum):
    GAME_OVER = auto()
    LEVEL_TRANSITION_START = auto()
    LEVEL_TRANSITION_END = auto()


@dataclass(frozen=True)
class GameEvent:
    """Something the host should react to."""
    type: GameEventType
    score: int = 0
    level: int = 1
