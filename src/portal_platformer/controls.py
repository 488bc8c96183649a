"""Keyboard snapshot consumed by the frame update."""

from dataclasses import dataclass
from typing import Sequence

import pygame


LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)


@dataclass(frozen=True)
class Controls:
    """Which logical keys are held at the start of a tick."""
    left: bool = False
    right: bool = False
    jump: bool = False

    @classmethod
    def from_pressed(cls, pressed: Sequence[bool]) -> "Controls":
        """Build from `pygame.key.get_pressed()` or any key-indexed sequence."""
        return cls(
            left=any(pressed[k] for k in LEFT_KEYS),
            right=any(pressed[k] for k in RIGHT_KEYS),
            jump=any(pressed[k] for k in JUMP_KEYS),
        )


NO_INPUT = Controls()
