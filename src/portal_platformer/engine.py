"""Game engine: loop driver, event dispatch and the level-transition timer.

Coordinates world state, frame update, renderer and pygame input into a
playable game. Each frame is one tick: run due timers, update, dispatch
events, draw.
"""

import logging
import time
from typing import Callable, List, Optional

import pygame

from .config import GameConfig
from .controls import Controls, NO_INPUT
from .events import GameEvent, GameEventType
from .renderer import Renderer
from .scheduler import Scheduler, ScheduledCall
from .update import update_world
from .world import Phase, WorldState

logger = logging.getLogger(__name__)


Listener = Callable[[GameEvent], None]


class PlatformerEngine:
    """Main game engine coordinating all systems.

    Handles:
    - Game loop at the display's frame cadence (one tick per frame)
    - Pygame rendering
    - Keyboard input
    - Level transitions on a cancellable timer

    Hosts react to events either by registering listeners with
    `add_listener` or by overriding the `on_*` hooks.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
        surface: Optional[pygame.Surface] = None,
    ):
        """Initialize game engine.

        Args:
            config: Game configuration. Uses defaults if None.
            seed: Seed for level placement.
            clock: Monotonic time source for the transition timer.
            surface: Draw target. Opens a display window if None.
        """
        self.config = config or GameConfig()

        pygame.init()
        if surface is None:
            self.screen = pygame.display.set_mode(self.config.screen_size)
            pygame.display.set_caption("Portal Platformer")
        else:
            self.screen = surface
        self.clock = pygame.time.Clock()

        self.scheduler = Scheduler(clock)
        self.world = WorldState(self.config, seed=seed)
        self.renderer = Renderer(self.screen, self.config)

        self.running = False
        self.paused = False

        self._listeners: List[Listener] = []
        self._transition_call: Optional[ScheduledCall] = None
        self._tick_events: List[GameEvent] = []

    # ------------------------------------------------------------------
    # Event dispatch
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def on_game_over(self, score: int) -> None:
        logger.info("Game Over! Your score: %d", score)

    def on_level_transition_start(self) -> None:
        logger.info("Entering level %d", self.world.level + 1)

    def on_level_transition_end(self) -> None:
        logger.info("Level %d started", self.world.level)

    def _dispatch(self, event: GameEvent) -> None:
        self._tick_events.append(event)

        if event.type is GameEventType.GAME_OVER:
            self.on_game_over(event.score)
        elif event.type is GameEventType.LEVEL_TRANSITION_START:
            self._schedule_transition()
            self.on_level_transition_start()
        elif event.type is GameEventType.LEVEL_TRANSITION_END:
            self.on_level_transition_end()

        for listener in list(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Level transition
    # ------------------------------------------------------------------

    @property
    def transition_pending(self) -> bool:
        return self._transition_call is not None and self._transition_call.pending

    def _cancel_transition(self) -> None:
        if self._transition_call is not None:
            self._transition_call.cancel()
            self._transition_call = None

    def _schedule_transition(self) -> None:
        # Only one reset may be in flight
        self._cancel_transition()
        self._transition_call = self.scheduler.call_later(
            self.config.world.transition_delay, self._finish_transition
        )

    def _finish_transition(self) -> None:
        self._transition_call = None
        self.world.advance_level()
        self._dispatch(GameEvent(
            GameEventType.LEVEL_TRANSITION_END, self.world.score, self.world.level
        ))

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def restart(self) -> None:
        """Drop any pending transition and start over at level 1."""
        self._cancel_transition()
        self.paused = False
        self.world.restart()

    def tick(self, controls: Controls = NO_INPUT) -> List[GameEvent]:
        """Run one frame: due timers, update, dispatch, draw.

        Returns:
            Events dispatched during this frame.
        """
        self._tick_events = []

        self.scheduler.run_due()

        if not self.paused:
            for event in update_world(self.world, controls):
                self._dispatch(event)

        self.renderer.draw(self.world)
        if self.paused:
            self.renderer.draw_paused()

        return self._tick_events

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    self.restart()
                elif event.key == pygame.K_p and self.world.phase is Phase.PLAYING:
                    self.paused = not self.paused

    def run(self) -> None:
        """Main game loop."""
        self.running = True
        try:
            while self.running:
                self.handle_events()
                self.tick(Controls.from_pressed(pygame.key.get_pressed()))
                pygame.display.flip()
                self.clock.tick(self.config.world.fps)
        finally:
            self.close()

    def close(self) -> None:
        """Cancel pending timers and shut pygame down."""
        self._cancel_transition()
        self.scheduler.cancel_all()
        pygame.quit()

    def get_state(self) -> dict:
        """Get current game state for observation/logging."""
        state = self.world.get_state()
        state["paused"] = self.paused
        state["transition_pending"] = self.transition_pending
        return state
