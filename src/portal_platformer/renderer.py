"""Draws a WorldState onto a pygame surface.

Read-only: the renderer never mutates the world. While a level
transition is in progress only the transition screen is drawn.
"""

from typing import Tuple

import pygame

from .config import GameConfig
from .geometry import Rect
from .world import WorldState


# Colors (RGB)
COLOR_SKY = (135, 206, 235)
COLOR_GROUND = (34, 139, 34)
COLOR_TEXT = (0, 0, 0)
COLOR_TRANSITION_BG = (0, 0, 0)
COLOR_TRANSITION_TEXT = (255, 255, 255)
COLOR_GAME_OVER = (224, 108, 117)


class Renderer:
    """Solid-shape renderer for the platformer.

    Args:
        surface: Target surface, usually the display or an offscreen Surface.
        config: Game configuration (screen and ground geometry).
    """

    def __init__(self, surface: pygame.Surface, config: GameConfig):
        self.surface = surface
        self.config = config
        if not pygame.font.get_init():
            pygame.font.init()
        self._hud_font = pygame.font.Font(None, 28)
        self._title_font = pygame.font.Font(None, 64)

    def _to_screen(self, x: float, y: float, camera_offset: float) -> Tuple[int, int]:
        return int(x - camera_offset), int(y)

    def _screen_rect(self, rect: Rect, camera_offset: float) -> Tuple[int, int, int, int]:
        shifted = rect.offset(-camera_offset)
        return int(shifted.x), int(shifted.y), int(shifted.width), int(shifted.height)

    def draw(self, world: WorldState) -> None:
        """Draw the current frame."""
        if world.level_transition:
            self.draw_transition(world.level + 1)
            return

        width, height = self.config.screen_size
        ground_line = self.config.world.ground_line
        cam = world.camera_offset

        self.surface.fill(COLOR_SKY)

        # Ground band is fixed to the screen
        pygame.draw.rect(
            self.surface, COLOR_GROUND,
            (0, int(ground_line), width, height - int(ground_line)),
        )

        portal = world.portal
        pygame.draw.rect(self.surface, portal.color, self._screen_rect(portal.rect, cam))

        for obstacle in world.obstacles:
            pygame.draw.rect(self.surface, obstacle.color, self._screen_rect(obstacle.rect, cam))

        # Stars are circles inscribed in their hitbox
        for star in world.stars:
            cx, cy = star.center
            sx, sy = self._to_screen(cx, cy, cam)
            pygame.draw.circle(self.surface, star.color, (sx, sy), max(1, int(star.size / 2)))

        player = world.player
        pygame.draw.rect(self.surface, player.color, self._screen_rect(player.rect, cam))

        score_surface = self._hud_font.render(f"Score: {world.score}", True, COLOR_TEXT)
        self.surface.blit(score_surface, (20, 20))

        if world.game_over:
            self.draw_game_over(world.score)

    def draw_transition(self, level: int) -> None:
        """Black screen with the upcoming level label."""
        self.surface.fill(COLOR_TRANSITION_BG)
        self._draw_centered(f"LEVEL {level}", COLOR_TRANSITION_TEXT)

    def draw_game_over(self, score: int) -> None:
        self._draw_centered(f"GAME OVER! Score: {score}  (R to restart)", COLOR_GAME_OVER)

    def draw_paused(self) -> None:
        self._draw_centered("PAUSED", COLOR_TEXT)

    def _draw_centered(self, text: str, color) -> None:
        text_surface = self._title_font.render(text, True, color)
        width, height = self.config.screen_size
        text_rect = text_surface.get_rect(center=(width // 2, height // 2))
        self.surface.blit(text_surface, text_rect)
