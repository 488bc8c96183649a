"""Per-tick frame update.

The order of effects matters: later checks see positions already moved by
earlier ones. One call is one tick; gravity and speed are per-tick values.
"""

import logging
from typing import List

from .controls import Controls, NO_INPUT
from .events import GameEvent, GameEventType
from .geometry import overlaps
from .world import WorldState, Phase

logger = logging.getLogger(__name__)


def update_world(world: WorldState, controls: Controls = NO_INPUT) -> List[GameEvent]:
    """Advance the world by one tick.

    Args:
        world: World to mutate.
        controls: Keys held at the start of this tick.

    Returns:
        Events raised during the tick (at most one terminal event).
    """
    if world.phase is not Phase.PLAYING:
        return []

    player = world.player
    world_config = world.config.world

    # Gravity
    player.vy += world_config.gravity
    player.y += player.vy

    # Ground clamp
    ground = world.ground_line
    if player.bottom >= ground:
        player.y = ground - player.height
        player.vy = 0.0
        player.airborne = False

    # Horizontal movement; both keys held cancel out
    player.vx = (int(controls.right) - int(controls.left)) * player.speed
    player.x += player.vx

    if controls.jump and not player.airborne:
        player.vy = -player.jump_strength
        player.airborne = True

    for obstacle in world.obstacles:
        if overlaps(player, obstacle):
            return [_game_over(world, "obstacle")]

    if player.y > world_config.screen_height:
        return [_game_over(world, "fall")]

    if overlaps(player, world.portal):
        world.phase = Phase.TRANSITIONING
        logger.info("Portal reached on level %d with score %d", world.level, world.score)
        return [GameEvent(GameEventType.LEVEL_TRANSITION_START, world.score, world.level)]

    # Star collection
    remaining = []
    for star in world.stars:
        if overlaps(player, star):
            world.score += world.config.placement.star_value
        else:
            remaining.append(star)
    world.stars = remaining

    # Cull anything scrolled off the left edge
    world.obstacles = [o for o in world.obstacles if o.x > 0]
    world.stars = [s for s in world.stars if s.x > 0]

    return []


def _game_over(world: WorldState, cause: str) -> GameEvent:
    world.phase = Phase.GAME_OVER
    logger.info("Game over (%s) on level %d, score %d", cause, world.level, world.score)
    return GameEvent(GameEventType.GAME_OVER, world.score, world.level)
