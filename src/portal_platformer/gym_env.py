"""Gymnasium environment wrapper for the platformer.

Provides the standard Gym API for agents and scripted policies. The
environment steps the same frame update as the engine but skips the
wall-clock transition timer: reaching the portal ends the episode.
"""

import numpy as np
import gymnasium
from gymnasium import spaces
from typing import Optional, Dict, Any

import pygame

from .config import GameConfig
from .controls import Controls
from .renderer import Renderer
from .update import update_world
from .world import WorldState


# Discrete action index -> held keys
ACTIONS = (
    Controls(),                       # 0: noop
    Controls(left=True),              # 1: left
    Controls(right=True),             # 2: right
    Controls(jump=True),              # 3: jump
    Controls(left=True, jump=True),   # 4: left + jump
    Controls(right=True, jump=True),  # 5: right + jump
)

STATE_SIZE = 12


class PortalRunnerEnv(gymnasium.Env):
    """Gymnasium wrapper for the platformer.

    Observation: float32 array of shape (12,):
        [0-1] player position (x, y)
        [2-3] player velocity (vx is the horizontal step of the last tick)
        [4]   player airborne (0/1)
        [5]   horizontal distance to the next obstacle ahead
        [6-7] next obstacle width, height
        [8]   horizontal distance to the nearest star
        [9]   vertical offset of the nearest star (star - player)
        [10]  horizontal distance to the portal
        [11]  score / star value

    Action space: Discrete(6), see ACTIONS.

    Reward = weighted sum of raw signals (stored in info['reward_signals']):
        portal:   1.0 when the portal is reached
        progress: delta_x (rightward movement in pixels)
        star:     number of stars collected this step
        death:    1.0 on game over
        step:     1.0 every step
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        max_episode_steps: int = 1000,
        reward_weights: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.max_episode_steps = max_episode_steps

        self.reward_weights = reward_weights or {
            "portal": 100.0,
            "progress": 0.1,
            "star": 10.0,
            "death": -50.0,
            "step": -0.01,
        }

        self.action_space = spaces.Discrete(len(ACTIONS))
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(STATE_SIZE,), dtype=np.float32,
        )

        # Initialize pygame (caller sets SDL_VIDEODRIVER for headless)
        if not pygame.get_init():
            pygame.init()

        self._display = None
        if render_mode == "human":
            self._display = pygame.display.set_mode(self.config.screen_size)
            pygame.display.set_caption("PortalRunnerEnv")
            self._surface = self._display
        else:
            self._surface = pygame.Surface(self.config.screen_size)
        self._renderer = Renderer(self._surface, self.config)

        self._world: Optional[WorldState] = None
        self._episode_steps = 0
        self._prev_player_x = 0.0
        self._prev_score = 0
        self._level_seed = 0

    @property
    def world(self) -> Optional[WorldState]:
        return self._world

    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)

        self._level_seed = int(self.np_random.integers(0, 2**31))
        self._world = WorldState(self.config, seed=self._level_seed)

        self._episode_steps = 0
        self._prev_player_x = self._world.player.x
        self._prev_score = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        assert self._world is not None, "Must call reset() before step()"

        update_world(self._world, ACTIONS[int(action)])
        self._episode_steps += 1

        reward_signals = self._compute_rewards()
        reward = sum(
            self.reward_weights.get(k, 0.0) * v
            for k, v in reward_signals.items()
        )

        terminated = self._world.game_over or self._world.level_transition
        truncated = self._episode_steps >= self.max_episode_steps

        obs = self._get_obs()
        info = self._get_info()
        info["reward_signals"] = reward_signals

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), bool(terminated), bool(truncated), info

    def _compute_rewards(self):
        world = self._world
        star_value = max(world.config.placement.star_value, 1)

        signals = {
            "progress": world.player.x - self._prev_player_x,
            "star": (world.score - self._prev_score) / star_value,
            "portal": 1.0 if world.level_transition else 0.0,
            "death": 1.0 if world.game_over else 0.0,
            "step": 1.0,
        }
        self._prev_player_x = world.player.x
        self._prev_score = world.score
        return signals

    def _get_obs(self):
        world = self._world
        player = world.player
        state = np.zeros(STATE_SIZE, dtype=np.float32)

        state[0] = player.x
        state[1] = player.y
        state[2] = player.vx
        state[3] = player.vy
        state[4] = float(player.airborne)

        player_right = player.x + player.width
        ahead = [o for o in world.obstacles if o.x + o.width > player.x]
        if ahead:
            nxt = min(ahead, key=lambda o: o.x)
            state[5] = nxt.x - player_right
            state[6] = nxt.width
            state[7] = nxt.height
        else:
            state[5] = world.portal.x - player_right

        if world.stars:
            nearest = min(world.stars, key=lambda s: abs(s.x - player.x))
            state[8] = nearest.x - player.x
            state[9] = nearest.y - player.y

        state[10] = world.portal.x - player_right
        state[11] = world.score / max(world.config.placement.star_value, 1)
        return state

    def _get_info(self):
        world = self._world
        return {
            "score": world.score,
            "level": world.level,
            "episode_steps": self._episode_steps,
            "game_over": world.game_over,
            "portal_reached": world.level_transition,
            "player_position": world.player.position,
            "level_seed": self._level_seed,
            "level_geometry": {
                "obstacles": [o.rect.as_tuple() for o in world.obstacles],
                "stars": [s.rect.as_tuple() for s in world.stars],
                "portal": world.portal.rect.as_tuple(),
            },
        }

    def _render_frame(self):
        """Render current state to numpy array (H, W, 3) uint8."""
        self._renderer.draw(self._world)
        # surfarray gives (W, H, 3); transpose to (H, W, 3)
        array = pygame.surfarray.array3d(self._surface)
        return np.transpose(array, (1, 0, 2)).astype(np.uint8)

    def render(self):
        if self._world is None:
            return None
        if self.render_mode == "rgb_array":
            return self._render_frame()
        elif self.render_mode == "human" and self._display:
            self._renderer.draw(self._world)
            pygame.display.flip()
        return None

    def close(self):
        if self._display:
            pygame.display.quit()
            self._display = None
