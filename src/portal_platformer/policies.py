"""Scripted policies for PortalRunnerEnv.

Each policy takes an observation vector and returns a discrete action
index (see gym_env.ACTIONS).
"""

import numpy as np
from typing import Optional

NOOP, LEFT, RIGHT, JUMP, LEFT_JUMP, RIGHT_JUMP = range(6)


class BasePolicy:
    """Base class for scripted policies."""

    name: str = "base"

    def __call__(self, obs: np.ndarray) -> int:
        return self.act(obs)

    def act(self, obs: np.ndarray) -> int:
        raise NotImplementedError

    def reset(self):
        """Called at the start of each episode."""
        pass


class IdlePolicy(BasePolicy):
    """Never presses anything. Baseline for physics checks."""

    name = "idle"

    def act(self, obs):
        return NOOP


class RandomPolicy(BasePolicy):
    """Uniform random actions each step.

    Broad state coverage, many deaths, good baseline.
    """

    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng or np.random.default_rng()

    def act(self, obs):
        return int(self.rng.integers(0, 6))


class RushPolicy(BasePolicy):
    """Always run right, jump when an obstacle comes within reach.

    Fast completions, collects stars only by accident.
    """

    name = "rush"

    def __init__(self, jump_distance: float = 40.0):
        self.jump_distance = jump_distance

    def act(self, obs):
        airborne = obs[4] > 0.5
        obstacle_dx = obs[5]

        should_jump = not airborne and 0.0 <= obstacle_dx <= self.jump_distance
        return RIGHT_JUMP if should_jump else RIGHT


POLICIES = {
    "idle": IdlePolicy,
    "random": RandomPolicy,
    "rush": RushPolicy,
}
