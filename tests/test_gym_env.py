"""Tests for Gymnasium environment wrapper."""

import numpy as np
import pytest

from portal_platformer.config import GameConfig, WorldConfig
from portal_platformer.entities import Obstacle
from portal_platformer.gym_env import PortalRunnerEnv, ACTIONS, STATE_SIZE
from portal_platformer.policies import NOOP, RIGHT, JUMP


@pytest.fixture
def env():
    e = PortalRunnerEnv(max_episode_steps=200)
    yield e
    e.close()


class TestPortalRunnerEnvCreation:
    def test_spaces(self, env):
        assert env.action_space.n == len(ACTIONS) == 6
        assert env.observation_space.shape == (STATE_SIZE,)

    def test_create_with_config(self):
        config = GameConfig(world=WorldConfig(gravity=0.3))
        env = PortalRunnerEnv(config=config)
        assert env.config.world.gravity == 0.3
        env.close()

    def test_custom_max_steps(self):
        env = PortalRunnerEnv(max_episode_steps=500)
        assert env.max_episode_steps == 500
        env.close()


class TestPortalRunnerEnvReset:
    def test_reset_returns_obs_and_info(self, env):
        obs, info = env.reset(seed=42)
        assert obs.shape == (STATE_SIZE,)
        assert obs.dtype == np.float32
        assert "score" in info
        assert "episode_steps" in info
        assert "level_geometry" in info

    def test_obs_in_observation_space(self, env):
        obs, _ = env.reset(seed=42)
        assert env.observation_space.contains(obs)

    def test_initial_obs_values(self, env):
        obs, _ = env.reset(seed=42)
        assert obs[0] == 200
        assert obs[1] == 720 - 100 - 50
        assert obs[4] == 0.0
        assert obs[11] == 0.0

    def test_same_seed_same_level(self, env):
        _, info_a = env.reset(seed=7)
        _, info_b = env.reset(seed=7)
        assert info_a["level_geometry"] == info_b["level_geometry"]

    def test_different_seed_different_level(self, env):
        _, info_a = env.reset(seed=1)
        _, info_b = env.reset(seed=2)
        assert info_a["level_geometry"]["obstacles"] != info_b["level_geometry"]["obstacles"]


class TestPortalRunnerEnvStep:
    def test_step_returns_five_tuple(self, env):
        env.reset(seed=42)
        obs, reward, terminated, truncated, info = env.step(NOOP)
        assert obs.shape == (STATE_SIZE,)
        assert isinstance(reward, float)
        assert isinstance(terminated, bool)
        assert isinstance(truncated, bool)
        assert "reward_signals" in info

    def test_step_before_reset_fails(self, env):
        with pytest.raises(AssertionError):
            env.step(NOOP)

    def test_move_right_reward(self, env):
        env.reset(seed=42)
        obs, reward, terminated, _, info = env.step(RIGHT)
        assert info["reward_signals"]["progress"] == 5
        assert obs[2] == 5
        assert reward == pytest.approx(5 * 0.1 - 0.01)
        assert not terminated

    def test_jump_sets_airborne(self, env):
        env.reset(seed=42)
        obs, *_ = env.step(JUMP)
        assert obs[4] == 1.0
        assert obs[3] == -18

    def test_death_terminates(self, env):
        env.reset(seed=42)
        player = env.world.player
        env.world.obstacles = [Obstacle(player.x, env.world.ground_line - 40, 40, 40)]
        _, reward, terminated, _, info = env.step(NOOP)
        assert terminated
        assert info["game_over"]
        assert reward == pytest.approx(-50.0 - 0.01)

    def test_portal_terminates(self, env):
        env.reset(seed=42)
        env.world.obstacles = []
        env.world.player.x = env.world.portal.x - 10
        # Teleport is not progress
        env._prev_player_x = env.world.player.x
        _, reward, terminated, _, info = env.step(NOOP)
        assert terminated
        assert info["portal_reached"]
        assert info["reward_signals"]["portal"] == 1.0
        assert info["reward_signals"]["progress"] == 0
        assert reward == pytest.approx(100.0 - 0.01)

    def test_truncation(self):
        env = PortalRunnerEnv(max_episode_steps=5)
        env.reset(seed=42)
        truncated = False
        for _ in range(5):
            _, _, terminated, truncated, _ = env.step(NOOP)
            assert not terminated
        assert truncated
        env.close()

    def test_custom_reward_weights(self):
        env = PortalRunnerEnv(reward_weights={"progress": 1.0})
        env.reset(seed=42)
        _, reward, *_ = env.step(RIGHT)
        assert reward == pytest.approx(5.0)
        env.close()


class TestPortalRunnerEnvRender:
    def test_rgb_array(self):
        env = PortalRunnerEnv(render_mode="rgb_array")
        env.reset(seed=42)
        frame = env.render()
        assert frame.shape == (720, 1280, 3)
        assert frame.dtype == np.uint8
        assert tuple(frame[5, 5]) == (135, 206, 235)
        env.close()

    def test_render_before_reset(self):
        env = PortalRunnerEnv(render_mode="rgb_array")
        assert env.render() is None
        env.close()

    def test_no_render_mode(self, env):
        env.reset(seed=42)
        assert env.render() is None
