"""Tests for keyboard snapshots."""

from collections import defaultdict

import pygame

from portal_platformer.controls import Controls, NO_INPUT


def pressed(*keys):
    state = defaultdict(bool)
    for key in keys:
        state[key] = True
    return state


class TestControls:
    def test_nothing_held(self):
        assert Controls.from_pressed(pressed()) == NO_INPUT

    def test_arrow_keys(self):
        controls = Controls.from_pressed(pressed(pygame.K_LEFT, pygame.K_SPACE))
        assert controls == Controls(left=True, jump=True)

    def test_wasd(self):
        controls = Controls.from_pressed(pressed(pygame.K_d, pygame.K_w))
        assert controls == Controls(right=True, jump=True)

    def test_both_directions(self):
        controls = Controls.from_pressed(pressed(pygame.K_a, pygame.K_RIGHT))
        assert controls.left and controls.right
