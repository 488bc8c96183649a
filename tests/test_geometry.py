"""Tests for rectangle overlap."""

import random

import pytest

from portal_platformer.geometry import Rect, overlaps, any_overlap
from portal_platformer.entities import Obstacle, Star


class TestRect:
    def test_edges(self):
        r = Rect(10, 20, 30, 40)
        assert r.right == 40
        assert r.bottom == 60

    def test_offset(self):
        r = Rect(10, 20, 30, 40).offset(5, -5)
        assert r.as_tuple() == (15, 15, 30, 40)


class TestOverlaps:
    def test_overlapping(self):
        assert overlaps(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))

    def test_contained(self):
        assert overlaps(Rect(0, 0, 100, 100), Rect(40, 40, 10, 10))

    def test_disjoint(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(20, 0, 10, 10))

    def test_touching_edges_do_not_overlap(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10))
        assert not overlaps(Rect(0, 0, 10, 10), Rect(0, 10, 10, 10))

    def test_touching_corner_does_not_overlap(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(10, 10, 10, 10))

    def test_overlap_on_one_axis_only(self):
        assert not overlaps(Rect(0, 0, 10, 10), Rect(5, 30, 10, 10))

    def test_accepts_entities(self):
        assert overlaps(Obstacle(0, 0, 10, 10), Star(5, 5, 15))

    def test_symmetric(self):
        rng = random.Random(7)
        for _ in range(500):
            a = Rect(rng.uniform(0, 50), rng.uniform(0, 50), rng.uniform(1, 30), rng.uniform(1, 30))
            b = Rect(rng.uniform(0, 50), rng.uniform(0, 50), rng.uniform(1, 30), rng.uniform(1, 30))
            assert overlaps(a, b) == overlaps(b, a)


class TestAnyOverlap:
    def test_empty_candidates(self):
        assert not any_overlap(Rect(0, 0, 10, 10), [])

    def test_finds_overlap(self):
        candidates = [Rect(100, 100, 5, 5), Rect(5, 5, 10, 10)]
        assert any_overlap(Rect(0, 0, 10, 10), candidates)

    def test_exclude_by_identity(self):
        a = Star(5, 5, 15)
        b = Star(5, 5, 15)  # equal value, different object
        assert not any_overlap(Rect(0, 0, 10, 10), [a], exclude=[a])
        assert any_overlap(Rect(0, 0, 10, 10), [a, b], exclude=[a])

    @pytest.mark.parametrize("x,expected", [(10, False), (9.9, True)])
    def test_boundary(self, x, expected):
        assert any_overlap(Rect(x, 0, 10, 10), [Rect(0, 0, 10, 10)]) is expected
