"""Tests for the opponent control policies."""

import pytest

from ai import OpponentAI
from config import GameConfig, WHITE
from core import Ball, Paddle, RIGHT


def opponent(y=200):
    return Paddle(770, y, 12, 100, 7.0, WHITE, side=RIGHT)


class TestNaive:

    def test_snaps_to_ball(self):
        p = opponent()
        OpponentAI("naive").update(p, Ball(400, 100, 16, dx=5), 500)
        assert p.y == 58
        assert p.center_y == 108

    def test_clamped_to_court(self):
        p = opponent()
        ai = OpponentAI("naive")
        ai.update(p, Ball(400, 0, 16, dx=5), 500)
        assert p.y == 0
        ai.update(p, Ball(400, 484, 16, dx=5), 500)
        assert p.y == 400


class TestTolerant:

    def test_dead_zone_holds_still(self):
        p = opponent()
        OpponentAI("tolerant", dead_zone=10).update(p, Ball(400, 247, 16, dx=5), 500)
        assert p.y == 200

    def test_steps_toward_ball(self):
        p = opponent()
        ai = OpponentAI("tolerant", dead_zone=10)
        ai.update(p, Ball(400, 292, 16, dx=5), 500)
        assert p.y == 207
        ai.update(p, Ball(400, 20, 16, dx=5), 500)
        assert p.y == 200

    def test_step_scales_with_frame(self):
        p = opponent()
        OpponentAI("tolerant").update(p, Ball(400, 292, 16, dx=5), 500, scale=2.0)
        assert p.y == 214

    def test_never_leaves_court(self):
        p = opponent(y=398)
        ai = OpponentAI("tolerant")
        for _ in range(5):
            ai.update(p, Ball(400, 484, 16, dx=5), 500)
        assert p.y == 400


class TestPredictive:

    def test_aims_at_intercept(self):
        p = opponent()
        ai = OpponentAI("predictive")
        ball = Ball(400, 400, 16, dx=5, dy=5)
        ai.update(p, ball, 500)
        # reaches x=754 at y=754, folded off the floor to 214
        assert ai.target_y == pytest.approx(222)
        assert p.y == 193

    def test_toward_only_ignores_receding_ball(self):
        p = opponent()
        ai = OpponentAI("predictive", toward_only=True)
        ai.update(p, Ball(400, 20, 16, dx=-5, dy=1), 500)
        assert p.y == 200
        assert ai.target_y is None

    def test_tracks_receding_ball_without_gate(self):
        p = opponent()
        ai = OpponentAI("predictive", toward_only=False)
        ai.update(p, Ball(400, 20, 16, dx=-5, dy=1), 500)
        assert ai.target_y == 28
        assert p.y == 193

    def test_from_config(self):
        ai = OpponentAI.from_config(GameConfig.from_variant("predictive"))
        assert ai.policy == "predictive"
        assert ai.toward_only
        assert ai.dead_zone == 10
