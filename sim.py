"""Per-frame game simulation.

All mutable game data lives in one GameState. step() advances it by one frame
and records the named events of that frame (wall-hit, paddle-hit, score,
match-over) for the host to turn into sounds. The only randomness comes from
the rng handed in, so a seeded random.Random replays a session exactly.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ai import OpponentAI
from config import CYAN, AMBER, WHITE, GameConfig
from core import (
    Ball, Paddle, LEFT, RIGHT, make_paddles, serve_ball, move_ball,
    wall_collide_ball, overlaps_paddle, bounce_off_paddle, check_score, clamp,
)
from fx import Sparks

logger = logging.getLogger(__name__)

IN_PROGRESS = "IN_PROGRESS"
OVER = "OVER"

WALL_HIT = "wall-hit"
PADDLE_HIT = "paddle-hit"
SCORE = "score"
MATCH_OVER = "match-over"


@dataclass
class GameState:
    left: Paddle
    right: Paddle
    ball: Ball
    ai: OpponentAI
    sparks: Sparks
    score_left: int = 0
    score_right: int = 0
    status: str = IN_PROGRESS
    winner: Optional[str] = None
    rally: int = 1
    rally_hits: int = 0
    frame: int = 0
    events: List[str] = field(default_factory=list)

    @property
    def over(self):
        return self.status == OVER


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a GameState for drawing."""
    variant: str
    width: int
    height: int
    left: Tuple[float, float, float, float]
    right: Tuple[float, float, float, float]
    ball: Tuple[float, float, float, float]
    ball_velocity: Tuple[float, float]
    ball_speed: float
    score_left: int
    score_right: int
    status: str
    winner: Optional[str]
    rally: int
    rally_hits: int
    frame: int
    particles: tuple
    events: tuple


def new_game(cfg: GameConfig, rng) -> GameState:
    left, right = make_paddles(cfg, CYAN, AMBER)
    ball = Ball(0.0, 0.0, cfg.ball_size)
    state = GameState(left, right, ball, OpponentAI.from_config(cfg), Sparks(cfg.max_particles, rng))
    serve_ball(ball, cfg, rng)
    return state


def restart(state: GameState, cfg: GameConfig, rng) -> GameState:
    """Put every entity back to its starting configuration."""
    state.left, state.right = make_paddles(cfg, CYAN, AMBER)
    state.ball = Ball(0.0, 0.0, cfg.ball_size)
    serve_ball(state.ball, cfg, rng)
    state.ai = OpponentAI.from_config(cfg)
    state.sparks = Sparks(cfg.max_particles, rng)
    state.score_left = 0
    state.score_right = 0
    state.status = IN_PROGRESS
    state.winner = None
    state.rally = 1
    state.rally_hits = 0
    state.frame = 0
    state.events = []
    return state


def frame_scale(cfg: GameConfig, dt):
    if dt is None:
        return 1.0
    return max(0.0, dt) * cfg.ref_fps


def step(state: GameState, cfg: GameConfig, input_y, rng, dt=None) -> GameState:
    """Advance the match by one frame.

    input_y is the latest pointer y in surface coordinates (None keeps the human
    paddle still). dt in seconds scales every displacement against cfg.ref_fps;
    None means exactly one reference frame.
    """
    if state.status == OVER:
        return state

    s = frame_scale(cfg, dt)
    events = []
    ball = state.ball

    if input_y is not None:
        state.left.y = clamp(input_y - state.left.h / 2, 0, cfg.height - state.left.h)

    move_ball(ball, s)

    wall_y = wall_collide_ball(ball, cfg.height)
    if wall_y is not None:
        events.append(WALL_HIT)
        if cfg.effects:
            state.sparks.burst((ball.center_x, wall_y), WHITE, n=8)

    # Both faces are tested every frame; a ball overlapping both bounces twice.
    for paddle in (state.left, state.right):
        if overlaps_paddle(ball, paddle):
            bounce_off_paddle(ball, paddle, cfg, rng)
            state.rally_hits += 1
            events.append(PADDLE_HIT)
            if cfg.effects:
                away = 1 if paddle.side == LEFT else -1
                state.sparks.burst((paddle.front_x, ball.center_y), paddle.color, direction=away)

    scorer = check_score(ball, cfg.width)
    if scorer is not None:
        events.append(SCORE)
        if scorer == LEFT:
            state.score_left += 1
            points = state.score_left
        else:
            state.score_right += 1
            points = state.score_right
        logger.info("point %s (%d:%d) after %d hits, ball speed %.1f",
                    scorer, state.score_left, state.score_right, state.rally_hits, ball.speed)

        if points >= cfg.win_score:
            state.status = OVER
            state.winner = scorer
            events.append(MATCH_OVER)
            logger.info("match over, %s wins %d:%d", scorer, state.score_left, state.score_right)
            state.events = events
            state.frame += 1
            return state

        # serve toward whoever just lost the point
        serve_ball(ball, cfg, rng, direction=-1 if scorer == RIGHT else 1)
        state.ai.reset()
        state.rally += 1
        state.rally_hits = 0

    state.ai.update(state.right, ball, cfg.height, s)

    if cfg.effects:
        state.sparks.update(s)

    state.events = events
    state.frame += 1
    return state


def snapshot(state: GameState, cfg: GameConfig) -> Snapshot:
    b = state.ball
    return Snapshot(
        variant=cfg.variant,
        width=cfg.width,
        height=cfg.height,
        left=state.left.rect(),
        right=state.right.rect(),
        ball=b.rect(),
        ball_velocity=(b.dx, b.dy),
        ball_speed=b.speed,
        score_left=state.score_left,
        score_right=state.score_right,
        status=state.status,
        winner=state.winner,
        rally=state.rally,
        rally_hits=state.rally_hits,
        frame=state.frame,
        particles=state.sparks.snapshot(),
        events=tuple(state.events),
    )


class Session:
    """One running match: config, rng and state together."""

    def __init__(self, cfg: Optional[GameConfig] = None, rng=None, seed=None):
        self.cfg = cfg or GameConfig.from_variant("classic")
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = new_game(self.cfg, self.rng)
        logger.info("new session, variant=%s seed=%s", self.cfg.variant, seed)

    @property
    def over(self):
        return self.state.over

    def step(self, input_y=None, dt=None):
        if self.state.over:
            return []
        step(self.state, self.cfg, input_y, self.rng, dt)
        return list(self.state.events)

    def restart(self):
        restart(self.state, self.cfg, self.rng)
        logger.info("restart, variant=%s", self.cfg.variant)

    def set_variant(self, name, **overrides):
        self.cfg = GameConfig.from_variant(name, **overrides)
        self.restart()

    def snapshot(self):
        return snapshot(self.state, self.cfg)
