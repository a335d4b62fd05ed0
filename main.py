import argparse
import logging
import os
import sys

import pygame

from audio import CuePlayer
from config import VARIANTS, DEFAULT_VARIANT, GameConfig
from core import LEFT
from fx import Confetti
from sim import Session, MATCH_OVER, OVER
from ui import (
    draw_court, draw_entities, draw_scores, draw_pause_icon, draw_game_over, draw_hud, restart_button_rect,
    SIDE_COLORS,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
VARIANT_KEYS = {pygame.K_1 + i: name for i, name in enumerate(VARIANTS)}


def setup_logging(level="INFO"):
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.handlers[:] = [handler]
    return root


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="pong-court", description="Pong against a scripted paddle.")
    p.add_argument("--variant", choices=list(VARIANTS), default=DEFAULT_VARIANT)
    p.add_argument("--fps", type=int, default=60, help="frame cap, 0 = unlimited")
    p.add_argument("--seed", type=int, default=None, help="seed the ball serves for a reproducible session")
    p.add_argument("--win-score", type=int, default=None)
    p.add_argument("--mute", action="store_true")
    p.add_argument("--log-level", default="INFO")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    overrides = {}
    if args.win_score is not None:
        overrides["win_score"] = args.win_score
    try:
        cfg = GameConfig.from_variant(args.variant, **overrides)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    pygame.init()
    base_dir = os.path.dirname(os.path.abspath(__file__))
    cues = CuePlayer(os.path.join(base_dir, "audio"), muted=args.mute)

    screen = pygame.display.set_mode((cfg.width, cfg.height))
    pygame.display.set_caption("Pong Court")
    clock = pygame.time.Clock()

    font = pygame.font.SysFont("arial", 40)
    small = pygame.font.SysFont("consolas", 18)
    big = pygame.font.SysFont("consolas", 64)

    session = Session(cfg, seed=args.seed)
    confetti = Confetti(cfg.height)
    pause_icon = pygame.Rect(14, 14, 30, 30)

    pointer_y = cfg.height / 2
    paused = False
    show_debug = False
    fps_cap = max(0, args.fps)

    def do_restart():
        nonlocal paused
        session.restart()
        confetti.clear()
        paused = False

    running = True
    while running:
        dt = clock.tick(fps_cap) / 1000.0
        if dt > 0.05:
            dt = 0.05

        snap = session.snapshot()
        mouse = pygame.mouse.get_pos()

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_q:
                    running = False
                elif e.key == pygame.K_r:
                    do_restart()
                elif e.key in (pygame.K_p, pygame.K_ESCAPE) and not session.over:
                    paused = not paused
                elif e.key == pygame.K_F3:
                    show_debug = not show_debug
                elif e.key == pygame.K_m:
                    cues.toggle_mute()
                elif e.key in VARIANT_KEYS:
                    session.set_variant(VARIANT_KEYS[e.key], **overrides)
                    confetti.clear()
                    paused = False

            elif e.type == pygame.MOUSEMOTION:
                pointer_y = e.pos[1]

            elif e.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
                pointer_y = e.y * cfg.height

            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if session.over and restart_button_rect(snap).collidepoint(e.pos):
                    do_restart()
                elif pause_icon.collidepoint(e.pos) and not session.over:
                    paused = not paused

        if not paused:
            events = session.step(pointer_y, dt)
            cues.play(events)
            if MATCH_OVER in events and session.cfg.effects:
                side = 0.25 if session.state.winner == LEFT else 0.75
                confetti.burst((cfg.width * side, cfg.height * 0.85), SIDE_COLORS[session.state.winner])
        confetti.update(dt)

        snap = session.snapshot()
        draw_court(screen, snap)
        draw_entities(screen, snap)
        draw_scores(screen, font, snap)
        confetti.draw(screen)
        draw_hud(screen, small, clock.get_fps(), snap, show_debug, cues.muted)
        if snap.status == OVER:
            draw_game_over(screen, big, small, snap, hover=restart_button_rect(snap).collidepoint(mouse))
        else:
            draw_pause_icon(screen, pause_icon, paused)

        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
