import pygame
from config import BG, WHITE, GRAY, CYAN, AMBER, YELLOW

SIDE_COLORS = {"LEFT": CYAN, "RIGHT": AMBER}
SIDE_NAMES = {"LEFT": "YOU", "RIGHT": "CPU"}


def draw_court(surf, snap):
    surf.fill(BG)
    cx = snap.width // 2
    for y in range(0, snap.height, 30):
        pygame.draw.rect(surf, GRAY, (cx - 2, y, 4, 20))


def draw_entities(surf, snap):
    pygame.draw.rect(surf, CYAN, pygame.Rect(*map(round, snap.left)))
    pygame.draw.rect(surf, AMBER, pygame.Rect(*map(round, snap.right)))
    pygame.draw.rect(surf, WHITE, pygame.Rect(*map(round, snap.ball)))
    for x, y, size, col in snap.particles:
        pygame.draw.circle(surf, col, (int(x), int(y)), size)


def draw_scores(surf, font, snap):
    left = font.render(f"{snap.score_left}", True, CYAN)
    right = font.render(f"{snap.score_right}", True, AMBER)
    surf.blit(left, left.get_rect(center=(snap.width // 2 - 60, 50)))
    surf.blit(right, right.get_rect(center=(snap.width // 2 + 60, 50)))


def draw_pause_icon(surf, rect, paused):
    """Two paddle-shaped bars while running, a block arrow while paused."""
    pygame.draw.rect(surf, BG, rect)
    x, y, w, h = rect
    if paused:
        for i in range(0, w // 2, 4):
            pygame.draw.rect(surf, YELLOW, (x + 4 + i * 2, y + 4 + i, 4, h - 8 - 2 * i))
        return
    bar = w // 4
    pygame.draw.rect(surf, GRAY, (x + bar - 1, y + 4, bar, h - 8))
    pygame.draw.rect(surf, GRAY, (x + w - 2 * bar + 1, y + 4, bar, h - 8))


def restart_button_rect(snap):
    r = pygame.Rect(0, 0, 200, 46)
    r.center = (snap.width // 2, snap.height // 2 + 40)
    return r


def draw_button(surf, font, rect, text, color, active=False):
    # hovered buttons fill in solid, like a lit scoreboard cell
    if active:
        pygame.draw.rect(surf, color, rect)
        label = font.render(text, True, BG)
    else:
        pygame.draw.rect(surf, BG, rect)
        pygame.draw.rect(surf, color, rect, 3)
        label = font.render(text, True, color)
    surf.blit(label, label.get_rect(center=rect.center))


def draw_banner(surf, font, snap, msg, color):
    """Band across the middle of the court, cut by the centre line."""
    band = pygame.Rect(0, snap.height // 2 - 90, snap.width, 180)
    pygame.draw.rect(surf, BG, band)
    pygame.draw.line(surf, color, band.topleft, band.topright, 4)
    pygame.draw.line(surf, color, band.bottomleft, (band.right, band.bottom), 4)
    t = font.render(msg, True, color)
    surf.blit(t, t.get_rect(center=(snap.width // 2, band.y + 50)))


def draw_game_over(surf, big, small, snap, hover=False):
    who = SIDE_NAMES.get(snap.winner, "?")
    verb = "WIN" if snap.winner == "LEFT" else "WINS"
    color = SIDE_COLORS.get(snap.winner, WHITE)
    draw_banner(surf, big, snap, f"{who} {verb}  {snap.score_left}:{snap.score_right}", color)
    draw_button(surf, small, restart_button_rect(snap), "RESTART", color, active=hover)


def draw_hud(screen, small, fps, snap, show_debug, muted=False):
    tag = small.render(f"{snap.variant}{'  (muted)' if muted else ''}", True, GRAY)
    screen.blit(tag, (14, snap.height - 24))

    if not show_debug:
        return

    bx, by, _, _ = snap.ball
    vx, vy = snap.ball_velocity
    lines = [
        (f"FPS: {fps:5.1f}   rally {snap.rally}  hits {snap.rally_hits}", GRAY),
        (f"BALL  x={bx:7.1f} y={by:7.1f}  speed={snap.ball_speed:5.2f}", WHITE),
        (f"      vx={vx:7.2f} vy={vy:7.2f}", WHITE),
        (f"YOU   y={snap.left[1]:7.1f}", CYAN),
        (f"CPU   y={snap.right[1]:7.1f}", AMBER),
        (f"sparks: {len(snap.particles)}   frame {snap.frame}", YELLOW),
    ]
    y = 52
    for text, col in lines:
        surf = small.render(text, True, col)
        screen.blit(surf, (60, y))
        y += 20
