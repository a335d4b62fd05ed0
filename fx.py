import math
import random
from collections import deque

import pygame

from config import SPARK_N, SPARK_LIFE, SPARK_SPEED, MAX_PARTICLES, CONFETTI_N


class Sparks:
    """Collision particles. Lifetimes are counted in reference frames.

    Storage is a ring buffer, so a burst into a full buffer drops the oldest sparks.
    """

    def __init__(self, max_particles=MAX_PARTICLES, rng=None):
        self.rng = rng or random.Random()
        self.parts = deque(maxlen=max_particles)

    def __len__(self):
        return len(self.parts)

    def clear(self):
        self.parts.clear()

    def burst(self, center, color, n=SPARK_N, direction=None):
        """direction=+1/-1 throws the sparks into that horizontal half-plane."""
        if self.parts.maxlen == 0:
            return
        cx, cy = center
        for _ in range(n):
            a = self.rng.random() * math.tau
            s = self.rng.uniform(*SPARK_SPEED)
            vx = math.cos(a) * s
            if direction is not None:
                vx = abs(vx) * direction
            self.parts.append({
                "p": [cx, cy],
                "v": [vx, math.sin(a) * s],
                "life": self.rng.randint(*SPARK_LIFE),
                "size": self.rng.randint(2, 4),
                "col": color,
            })

    def update(self, scale=1.0):
        alive = deque(maxlen=self.parts.maxlen)
        for p in self.parts:
            p["life"] -= scale
            if p["life"] <= 0:
                continue
            p["p"][0] += p["v"][0] * scale
            p["p"][1] += p["v"][1] * scale
            p["v"][0] *= 0.92 ** scale
            p["v"][1] *= 0.92 ** scale
            alive.append(p)
        self.parts = alive

    def snapshot(self):
        return tuple((p["p"][0], p["p"][1], p["size"], p["col"]) for p in self.parts)


class Confetti:
    """Square chips thrown up from the winner's half when a match ends.

    Host side only, timed in seconds. Chips land on the bottom edge of the
    court, skid along it and disappear when their time runs out.
    """

    COLORS = [(245, 220, 80), (240, 240, 240)]

    def __init__(self, floor, rng=None):
        self.floor = floor
        self.rng = rng or random.Random()
        self.parts = []

    def burst(self, center, color=None, n=CONFETTI_N):
        cx, cy = center
        r = self.rng
        palette = (self.COLORS + [color] * 3) if color else self.COLORS
        for _ in range(n):
            # fan out upward, between roughly 30 and 150 degrees
            a = math.pi + r.uniform(0.17, 0.83) * math.pi
            s = r.uniform(260, 720)
            self.parts.append({
                "p": [cx + r.uniform(-40, 40), cy],
                "v": [math.cos(a) * s, math.sin(a) * s],
                "life": r.uniform(1.6, 2.8),
                "size": r.randint(3, 6),
                "col": r.choice(palette),
            })

    def clear(self):
        self.parts = []

    def update(self, dt, gravity=900.0):
        alive = []
        for p in self.parts:
            p["life"] -= dt
            if p["life"] <= 0:
                continue
            p["v"][1] += gravity * dt
            p["p"][0] += p["v"][0] * dt
            p["p"][1] += p["v"][1] * dt
            bottom = self.floor - p["size"]
            if p["p"][1] > bottom:
                p["p"][1] = bottom
                p["v"][1] = 0.0
                p["v"][0] *= 0.85
            alive.append(p)
        self.parts = alive

    def draw(self, surf):
        for p in self.parts:
            x, y = p["p"]
            s = p["size"]
            pygame.draw.rect(surf, p["col"], (int(x), int(y), s, s))
