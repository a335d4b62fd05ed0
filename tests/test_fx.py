"""Tests for collision sparks and the win confetti."""

import random

import pygame

from config import SPARK_LIFE
from fx import Sparks, Confetti

RED = (255, 0, 0)
BLUE = (0, 0, 255)


class TestSparks:

    def test_burst_adds_particles(self):
        sparks = Sparks(rng=random.Random(1))
        sparks.burst((100, 100), RED, n=10)
        assert len(sparks) == 10

    def test_ring_buffer_drops_oldest(self):
        sparks = Sparks(max_particles=5, rng=random.Random(1))
        sparks.burst((100, 100), RED, n=3)
        sparks.burst((200, 200), BLUE, n=5)
        assert len(sparks) == 5
        assert all(col == BLUE for _, _, _, col in sparks.snapshot())

    def test_zero_capacity(self):
        sparks = Sparks(max_particles=0)
        sparks.burst((100, 100), RED, n=10)
        assert len(sparks) == 0

    def test_direction_keeps_half_plane(self):
        sparks = Sparks(rng=random.Random(3))
        sparks.burst((30, 250), RED, n=40, direction=1)
        assert all(p["v"][0] >= 0 for p in sparks.parts)
        sparks.clear()
        sparks.burst((770, 250), RED, n=40, direction=-1)
        assert all(p["v"][0] <= 0 for p in sparks.parts)

    def test_particles_move_and_expire(self):
        sparks = Sparks(rng=random.Random(2))
        sparks.burst((100, 100), RED, n=20)
        start = [tuple(p["p"]) for p in sparks.parts]
        sparks.update()
        assert [tuple(p["p"]) for p in sparks.parts] != start
        for _ in range(SPARK_LIFE[1]):
            sparks.update()
        assert len(sparks) == 0

    def test_update_keeps_capacity(self):
        sparks = Sparks(max_particles=4, rng=random.Random(2))
        sparks.burst((100, 100), RED, n=4)
        sparks.update()
        sparks.burst((100, 100), BLUE, n=4)
        assert len(sparks) == 4


class TestConfetti:

    def test_burst_and_fade(self):
        confetti = Confetti(500, rng=random.Random(5))
        confetti.burst((200, 425), n=50)
        assert len(confetti.parts) == 50
        for _ in range(6):
            confetti.update(0.5)
        assert confetti.parts == []

    def test_thrown_upward(self):
        confetti = Confetti(500, rng=random.Random(6))
        confetti.burst((200, 425), n=40)
        assert all(p["v"][1] < 0 for p in confetti.parts)

    def test_chips_land_on_floor(self):
        confetti = Confetti(500, rng=random.Random(7))
        confetti.burst((200, 425), n=30)
        for _ in range(60):
            confetti.update(1 / 60)
        assert confetti.parts
        for p in confetti.parts:
            assert p["p"][1] <= 500 - p["size"]

    def test_winner_color_in_palette(self):
        confetti = Confetti(500, rng=random.Random(8))
        confetti.burst((600, 425), RED, n=200)
        assert any(p["col"] == RED for p in confetti.parts)

    def test_clear(self):
        confetti = Confetti(500, rng=random.Random(5))
        confetti.burst((400, 200), n=5)
        confetti.clear()
        assert confetti.parts == []

    def test_draws_square_chips(self):
        surf = pygame.Surface((800, 500))
        confetti = Confetti(500, rng=random.Random(9))
        confetti.burst((400, 250), RED, n=1)
        chip = confetti.parts[0]
        chip["col"] = RED
        confetti.draw(surf)
        x, y = chip["p"]
        assert tuple(surf.get_at((int(x), int(y))))[:3] == RED
