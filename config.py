from dataclasses import dataclass, fields

W, H = 800, 500

BG = (10, 12, 16)
WHITE = (235, 235, 235)
GRAY = (102, 102, 102)
CYAN = (0, 187, 255)
AMBER = (255, 187, 0)
YELLOW = (245, 220, 80)

PADDLE_W = 12
PADDLE_H = 100
PADDLE_MARGIN = 18
PADDLE_SPEED = 7.0

BALL_SIZE = 16
BALL_SPEED = 5.0

REF_FPS = 60
DEFLECT_FACTOR = 0.18
NUDGE = 1.0
DEAD_ZONE = 10.0
WIN_SCORE = 7

SPARK_N = 14
SPARK_LIFE = (14, 30)
SPARK_SPEED = (1.5, 6.0)
MAX_PARTICLES = 240

CONFETTI_N = 260

DEFLECT_POLICIES = ("random", "offset")
OPPONENT_POLICIES = ("naive", "tolerant", "predictive")

VARIANTS = {
    "classic":    {"deflect": "random", "opponent": "naive",      "increment": 0.0, "max_speed": 5.0,  "effects": False, "toward_only": False},
    "tolerant":   {"deflect": "random", "opponent": "tolerant",   "increment": 0.0, "max_speed": 5.0,  "effects": False, "toward_only": False},
    "speedup":    {"deflect": "offset", "opponent": "tolerant",   "increment": 0.5, "max_speed": 14.0, "effects": False, "toward_only": False},
    "arcade":     {"deflect": "offset", "opponent": "tolerant",   "increment": 0.5, "max_speed": 14.0, "effects": True,  "toward_only": False},
    "predictive": {"deflect": "offset", "opponent": "predictive", "increment": 0.4, "max_speed": 13.0, "effects": True,  "toward_only": True},
}

DEFAULT_VARIANT = "arcade"


@dataclass(frozen=True)
class GameConfig:
    """Every knob the simulation reads. Speeds are px per reference frame."""
    width: int = W
    height: int = H
    paddle_w: int = PADDLE_W
    paddle_h: int = PADDLE_H
    paddle_margin: int = PADDLE_MARGIN
    paddle_speed: float = PADDLE_SPEED
    ball_size: int = BALL_SIZE
    ball_speed: float = BALL_SPEED
    speed_increment: float = 0.0
    max_speed: float = BALL_SPEED
    win_score: int = WIN_SCORE
    deflect: str = "random"
    nudge: float = NUDGE
    deflect_factor: float = DEFLECT_FACTOR
    opponent: str = "naive"
    dead_zone: float = DEAD_ZONE
    toward_only: bool = False
    effects: bool = False
    max_particles: int = MAX_PARTICLES
    ref_fps: int = REF_FPS
    variant: str = "custom"

    def __post_init__(self):
        if self.deflect not in DEFLECT_POLICIES:
            raise ValueError(f"unknown deflection policy: {self.deflect!r}")
        if self.opponent not in OPPONENT_POLICIES:
            raise ValueError(f"unknown opponent policy: {self.opponent!r}")
        for name in ("width", "height", "paddle_w", "paddle_h", "ball_size", "ball_speed", "ref_fps"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.paddle_h > self.height:
            raise ValueError("paddle_h does not fit the surface height")
        if self.max_speed < self.ball_speed:
            raise ValueError("max_speed must be >= ball_speed")
        if self.speed_increment < 0:
            raise ValueError("speed_increment must not be negative")
        if self.win_score < 1:
            raise ValueError("win_score must be at least 1")
        if self.max_particles < 0:
            raise ValueError("max_particles must not be negative")

    @property
    def speed_progression(self):
        return self.speed_increment > 0

    @classmethod
    def from_variant(cls, name, **overrides):
        try:
            v = VARIANTS[name]
        except KeyError:
            raise ValueError(f"unknown variant {name!r}, expected one of {', '.join(VARIANTS)}") from None
        known = {f.name for f in fields(cls)}
        bad = set(overrides) - known
        if bad:
            raise ValueError(f"unknown config fields: {', '.join(sorted(bad))}")
        kw = {
            "deflect": v["deflect"],
            "opponent": v["opponent"],
            "speed_increment": v["increment"],
            "max_speed": v["max_speed"],
            "effects": v["effects"],
            "toward_only": v["toward_only"],
            "variant": name,
        }
        kw.update(overrides)
        return cls(**kw)
