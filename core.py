from dataclasses import dataclass

LEFT = "LEFT"
RIGHT = "RIGHT"


@dataclass
class Paddle:
    x: float
    y: float
    w: float
    h: float
    speed: float
    color: tuple
    side: str = LEFT

    @property
    def center_y(self):
        return self.y + self.h / 2

    @property
    def front_x(self):
        """X of the face the ball bounces off; depends on which side it sits."""
        return self.x + self.w if self.side == LEFT else self.x

    def rect(self):
        return (self.x, self.y, self.w, self.h)


@dataclass
class Ball:
    x: float
    y: float
    size: float
    dx: float = 0.0
    dy: float = 0.0
    speed: float = 0.0

    @property
    def center_x(self):
        return self.x + self.size / 2

    @property
    def center_y(self):
        return self.y + self.size / 2

    def rect(self):
        return (self.x, self.y, self.size, self.size)


def clamp(v, a, b):
    return max(a, min(b, v))


def sign(v):
    return -1.0 if v < 0 else 1.0


def make_paddles(cfg, left_color, right_color):
    top = (cfg.height - cfg.paddle_h) / 2
    left = Paddle(cfg.paddle_margin, top, cfg.paddle_w, cfg.paddle_h, cfg.paddle_speed, left_color, side=LEFT)
    right = Paddle(cfg.width - cfg.paddle_margin - cfg.paddle_w, top, cfg.paddle_w, cfg.paddle_h,
                   cfg.paddle_speed, right_color, side=RIGHT)
    return left, right


def keep_paddle_on_court(p: Paddle, height):
    p.y = clamp(p.y, 0, height - p.h)


def serve_ball(ball: Ball, cfg, rng, direction=None):
    """Centre the ball and give it a fresh velocity.

    direction is +1 (toward the right paddle) or -1 (toward the left one);
    None picks a side at random.
    """
    ball.x = cfg.width / 2 - ball.size / 2
    ball.y = cfg.height / 2 - ball.size / 2
    if direction is None:
        direction = 1 if rng.random() < 0.5 else -1
    ball.speed = cfg.ball_speed
    ball.dx = cfg.ball_speed * direction
    ball.dy = cfg.ball_speed * (rng.random() * 2 - 1)


def move_ball(ball: Ball, scale=1.0):
    ball.x += ball.dx * scale
    ball.y += ball.dy * scale


def wall_collide_ball(ball: Ball, height):
    """Reflect off the top and bottom edges. Returns the y of the wall hit, or None."""
    if ball.y < 0:
        ball.y = 0
        ball.dy = abs(ball.dy)
        return 0
    if ball.y + ball.size > height:
        ball.y = height - ball.size
        ball.dy = -abs(ball.dy)
        return height
    return None


def overlaps_paddle(ball: Ball, p: Paddle):
    if not (ball.y + ball.size > p.y and ball.y < p.y + p.h):
        return False
    if p.side == LEFT:
        return ball.x <= p.front_x
    return ball.x + ball.size >= p.front_x


def bounce_off_paddle(ball: Ball, p: Paddle, cfg, rng):
    """Push the ball flush against the paddle face and send it back.

    The vertical component changes by the configured deflection policy; with
    speed progression the scalar speed grows and dx keeps its new sign.
    """
    if p.side == LEFT:
        ball.x = p.front_x
        ball.dx = abs(ball.dx)
    else:
        ball.x = p.front_x - ball.size
        ball.dx = -abs(ball.dx)

    if cfg.deflect == "offset":
        ball.dy += (ball.center_y - p.center_y) * cfg.deflect_factor
    else:
        ball.dy += (rng.random() - 0.5) * 2 * cfg.nudge

    if cfg.speed_progression:
        ball.speed = min(ball.speed + cfg.speed_increment, cfg.max_speed)
        ball.dx = sign(ball.dx) * ball.speed


def check_score(ball: Ball, width):
    """Side that wins the point, if the ball has left the court."""
    if ball.x < 0:
        return RIGHT
    if ball.x + ball.size > width:
        return LEFT
    return None


def predict_intercept_y(ball: Ball, target_x, height):
    """Ball centre y when its left edge reaches target_x, bouncing off the walls.

    Falls back to the current centre when the ball is not heading for target_x.
    """
    if abs(ball.dx) < 1e-9:
        return ball.center_y
    t = (target_x - ball.x) / ball.dx
    if t <= 0:
        return ball.center_y
    y = ball.y + ball.dy * t
    span = height - ball.size
    if span <= 1e-9:
        return clamp(y, 0, span) + ball.size / 2
    period = 2 * span
    m = y % period
    if m > span:
        m = period - m
    return m + ball.size / 2
