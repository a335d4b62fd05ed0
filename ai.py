from core import Ball, Paddle, keep_paddle_on_court, predict_intercept_y, LEFT


class OpponentAI:
    """Drives the scripted paddle.

    naive      snaps its centre onto the ball centre every frame
    tolerant   steps toward the ball centre, ignoring misalignment inside the dead-zone
    predictive steps toward where the ball will cross its face, wall bounces included
    """

    def __init__(self, policy="naive", dead_zone=10.0, toward_only=False):
        self.set_policy(policy, dead_zone, toward_only)
        self.target_y = None

    def set_policy(self, policy, dead_zone=10.0, toward_only=False):
        self.policy = policy
        self.dead_zone = dead_zone
        self.toward_only = toward_only

    @classmethod
    def from_config(cls, cfg):
        return cls(cfg.opponent, cfg.dead_zone, cfg.toward_only)

    def reset(self):
        self.target_y = None

    def ball_incoming(self, paddle: Paddle, ball: Ball):
        if paddle.side == LEFT:
            return ball.dx < 0
        return ball.dx > 0

    def aim(self, paddle: Paddle, ball: Ball, height):
        if self.policy != "predictive" or not self.ball_incoming(paddle, ball):
            return ball.center_y
        if paddle.side == LEFT:
            target_x = paddle.front_x
        else:
            target_x = paddle.front_x - ball.size
        return predict_intercept_y(ball, target_x, height)

    def update(self, paddle: Paddle, ball: Ball, height, scale=1.0):
        if self.policy == "predictive" and self.toward_only and not self.ball_incoming(paddle, ball):
            self.target_y = None
            return

        target = self.aim(paddle, ball, height)
        self.target_y = target

        if self.policy == "naive":
            paddle.y = target - paddle.h / 2
        else:
            diff = target - paddle.center_y
            if abs(diff) > self.dead_zone:
                step = paddle.speed * scale
                paddle.y += step if diff > 0 else -step

        keep_paddle_on_court(paddle, height)
