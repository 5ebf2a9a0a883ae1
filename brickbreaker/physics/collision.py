"""Collision detection and response for BrickBreaker.

Handles ball-paddle and ball-brick collisions. Ball-wall bounces live in
Ball.update() since they only need arena bounds.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, Tuple, TYPE_CHECKING

from ..logging import get_logger

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick

log = get_logger('collision')

# Exaggerates edge angles beyond a linear hit-position mapping
PADDLE_ANGLE_FACTOR = 1.5


class CollisionContext(Protocol):
    """What the engine reads and reports to each frame."""

    @property
    def ball(self) -> Optional['Ball']:
        ...

    @property
    def paddle(self) -> Optional['Paddle']:
        ...

    @property
    def bricks(self) -> Sequence['Brick']:
        ...

    def add_score(self, points: int) -> None:
        ...


@dataclass
class CollisionReport:
    """What happened during one collision pass."""

    paddle_hit: bool = False
    bricks_broken: List['Brick'] = field(default_factory=list)
    points: int = 0

    @property
    def any(self) -> bool:
        return self.paddle_hit or bool(self.bricks_broken)


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball's bounding box overlaps the paddle.

    No direction check: a ball moving up through the paddle still
    collides, and the response forces it upward regardless.
    """
    ball_left, ball_top, ball_right, ball_bottom = ball.get_bounds()

    return (
        ball_bottom > paddle.top and
        ball_top < paddle.bottom and
        ball_right > paddle.left and
        ball_left < paddle.right
    )


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if the ball hits an unbroken brick."""
    if brick.broken:
        return False
    return ball.collides_with(brick)


def bounce_off_paddle(ball: 'Ball', paddle: 'Paddle') -> None:
    """Speed up and send the ball upward at an angle set by the hit point.

    hit_position runs 0..1 across the paddle; the center bounces straight
    up and the edges bounce steeply sideways. dx may exceed the capped
    speed because of PADDLE_ANGLE_FACTOR.
    """
    speed = ball.increase_speed()
    ball.dy = -speed

    hit_position = (ball.x - paddle.x) / paddle.width
    ball.dx = speed * (hit_position * 2 - 1) * PADDLE_ANGLE_FACTOR


def get_bounce_axes(ball: 'Ball', brick: 'Brick') -> Tuple[bool, bool]:
    """Decide which velocity components a brick hit reverses.

    Nearest-edge heuristic: the absolute gaps between facing edges of the
    ball box and the brick are compared and the smallest wins. An exact
    tie between a side gap and a top/bottom gap flips both axes.

    Returns:
        (flip_dx, flip_dy)
    """
    ball_left, ball_top, ball_right, ball_bottom = ball.get_bounds()
    brick_left, brick_top, brick_right, brick_bottom = brick.get_bounds()

    dist_left = abs(ball_right - brick_left)
    dist_right = abs(brick_right - ball_left)
    dist_top = abs(ball_bottom - brick_top)
    dist_bottom = abs(brick_bottom - ball_top)

    min_dist = min(dist_left, dist_right, dist_top, dist_bottom)

    flip_dx = min_dist == dist_left or min_dist == dist_right
    flip_dy = min_dist == dist_top or min_dist == dist_bottom
    return flip_dx, flip_dy


def resolve_brick_collision(ball: 'Ball', brick: 'Brick') -> Tuple[bool, bool]:
    """Reverse the ball's velocity components facing the hit edge.

    Returns:
        (flipped_dx, flipped_dy)
    """
    flip_dx, flip_dy = get_bounce_axes(ball, brick)
    if flip_dx:
        ball.dx = -ball.dx
    if flip_dy:
        ball.dy = -ball.dy
    return flip_dx, flip_dy


class CollisionEngine:
    """Runs the paddle pass and the brick pass once per frame.

    Every unbroken brick overlapping the ball in a frame is broken and
    scored, unless ``first_hit_only`` is set, in which case the brick
    pass stops after the first hit.
    """

    def __init__(
        self,
        context: CollisionContext,
        points_per_brick: int,
        first_hit_only: bool = False,
    ):
        """Initialize collision engine.

        Args:
            context: Owner of ball, paddle and bricks; receives score
            points_per_brick: Points awarded for each broken brick
            first_hit_only: Break at most one brick per frame
        """
        self._context = context
        self._points_per_brick = points_per_brick
        self._first_hit_only = first_hit_only

    @property
    def first_hit_only(self) -> bool:
        return self._first_hit_only

    def check_collisions(self) -> CollisionReport:
        """Resolve all ball collisions for this frame."""
        report = CollisionReport()

        ball = self._context.ball
        paddle = self._context.paddle
        if ball is None or paddle is None:
            log.warning("Collision pass skipped: ball or paddle missing")
            return report

        report.paddle_hit = self.check_paddle_collision(ball, paddle)
        self.check_brick_collisions(ball, report)

        if report.any:
            log.debug(
                "paddle_hit=%s bricks=%d points=%d speed=%.2f",
                report.paddle_hit, len(report.bricks_broken),
                report.points, ball.speed,
            )
        return report

    def check_paddle_collision(self, ball: 'Ball', paddle: 'Paddle') -> bool:
        """Bounce the ball off the paddle if they overlap."""
        if not check_paddle_collision(ball, paddle):
            return False

        bounce_off_paddle(ball, paddle)
        log.trace("Paddle hit: dx=%.2f dy=%.2f", ball.dx, ball.dy)
        return True

    def check_brick_collisions(self, ball: 'Ball', report: CollisionReport) -> None:
        """Break, score, and bounce off every brick the ball overlaps."""
        for brick in self._context.bricks:
            if not check_brick_collision(ball, brick):
                continue

            brick.break_()
            self._context.add_score(self._points_per_brick)
            report.bricks_broken.append(brick)
            report.points += self._points_per_brick

            resolve_brick_collision(ball, brick)

            # Keep vertical direction, apply the new speed magnitude
            speed = ball.increase_speed()
            ball.dy = _sign(ball.dy) * speed

            if self._first_hit_only:
                break
