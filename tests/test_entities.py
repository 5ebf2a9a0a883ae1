"""Tests for Ball, Paddle and Brick."""

import pytest

from brickbreaker.arena import BallArena, Rect
from brickbreaker.config import BallConfig, PaddleConfig
from brickbreaker.entities import Ball, Brick, Paddle

from conftest import FakeArena


# ============================================================================
# Ball
# ============================================================================


class TestBallInit:
    """Ball starting state."""

    def test_starts_centered_above_bottom(self, arena):
        ball = Ball(BallConfig(), arena)
        assert ball.x == 400
        assert ball.y == 570

    def test_starts_moving_up_and_right(self, arena):
        ball = Ball(BallConfig(speed=4.0), arena)
        assert ball.speed == 4.0
        assert ball.dx == 4.0
        assert ball.dy == -4.0

    def test_radius_alias(self, arena):
        ball = Ball(BallConfig(size=7.0), arena)
        assert ball.size == 7.0
        assert ball.radius == 7.0

    def test_fake_arena_satisfies_protocol(self, arena):
        assert isinstance(arena, BallArena)


class TestBallUpdate:
    """Motion integration and wall bounces."""

    def test_moves_by_velocity(self, arena):
        ball = Ball(BallConfig(), arena)
        ball.update()
        assert ball.position == (404, 566)

    def test_bounces_off_left_wall(self, arena):
        ball = Ball(BallConfig(), arena)
        ball.x, ball.y = 12, 300
        ball.dx = -4
        ball.update()
        assert ball.x == 8
        assert ball.dx == 4

    def test_bounces_off_right_wall(self, arena):
        ball = Ball(BallConfig(), arena)
        ball.x, ball.y = 788, 300
        ball.dx = 4
        ball.update()
        assert ball.dx == -4

    def test_bounces_off_top(self, arena):
        ball = Ball(BallConfig(), arena)
        ball.x, ball.y = 400, 12
        ball.dy = -4
        ball.update()
        assert ball.y == 8
        assert ball.dy == 4

    def test_no_bounce_off_bottom(self, arena):
        ball = Ball(BallConfig(), arena)
        ball.x, ball.y = 400, 595
        ball.dy = 4
        ball.update()
        assert ball.dy == 4
        assert arena.lost_count == 0

    def test_reports_lost_when_fully_below(self, arena):
        ball = Ball(BallConfig(), arena)
        ball.x, ball.y = 400, 609
        ball.dx, ball.dy = 0, 4
        ball.update()
        assert arena.lost_count == 1
        # Ball does not reset itself
        assert ball.y == 613

    def test_not_lost_while_partly_visible(self, arena):
        ball = Ball(BallConfig(), arena)
        ball.x, ball.y = 400, 605
        ball.dx, ball.dy = 0, 4
        ball.update()
        assert arena.lost_count == 0


class TestBallCollidesWith:
    """Bounding-box overlap test."""

    @pytest.fixture
    def ball(self, arena):
        ball = Ball(BallConfig(size=10), arena)
        ball.x, ball.y = 100, 100
        return ball

    def test_overlap(self, ball):
        assert ball.collides_with(Brick(105, 95, 50, 20, 'red'))

    def test_touching_edge_is_not_overlap(self, ball):
        assert not ball.collides_with(Brick(110, 95, 50, 20, 'red'))

    def test_separate(self, ball):
        assert not ball.collides_with(Brick(300, 300, 50, 20, 'red'))

    def test_has_no_side_effects(self, ball):
        brick = Brick(105, 95, 50, 20, 'red')
        ball.collides_with(brick)
        assert not brick.broken
        assert ball.position == (100, 100)


class TestBallSpeed:
    """Speed increase and cap."""

    def test_increase_by_increment(self, arena):
        ball = Ball(BallConfig(speed=4.0, speed_increase=0.2), arena)
        assert ball.increase_speed() == pytest.approx(4.2)

    def test_increase_capped_at_max(self, arena):
        ball = Ball(BallConfig(speed=7.9, max_speed=8.0), arena)
        ball.increase_speed()
        ball.increase_speed()
        assert ball.speed == 8.0

    def test_set_speed_capped(self, arena):
        ball = Ball(BallConfig(max_speed=8.0), arena)
        ball.set_speed(50)
        assert ball.speed == 8.0


class TestBallReset:
    """Round-start restore."""

    def test_reset_restores_position_and_velocity(self, arena):
        ball = Ball(BallConfig(), arena)
        ball.x, ball.y = 12, 34
        ball.dx, ball.dy = -7, 7
        ball.increase_speed()
        ball.reset()
        assert ball.position == (400, 570)
        assert ball.speed == 4.0
        assert (ball.dx, ball.dy) == (4.0, -4.0)

    def test_reset_uses_start_offset(self):
        ball = Ball(BallConfig(start_offset=50), FakeArena(200, 100))
        assert ball.position == (100, 50)


# ============================================================================
# Paddle
# ============================================================================


class TestPaddle:
    """Paddle movement and clamping."""

    @pytest.fixture
    def paddle(self, arena):
        return Paddle(PaddleConfig(width=100, height=10, speed=8), arena)

    def test_initial_position(self, paddle):
        assert paddle.x == 350
        assert paddle.y == 580
        assert paddle.dx == 0

    def test_geometry(self, paddle):
        assert paddle.rect == (350, 580, 100, 10)
        assert (paddle.left, paddle.right) == (350, 450)
        assert (paddle.top, paddle.bottom) == (580, 590)
        assert paddle.center_x == 400

    def test_is_a_rect(self, paddle):
        assert isinstance(paddle, Rect)

    def test_velocity_intent(self, paddle):
        paddle.move_left()
        assert paddle.dx == -8
        paddle.move_right()
        assert paddle.dx == 8
        paddle.stop()
        assert paddle.dx == 0

    def test_setters_do_not_move(self, paddle):
        paddle.move_left()
        assert paddle.x == 350

    def test_update_applies_intent(self, paddle):
        paddle.move_left()
        paddle.update()
        assert paddle.x == 342

    def test_update_clamps_left(self, paddle):
        paddle.set_position(53)
        paddle.move_left()
        for _ in range(10):
            paddle.update()
        assert paddle.x == 0

    def test_update_clamps_right(self, paddle):
        paddle.move_right()
        for _ in range(100):
            paddle.update()
        assert paddle.x == 700

    def test_set_position_centers(self, paddle):
        paddle.set_position(200)
        assert paddle.x == 150

    @pytest.mark.parametrize("target", [-1e9, -50, 0, 49, 400, 751, 800, 1e9])
    def test_set_position_stays_in_bounds(self, paddle, target):
        paddle.set_position(target)
        assert 0 <= paddle.x <= 700


# ============================================================================
# Brick
# ============================================================================


class TestBrick:
    """Brick state and geometry."""

    def test_starts_unbroken(self):
        brick = Brick(10, 20, 75, 20, 'red', (1, 2))
        assert not brick.broken
        assert brick.is_active
        assert brick.grid_position == (1, 2)
        assert brick.color == 'red'

    def test_break(self):
        brick = Brick(10, 20, 75, 20, 'red')
        brick.break_()
        assert brick.broken
        assert not brick.is_active

    def test_break_is_idempotent(self):
        brick = Brick(10, 20, 75, 20, 'red')
        brick.break_()
        brick.break_()
        assert brick.broken

    def test_bounds(self):
        brick = Brick(10, 20, 75, 20, 'red')
        assert brick.get_bounds() == (10, 20, 85, 40)
        assert brick.rect == (10, 20, 75, 20)
        assert (brick.center_x, brick.center_y) == (47.5, 30)
