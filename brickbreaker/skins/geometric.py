"""Geometric skin - flat shapes and plain text."""

from typing import TYPE_CHECKING, Optional, Tuple

import pygame

from .base import BrickBreakerSkin
from ..config import BACKGROUND_COLOR, BRICK_COLORS
from ..game_state import GameState

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class GeometricSkin(BrickBreakerSkin):
    """Renders game using simple geometric shapes.

    - Paddle: Blue rectangle with white outline
    - Ball: Light blue circle
    - Bricks: Rectangles colored by brick.color with a dark outline
    """

    NAME = "geometric"
    DESCRIPTION = "Simple shapes"

    PADDLE_COLOR = (0, 149, 221)
    PADDLE_OUTLINE = (255, 255, 255)
    BALL_COLOR = (0, 149, 221)
    BRICK_OUTLINE = (0, 0, 0)

    HUD_COLOR = (255, 255, 255)
    DEBUG_COLOR = (255, 255, 100)

    SCREEN_TEXT = {
        GameState.START: ("BRICK BREAKER", "Press SPACE to start", (255, 255, 255)),
        GameState.GAME_OVER: ("GAME OVER", "Press SPACE to restart", (255, 100, 100)),
        GameState.WON: ("YOU WIN!", "Press SPACE to play again", (100, 255, 100)),
    }

    def __init__(self):
        """Initialize geometric skin."""
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 36)
            self._big_font = pygame.font.Font(None, 72)

    def get_brick_color(self, brick: 'Brick') -> Tuple[int, int, int]:
        """Get RGB color for a brick's color tag (white if unknown)."""
        return BRICK_COLORS.get(brick.color, (255, 255, 255))

    def render_background(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND_COLOR)

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render paddle as a colored rectangle."""
        pygame.draw.rect(screen, self.PADDLE_COLOR, paddle.rect)
        pygame.draw.rect(screen, self.PADDLE_OUTLINE, paddle.rect, 1)

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render ball as a circle."""
        pos = (int(ball.x), int(ball.y))
        pygame.draw.circle(screen, self.BALL_COLOR, pos, int(ball.radius))

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render an unbroken brick as a filled, outlined rectangle."""
        if brick.broken:
            return

        pygame.draw.rect(screen, self.get_brick_color(brick), brick.rect)
        pygame.draw.rect(screen, self.BRICK_OUTLINE, brick.rect, 1)

    def render_hud(
        self,
        screen: pygame.Surface,
        score: int,
        lives: int,
    ) -> None:
        """Render HUD with score and lives."""
        self._ensure_font()

        # Score (top left)
        score_text = self._font.render(f"Score: {score}", True, self.HUD_COLOR)
        screen.blit(score_text, (10, 10))

        # Lives (top right)
        lives_text = self._font.render(f"Lives: {lives}", True, self.HUD_COLOR)
        lives_rect = lives_text.get_rect()
        lives_rect.topright = (screen.get_width() - 10, 10)
        screen.blit(lives_text, lives_rect)

    def render_screen(
        self,
        screen: pygame.Surface,
        state: GameState,
        score: int,
    ) -> None:
        """Render title and hint for the start, game over and win screens."""
        if state not in self.SCREEN_TEXT:
            return
        self._ensure_font()

        title, hint, color = self.SCREEN_TEXT[state]
        center_x = screen.get_width() // 2
        center_y = screen.get_height() // 2

        text = self._big_font.render(title, True, color)
        screen.blit(text, text.get_rect(center=(center_x, center_y - 40)))

        if state != GameState.START:
            score_text = self._font.render(f"Final Score: {score}", True, self.HUD_COLOR)
            screen.blit(score_text, score_text.get_rect(center=(center_x, center_y + 10)))

        hint_text = self._font.render(hint, True, self.HUD_COLOR)
        screen.blit(hint_text, hint_text.get_rect(center=(center_x, center_y + 50)))

    def render_debug(self, screen: pygame.Surface, message: str) -> None:
        """Render debug message along the bottom edge."""
        if not message:
            return
        self._ensure_font()
        text = self._font.render(message, True, self.DEBUG_COLOR)
        screen.blit(text, (10, screen.get_height() - 30))
