"""Base class for BrickBreaker skins.

Skins handle ALL rendering - the session only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

from ..game_state import GameState

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class BrickBreakerSkin(ABC):
    """Base class for skins.

    Skins read entity geometry and session stats and decide how to
    present them. They never change game state.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render a brick. Broken bricks must not be drawn.

        Args:
            brick: Brick to render
            screen: Pygame surface to draw on
        """
        pass

    def render_background(self, screen: pygame.Surface) -> None:
        """Clear the screen before a frame."""
        pass

    def render_hud(
        self,
        screen: pygame.Surface,
        score: int,
        lives: int,
    ) -> None:
        """Render the heads-up display (score and lives).

        Args:
            screen: Pygame surface to draw on
            score: Current score
            lives: Remaining lives
        """
        pass

    def render_screen(
        self,
        screen: pygame.Surface,
        state: GameState,
        score: int,
    ) -> None:
        """Render the overlay for a non-playing state (start, game over, win).

        Args:
            screen: Pygame surface to draw on
            state: State whose screen to show
            score: Current score
        """
        pass

    def render_debug(self, screen: pygame.Surface, message: str) -> None:
        """Render a debug message."""
        pass
