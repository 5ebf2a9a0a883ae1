"""Status UI for the pygame host.

GameUI listens to the session for score/lives changes and state
transitions, and draws each frame through a skin.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from .game_state import GameState
from .logging import get_logger
from .skins import BrickBreakerSkin, GeometricSkin

if TYPE_CHECKING:
    from .session import GameSession

log = get_logger('ui')


class GameUI:
    """Session listener and frame renderer backed by a pygame surface.

    The session calls render() once per processed frame. Once play
    stops the host keeps calling render() itself so the current screen
    (start, game over, win) stays visible.
    """

    def __init__(
        self,
        screen: pygame.Surface,
        skin: Optional[BrickBreakerSkin] = None,
    ):
        self._screen = screen
        self._skin = skin or GeometricSkin()
        self._score = 0
        self._lives = 0
        self._current_screen = GameState.START

    @property
    def score(self) -> int:
        return self._score

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def current_screen(self) -> GameState:
        """State whose screen is showing."""
        return self._current_screen

    @property
    def skin(self) -> BrickBreakerSkin:
        return self._skin

    def on_stats_changed(self, score: int, lives: int) -> None:
        self._score = score
        self._lives = lives

    def on_state_changed(self, state: GameState) -> None:
        log.debug("Showing %s screen", state.value)
        self._current_screen = state

    def render(self, session: 'GameSession') -> None:
        """Draw bricks, paddle, ball, HUD and any state overlay."""
        screen = self._screen
        self._skin.render_background(screen)

        for brick in session.bricks:
            if not brick.broken:
                self._skin.render_brick(brick, screen)

        if session.paddle is not None:
            self._skin.render_paddle(session.paddle, screen)
        if session.ball is not None:
            self._skin.render_ball(session.ball, screen)

        self._skin.render_hud(screen, self._score, self._lives)

        if self._current_screen == GameState.PLAYING:
            self._skin.render_debug(screen, session.debug_message)
        else:
            self._skin.render_screen(screen, self._current_screen, self._score)
