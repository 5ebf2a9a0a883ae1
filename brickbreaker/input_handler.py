"""Keyboard and pointer input for the pygame host.

Translates pygame events into paddle commands and start/restart actions.
The paddle is looked up on the session for every event, so a restart
(which creates a new paddle) needs no re-wiring.
"""

from typing import TYPE_CHECKING, Iterable, Optional, Tuple

import pygame

from .game_state import GameState
from .logging import get_logger

if TYPE_CHECKING:
    from .session import GameSession

log = get_logger('input')


class InputHandler:
    """Maps arrow/A-D keys, mouse motion and SPACE/ENTER onto the session."""

    LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
    RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
    ACTION_KEYS = (pygame.K_SPACE, pygame.K_RETURN)

    def __init__(
        self,
        session: 'GameSession',
        window_size: Optional[Tuple[int, int]] = None,
    ):
        """Initialize input handler.

        Args:
            session: Session to drive
            window_size: Window size in pixels, if it differs from the arena
        """
        self._session = session
        self._scale = (1.0, 1.0)
        if window_size is not None:
            self.update_scale(*window_size)

    @property
    def scale(self) -> Tuple[float, float]:
        """Window-to-arena scale factors (x, y)."""
        return self._scale

    def update_scale(self, window_width: int, window_height: int) -> None:
        """Recompute pointer scaling after the window is resized."""
        self._scale = (
            self._session.width / max(1, window_width),
            self._session.height / max(1, window_height),
        )
        log.debug("Pointer scale now %.3f x %.3f", *self._scale)

    def to_arena(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        """Convert a window position to arena coordinates."""
        return (pos[0] * self._scale[0], pos[1] * self._scale[1])

    def perform_action(self) -> None:
        """Start from the title screen, or restart after the round ended."""
        state = self._session.state
        if state == GameState.START:
            self._session.start_game()
        elif state.is_terminal:
            self._session.restart_game()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one pygame event.

        Returns:
            True if the event was consumed
        """
        if event.type == pygame.KEYDOWN and event.key in self.ACTION_KEYS:
            self.perform_action()
            return True

        if event.type == pygame.VIDEORESIZE:
            self.update_scale(event.w, event.h)
            return True

        paddle = self._session.paddle
        if paddle is None or self._session.state != GameState.PLAYING:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key in self.LEFT_KEYS:
                paddle.move_left()
                return True
            if event.key in self.RIGHT_KEYS:
                paddle.move_right()
                return True

        elif event.type == pygame.KEYUP:
            # Only stop if the released key is the one driving the paddle
            if event.key in self.LEFT_KEYS and paddle.dx < 0:
                paddle.stop()
                return True
            if event.key in self.RIGHT_KEYS and paddle.dx > 0:
                paddle.stop()
                return True

        elif event.type == pygame.MOUSEMOTION:
            x, _ = self.to_arena(event.pos)
            paddle.set_position(x)
            return True

        return False

    def handle_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            self.handle_event(event)
