"""BrickBreaker play session.

The session owns the paddle, ball, bricks, score and lives, and walks the
START -> PLAYING -> GAME_OVER | WON lifecycle. Each frame it updates the
entities, runs the collision engine, hands itself to the renderer, checks
for a win, and asks the host for the next frame.

Rendering, input and status panels are collaborators:
- a FrameRenderer is called once per processed frame
- SessionListeners hear about score/lives changes and state transitions
- input code drives the paddle through its move/stop/set_position methods
"""

from typing import Callable, List, Optional, Protocol, Sequence

from .config import GameConfig
from .entities.ball import Ball
from .entities.brick import Brick
from .entities.paddle import Paddle
from .frame_scheduler import FrameCallback, FrameScheduler
from .game_state import GameState
from .level_loader import build_brick_grid
from .logging import emit_record, get_logger
from .physics.collision import CollisionEngine, CollisionReport

log = get_logger('session')

RequestFrame = Callable[[FrameCallback], None]


class SessionListener(Protocol):
    """Status collaborator (score panel, screen switcher)."""

    def on_stats_changed(self, score: int, lives: int) -> None:
        ...

    def on_state_changed(self, state: GameState) -> None:
        ...


class FrameRenderer(Protocol):
    """Draws the session after each frame's collision pass."""

    def render(self, session: 'GameSession') -> None:
        ...


class GameSession:
    """One brick-breaker play session and its frame loop.

    The session is the sole owner of its entities. Ball and paddle get
    the session only as an arena (bounds plus ball-lost sink).

    Usage:
        session = GameSession(GameConfig())
        session.start_game()
        while session.state == GameState.PLAYING:
            session.scheduler.run_frame()
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        renderer: Optional[FrameRenderer] = None,
        request_frame: Optional[RequestFrame] = None,
        listeners: Sequence[SessionListener] = (),
    ):
        """Initialize session in the START state.

        Args:
            config: Game configuration (defaults if None)
            renderer: Called with the session after every frame
            request_frame: Host scheduling hook; a private
                FrameScheduler is used when omitted
            listeners: Status listeners, notified from construction on
        """
        self._config = config or GameConfig()
        self._renderer = renderer
        self._listeners: List[SessionListener] = list(listeners)

        self._scheduler: Optional[FrameScheduler] = None
        if request_frame is None:
            self._scheduler = FrameScheduler()
            request_frame = self._scheduler.request_frame
        self._request_frame = request_frame
        # Bumped by start/restart; callbacks from older loops are ignored
        self._loop_generation = 0
        self._pending_generation: Optional[int] = None
        self._frame_count = 0

        self._state = GameState.START
        self._score = 0
        self._lives = self._config.lives
        self._debug_message = ''

        self._paddle: Optional[Paddle] = None
        self._ball: Optional[Ball] = None
        self._bricks: List[Brick] = []
        self._last_report = CollisionReport()

        self._collisions = CollisionEngine(
            self,
            points_per_brick=self._config.points_per_brick,
            first_hit_only=self._config.first_hit_only,
        )

        self.init()

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def width(self) -> float:
        """Arena width."""
        return self._config.width

    @property
    def height(self) -> float:
        """Arena height."""
        return self._config.height

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._score

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def paddle(self) -> Optional[Paddle]:
        return self._paddle

    @property
    def ball(self) -> Optional[Ball]:
        return self._ball

    @property
    def bricks(self) -> Sequence[Brick]:
        """All bricks of the round in layout order, broken ones included."""
        return tuple(self._bricks)

    @property
    def remaining_bricks(self) -> int:
        return sum(1 for brick in self._bricks if not brick.broken)

    @property
    def debug_message(self) -> str:
        return self._debug_message

    @property
    def frame_count(self) -> int:
        """Frames processed since the session was created."""
        return self._frame_count

    @property
    def last_report(self) -> CollisionReport:
        """Collision report of the most recent frame."""
        return self._last_report

    @property
    def scheduler(self) -> Optional[FrameScheduler]:
        """The private scheduler, or None when the host supplied one."""
        return self._scheduler

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_listener(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_stats(self) -> None:
        for listener in self._listeners:
            listener.on_stats_changed(self._score, self._lives)

    def _set_state(self, state: GameState) -> None:
        previous = self._state
        self._state = state
        log.info("State %s -> %s (score=%d, lives=%d)",
                 previous.value, state.value, self._score, self._lives)
        emit_record('session', {
            'type': 'transition',
            'from': previous.value,
            'to': state.value,
            'frame': self._frame_count,
            'score': self._score,
            'lives': self._lives,
        })
        for listener in self._listeners:
            listener.on_state_changed(state)

    # =========================================================================
    # Round setup
    # =========================================================================

    def init(self) -> None:
        """Create entities and bricks, then show the start screen."""
        self.create_entities()
        self.setup_bricks()
        self._notify_stats()
        self._set_state(GameState.START)

    def create_entities(self) -> None:
        """Create a fresh paddle and ball."""
        self._paddle = Paddle(self._config.paddle, self)
        self._ball = Ball(self._config.ball, self)

    def setup_bricks(self) -> None:
        """Replace the brick list with a fresh grid."""
        self._bricks = build_brick_grid(self._config.bricks)
        log.debug("Built %d bricks", len(self._bricks))

    # =========================================================================
    # Lifecycle actions
    # =========================================================================

    def start_game(self) -> None:
        """Begin play from the start screen and run the first frame."""
        if self._state != GameState.START:
            log.warning("start_game ignored in state %s", self._state.value)
            return

        self._set_state(GameState.PLAYING)
        self._loop_generation += 1
        self.game_loop()

    def restart_game(self) -> None:
        """Reinitialize everything and resume play immediately."""
        self._score = 0
        self._lives = self._config.lives
        self._debug_message = ''

        self.create_entities()
        self.setup_bricks()

        self._notify_stats()
        self._set_state(GameState.PLAYING)
        self._loop_generation += 1
        self.game_loop()

    def game_over(self) -> None:
        self._set_state(GameState.GAME_OVER)

    def win(self) -> None:
        self._set_state(GameState.WON)

    # =========================================================================
    # Frame loop
    # =========================================================================

    def _schedule_next_frame(self) -> None:
        # At most one live frame per loop generation
        if self._pending_generation == self._loop_generation:
            return
        generation = self._loop_generation
        self._pending_generation = generation
        self._request_frame(lambda: self._on_frame(generation))

    def _on_frame(self, generation: int) -> None:
        if generation != self._loop_generation:
            log.trace("Dropped frame from loop generation %d", generation)
            return
        self._pending_generation = None
        self.game_loop()

    def _render(self) -> None:
        if self._renderer is not None:
            self._renderer.render(self)

    def game_loop(self) -> bool:
        """Process one frame: update, collide, render, check for a win.

        Returns:
            True if another frame was scheduled
        """
        if self._state != GameState.PLAYING:
            return False

        if self._paddle is None or self._ball is None:
            log.warning("Frame skipped: paddle or ball not initialized")
            return False

        self._frame_count += 1

        self._paddle.update()
        self._ball.update()

        # Last life lost during the ball update
        if self._state != GameState.PLAYING:
            self._render()
            return False

        self._last_report = self._collisions.check_collisions()

        self._render()

        if self.remaining_bricks == 0:
            self.win()
            return False

        self._schedule_next_frame()
        return True

    # =========================================================================
    # Events from entities and the collision engine
    # =========================================================================

    def ball_lost(self) -> None:
        """Handle the ball falling out of the arena."""
        self._lives = max(0, self._lives - 1)
        self._notify_stats()
        log.info("Ball lost, %d lives left", self._lives)

        if self._lives <= 0:
            self.game_over()
            return

        if self._ball is not None:
            self._ball.reset()

    def add_score(self, points: int) -> None:
        self._score += points
        self._notify_stats()

    def debug(self, message: str) -> None:
        """Set a message for the UI to show while playing."""
        self._debug_message = message
