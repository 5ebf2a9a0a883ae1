"""BrickBreaker - Standalone Entry Point.

Usage:
    brickbreaker
    brickbreaker --difficulty hard
    brickbreaker --config levels/checkers.yaml --lives 5
"""

import argparse
import sys
from typing import List, Optional

import pygame

from .config import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    DIFFICULTY_PRESETS,
    ConfigError,
    GameConfig,
    build_config,
    load_config,
)
from .game_state import GameState
from .input_handler import InputHandler
from .logging import FileSink, close_all_sinks, configure_logging, get_logger, register_sink
from .session import GameSession
from .ui import GameUI

log = get_logger('main')

FPS = 60


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="BrickBreaker - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=None,
                        help=f'Arena width (default {ARENA_WIDTH})')
    parser.add_argument('--height', type=int, default=None,
                        help=f'Arena height (default {ARENA_HEIGHT})')

    # Game options
    parser.add_argument('--config', type=str, default=None,
                        help='YAML game configuration file')
    parser.add_argument('--difficulty', type=str, default=None,
                        choices=sorted(DIFFICULTY_PRESETS),
                        help='Ball/paddle tuning preset')
    parser.add_argument('--lives', type=int, default=None, help='Starting lives')
    parser.add_argument('--first-hit-only', action='store_true', default=None,
                        help='Break at most one brick per frame')

    # Diagnostics
    parser.add_argument('--log-level', type=str, default='INFO',
                        help='TRACE, DEBUG, INFO, WARNING, ERROR or OFF')
    parser.add_argument('--record', type=str, default=None, metavar='DIR',
                        help='Write session transitions as JSONL to DIR')

    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """Build the game configuration from CLI arguments.

    Raises:
        ConfigError: If the config file or values are invalid
    """
    overrides = {
        'width': args.width,
        'height': args.height,
        'lives': args.lives,
        'first_hit_only': args.first_hit_only,
    }
    if args.config:
        return load_config(args.config, difficulty=args.difficulty, **overrides)
    return build_config(difficulty=args.difficulty, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """Run BrickBreaker standalone."""
    args = parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        config = config_from_args(args)
    except ConfigError as e:
        log.error("%s", e)
        return 2

    if args.record:
        register_sink('session', FileSink(log_dir=args.record))

    pygame.init()
    width, height = int(config.width), int(config.height)
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption("BrickBreaker")

    # Draw into an arena-sized canvas and scale it to the window
    canvas = pygame.Surface((width, height))
    ui = GameUI(canvas)
    session = GameSession(config, renderer=ui, listeners=[ui])
    input_handler = InputHandler(session, window_size=screen.get_size())

    print("\n" + "=" * 50)
    print("BRICKBREAKER")
    print("=" * 50)
    print("Controls:")
    print("  - Left/Right or A/D to move the paddle")
    print("  - Mouse to position the paddle")
    print("  - SPACE to start or restart")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    clock = pygame.time.Clock()
    running = True

    try:
        while running:
            clock.tick(FPS)

            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            input_handler.handle_events(events)

            # Runs the frame the session requested, if it is playing
            ran = session.scheduler.run_frame()
            if not ran or session.state != GameState.PLAYING:
                ui.render(session)

            screen = pygame.display.get_surface()
            pygame.transform.scale(canvas, screen.get_size(), screen)
            pygame.display.flip()
    finally:
        close_all_sinks()
        pygame.quit()

    log.info("Final score %d", session.score)
    return 0


if __name__ == "__main__":
    sys.exit(main())
