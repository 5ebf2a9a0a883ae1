"""Configuration for BrickBreaker.

Contains arena dimensions, physics constants, brick grid layout,
difficulty presets, and color definitions. A GameConfig is an immutable
bundle fixed for the duration of a round.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

# Arena dimensions
ARENA_WIDTH: int = 800
ARENA_HEIGHT: int = 600

# Ball physics (pixels per frame)
BALL_SIZE: float = 10.0
BALL_SPEED: float = 4.0
MAX_BALL_SPEED: float = 8.0
BALL_SPEED_INCREASE: float = 0.2
BALL_START_OFFSET: float = 30.0   # Distance above the arena bottom

PADDLE_WIDTH: float = 100.0
PADDLE_HEIGHT: float = 10.0
PADDLE_SPEED: float = 8.0
PADDLE_BOTTOM_MARGIN: float = 10.0

# Game rules
LIVES: int = 3
POINTS_PER_BRICK: int = 10

# Brick grid defaults
BRICK_ROWS: int = 5
BRICK_COLUMNS: int = 9
BRICK_WIDTH: float = 75.0
BRICK_HEIGHT: float = 20.0
BRICK_PADDING: float = 10.0
BRICK_OFFSET_TOP: float = 60.0
BRICK_OFFSET_LEFT: float = 30.0
BRICK_ROW_COLORS: Tuple[str, ...] = ('red', 'orange', 'yellow', 'green', 'blue')

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (20, 20, 30)

# Brick colors mapping
BRICK_COLORS: Dict[str, Tuple[int, int, int]] = {
    'red': (255, 100, 100),
    'orange': (255, 180, 100),
    'yellow': (255, 255, 100),
    'green': (100, 255, 100),
    'blue': (100, 100, 255),
    'purple': (200, 100, 255),
    'cyan': (100, 255, 255),
    'gray': (150, 150, 150),
    'white': (255, 255, 255),
}


class ConfigError(Exception):
    """Raised when a configuration file or value cannot be used."""
    pass


class BallConfig(BaseModel):
    """Ball size and speed tuning."""

    size: float = Field(default=BALL_SIZE, gt=0)
    speed: float = Field(default=BALL_SPEED, ge=0)
    max_speed: float = Field(default=MAX_BALL_SPEED, ge=0)
    speed_increase: float = Field(default=BALL_SPEED_INCREASE, ge=0)
    start_offset: float = BALL_START_OFFSET

    model_config = ConfigDict(frozen=True, extra='forbid')

    @model_validator(mode='after')
    def _speed_within_max(self) -> 'BallConfig':
        if self.speed > self.max_speed:
            raise ValueError(
                f"ball speed {self.speed} exceeds max_speed {self.max_speed}"
            )
        return self


class PaddleConfig(BaseModel):
    """Paddle size and movement speed."""

    width: float = Field(default=PADDLE_WIDTH, gt=0)
    height: float = Field(default=PADDLE_HEIGHT, gt=0)
    speed: float = Field(default=PADDLE_SPEED, ge=0)
    bottom_margin: float = PADDLE_BOTTOM_MARGIN

    model_config = ConfigDict(frozen=True, extra='forbid')


class BrickGridConfig(BaseModel):
    """Brick grid layout.

    When ``layout`` is given it replaces the rows x columns rectangle with
    an ASCII map: one line per row, one character per column. Blank, '.',
    '-' and '_' leave a gap; any other character places a brick.
    """

    rows: int = Field(default=BRICK_ROWS, ge=0)
    columns: int = Field(default=BRICK_COLUMNS, ge=0)
    width: float = Field(default=BRICK_WIDTH, gt=0)
    height: float = Field(default=BRICK_HEIGHT, gt=0)
    padding: float = Field(default=BRICK_PADDING, ge=0)
    offset_top: float = BRICK_OFFSET_TOP
    offset_left: float = BRICK_OFFSET_LEFT
    colors: Tuple[str, ...] = Field(default=BRICK_ROW_COLORS, min_length=1)
    layout: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra='forbid')


class GameConfig(BaseModel):
    """Read-only bundle of every constant the core depends on."""

    width: float = Field(default=ARENA_WIDTH, gt=0)
    height: float = Field(default=ARENA_HEIGHT, gt=0)
    lives: int = Field(default=LIVES, ge=1)
    points_per_brick: int = Field(default=POINTS_PER_BRICK, ge=0)
    # Stop the brick pass after the first hit in a frame
    first_hit_only: bool = False

    ball: BallConfig = Field(default_factory=BallConfig)
    paddle: PaddleConfig = Field(default_factory=PaddleConfig)
    bricks: BrickGridConfig = Field(default_factory=BrickGridConfig)

    model_config = ConfigDict(frozen=True, extra='forbid')


@dataclass
class DifficultyPreset:
    """Ball and paddle tuning for a difficulty level.

    - easy: slow ball, wide paddle
    - normal: the stock constants
    - hard: fast ball, narrow paddle
    """

    name: str
    ball_speed: float
    max_ball_speed: float
    paddle_width: float
    paddle_speed: float


DIFFICULTY_PRESETS: Dict[str, DifficultyPreset] = {
    'easy': DifficultyPreset(
        name='easy',
        ball_speed=3.0,
        max_ball_speed=6.0,
        paddle_width=140.0,
        paddle_speed=8.0,
    ),
    'normal': DifficultyPreset(
        name='normal',
        ball_speed=BALL_SPEED,
        max_ball_speed=MAX_BALL_SPEED,
        paddle_width=PADDLE_WIDTH,
        paddle_speed=PADDLE_SPEED,
    ),
    'hard': DifficultyPreset(
        name='hard',
        ball_speed=5.0,
        max_ball_speed=11.0,
        paddle_width=75.0,
        paddle_speed=10.0,
    ),
}


def get_difficulty_preset(name: str) -> DifficultyPreset:
    """Get difficulty preset by name, with fallback to normal."""
    return DIFFICULTY_PRESETS.get(name, DIFFICULTY_PRESETS['normal'])


def _merge(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``updates`` into a copy of ``base``."""
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def build_config(
    data: Optional[Dict[str, Any]] = None,
    difficulty: Optional[str] = None,
    **overrides: Any,
) -> GameConfig:
    """Build a validated GameConfig.

    Layers, lowest priority first: defaults, ``data`` (e.g. parsed YAML),
    the difficulty preset, then keyword ``overrides``. Nested sections
    can be overridden with dicts, e.g. ``ball={'speed': 5.0}``.

    Raises:
        ConfigError: If the merged values fail validation
    """
    merged: Dict[str, Any] = dict(data or {})

    if difficulty is not None:
        preset = get_difficulty_preset(difficulty)
        merged = _merge(merged, {
            'ball': {'speed': preset.ball_speed, 'max_speed': preset.max_ball_speed},
            'paddle': {'width': preset.paddle_width, 'speed': preset.paddle_speed},
        })

    merged = _merge(merged, {k: v for k, v in overrides.items() if v is not None})

    try:
        return GameConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid game configuration: {e}") from e


def load_config(
    path: Union[str, Path],
    difficulty: Optional[str] = None,
    **overrides: Any,
) -> GameConfig:
    """Load a GameConfig from a YAML file.

    Example YAML:
        lives: 5
        ball:
          speed: 3.5
        bricks:
          rows: 3
          layout: |
            XXXXXXXXX
            X.X.X.X.X

    Args:
        path: YAML file path
        difficulty: Optional preset name applied on top of the file
        **overrides: Values taking precedence over file and preset

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or
            its values fail validation
    """
    path = Path(path)
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return build_config(data, difficulty=difficulty, **overrides)
