"""Tests for configuration models, presets and YAML loading."""

import pytest
from pydantic import ValidationError

from brickbreaker.config import (
    DIFFICULTY_PRESETS,
    BallConfig,
    ConfigError,
    GameConfig,
    build_config,
    get_difficulty_preset,
    load_config,
)


class TestDefaults:
    """Stock configuration values."""

    def test_arena(self):
        config = GameConfig()
        assert (config.width, config.height) == (800, 600)
        assert config.lives == 3
        assert config.points_per_brick == 10
        assert config.first_hit_only is False

    def test_ball(self):
        ball = GameConfig().ball
        assert ball.size == 10
        assert ball.speed == 4
        assert ball.max_speed == 8
        assert ball.speed_increase == pytest.approx(0.2)

    def test_brick_grid(self):
        bricks = GameConfig().bricks
        assert (bricks.rows, bricks.columns) == (5, 9)
        assert bricks.colors == ('red', 'orange', 'yellow', 'green', 'blue')
        assert bricks.layout is None

    def test_frozen(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.lives = 5

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            GameConfig(gravity=9.8)


class TestValidation:
    """Invalid values."""

    def test_speed_above_max(self):
        with pytest.raises(ValidationError):
            BallConfig(speed=9.0, max_speed=8.0)

    def test_zero_lives(self):
        with pytest.raises(ConfigError):
            build_config(lives=0)

    def test_empty_colors(self):
        with pytest.raises(ConfigError):
            build_config(bricks={'colors': []})

    def test_negative_arena(self):
        with pytest.raises(ConfigError):
            build_config(width=-1)


class TestDifficulty:
    """Difficulty presets."""

    def test_known_presets(self):
        assert set(DIFFICULTY_PRESETS) == {'easy', 'normal', 'hard'}

    def test_unknown_falls_back_to_normal(self):
        assert get_difficulty_preset('nightmare') is DIFFICULTY_PRESETS['normal']

    def test_easy_applied(self):
        config = build_config(difficulty='easy')
        assert config.ball.speed == 3.0
        assert config.ball.max_speed == 6.0
        assert config.paddle.width == 140.0

    def test_hard_applied(self):
        config = build_config(difficulty='hard')
        assert config.ball.speed == 5.0
        assert config.paddle.width == 75.0

    def test_normal_matches_defaults(self):
        assert build_config(difficulty='normal') == GameConfig()


class TestBuildConfig:
    """Layering of data, preset and overrides."""

    def test_no_arguments_is_default(self):
        assert build_config() == GameConfig()

    def test_none_overrides_ignored(self):
        config = build_config(lives=None, width=None)
        assert config.lives == 3
        assert config.width == 800

    def test_nested_override_keeps_siblings(self):
        config = build_config(ball={'speed': 5.0})
        assert config.ball.speed == 5.0
        assert config.ball.max_speed == 8.0

    def test_override_beats_preset(self):
        config = build_config(difficulty='easy', paddle={'width': 200})
        assert config.paddle.width == 200
        assert config.paddle.speed == 8.0

    def test_preset_beats_data(self):
        config = build_config({'ball': {'speed': 2.0}}, difficulty='hard')
        assert config.ball.speed == 5.0

    def test_data_not_mutated(self):
        data = {'ball': {'speed': 2.0}}
        build_config(data, difficulty='hard')
        assert data == {'ball': {'speed': 2.0}}


class TestLoadConfig:
    """YAML loading."""

    def test_load(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text(
            "lives: 5\n"
            "first_hit_only: true\n"
            "ball:\n"
            "  speed: 3.5\n"
            "bricks:\n"
            "  layout: |\n"
            "    XX\n"
            "    .X\n"
        )
        config = load_config(path)
        assert config.lives == 5
        assert config.first_hit_only is True
        assert config.ball.speed == 3.5
        assert config.bricks.layout == "XX\n.X\n"

    def test_empty_file_is_default(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == GameConfig()

    def test_overrides_beat_file(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("lives: 5\n")
        assert load_config(str(path), lives=2).lives == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("ball: [unclosed\n")
        with pytest.raises(ConfigError, match="Malformed"):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad_values.yaml"
        path.write_text("ball:\n  speed: 20\n")
        with pytest.raises(ConfigError, match="Invalid"):
            load_config(path)
