"""Tests for YAML configuration loading."""

import logging

import pytest

from dicechess.config import EngineConfig, load_config


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.seed is None
        assert not config.auto_end_turn
        assert not config.skip_roll_animation
        assert config.log_level == "INFO"

    def test_from_dict_partial(self):
        config = EngineConfig.from_dict({"seed": 7})
        assert config.seed == 7
        assert not config.auto_end_turn

    def test_from_dict_none(self):
        assert EngineConfig.from_dict(None) == EngineConfig()

    def test_unknown_key_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="dicechess.config"):
            config = EngineConfig.from_dict({"board_size": 10})
        assert config == EngineConfig()
        assert "board_size" in caplog.text

    def test_log_level_normalized(self):
        assert EngineConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("data", [
        {"seed": "abc"},
        {"seed": True},
        {"auto_end_turn": "yes"},
        {"skip_roll_animation": 1},
        {"log_level": "LOUD"},
    ])
    def test_invalid_values(self, data):
        with pytest.raises(ValueError):
            EngineConfig.from_dict(data)

    def test_not_a_mapping(self):
        with pytest.raises(ValueError):
            EngineConfig.from_dict(["seed", 1])


class TestLoadConfig:
    def test_bundled_default(self):
        assert load_config() == EngineConfig()

    def test_load_file(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text(
            "engine:\n"
            "  seed: 3\n"
            "  auto_end_turn: true\n"
            "  log_level: warning\n"
        )
        config = load_config(path)
        assert config.seed == 3
        assert config.auto_end_turn
        assert config.log_level == "WARNING"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == EngineConfig()

    def test_empty_engine_section(self, tmp_path):
        path = tmp_path / "bare.yaml"
        path.write_text("engine:\n")
        assert load_config(str(path)) == EngineConfig()

    def test_top_level_list(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")
