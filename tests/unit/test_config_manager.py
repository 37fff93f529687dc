"""Tests for ConfigManager persistence."""

import json

import pytest

from latin_drill.config import ConfigManager, create_default_config
from latin_drill.models import DrillType


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point ConfigManager at a temporary file."""
    path = tmp_path / "config" / "config.json"
    monkeypatch.setattr(ConfigManager, "CONFIG_FILE", path)
    return path


class TestSaveAndLoad:
    """Tests for saving and loading configuration."""

    def test_load_without_file_returns_defaults(self, config_file):
        assert not ConfigManager.config_exists()
        assert ConfigManager.load_config() == create_default_config()

    def test_save_writes_json_values(self, config_file, tmp_path):
        config = create_default_config(
            random_seed=5,
            vocabulary_path=tmp_path / "words.json",
            default_drill_types=(DrillType.FILL_IN_BLANK,),
        )
        ConfigManager.save_config(config)

        data = json.loads(config_file.read_text(encoding="utf-8"))
        assert data["random_seed"] == 5
        assert data["vocabulary_path"] == str(tmp_path / "words.json")
        assert data["default_drill_types"] == ["fillInBlank"]

    def test_saved_config_loads_back(self, config_file, tmp_path):
        config = create_default_config(
            queue_size=3,
            allowed_durations=(1, 2),
            vocabulary_path=tmp_path / "words.json",
            default_drill_types=(DrillType.TYPE_LATIN_WORD,),
        )
        ConfigManager.save_config(config)

        assert ConfigManager.load_config() == config

    def test_overrides_win_over_file(self, config_file):
        ConfigManager.save_config(create_default_config(random_seed=5))
        assert ConfigManager.load_config(random_seed=9).random_seed == 9


class TestInvalidFiles:
    """Tests for falling back on unusable files."""

    def test_invalid_json_falls_back_to_defaults(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("{not json", encoding="utf-8")
        assert ConfigManager.load_config() == create_default_config()

    def test_unknown_key_falls_back_to_defaults(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({"no_such_option": 1}), encoding="utf-8")
        assert ConfigManager.load_config() == create_default_config()

    def test_invalid_value_falls_back_with_overrides(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({"queue_size": 0}), encoding="utf-8")
        assert ConfigManager.load_config(random_seed=3) == create_default_config(random_seed=3)

    def test_delete_config(self, config_file):
        ConfigManager.save_config(create_default_config())
        assert ConfigManager.config_exists()
        ConfigManager.delete_config()
        assert not ConfigManager.config_exists()
