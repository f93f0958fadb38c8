"""Tests for configuration loading."""

import json

import pytest

from music_catalog.exceptions import ConfigurationError
from music_catalog.models.config import (
    CatalogConfig,
    config_from_dict,
    create_default_config,
    load_config,
    save_config,
)


class TestCatalogConfig:

    def test_defaults(self):
        config = CatalogConfig.default()

        assert config.sentinels.no_artist == "No artist found"
        assert config.sentinels.no_song == "No song found"
        assert config.likes.propagate_to_artist is True
        assert config.logging.level == "WARNING"
        assert config.events.history_limit == 1000

    def test_partial_dict(self):
        config = config_from_dict({"likes": {"propagate_to_artist": False}})

        assert config.likes.propagate_to_artist is False
        assert config.sentinels.no_song == "No song found"

    @pytest.mark.parametrize("data", [
        {"unknown": {}},
        {"likes": {"unknown": True}},
        {"likes": "yes"},
        {"likes": {"propagate_to_artist": "yes"}},
        {"events": {"history_limit": 0}},
        {"events": {"history_limit": True}},
        {"logging": {"level": "LOUD"}},
    ])
    def test_invalid_values_rejected(self, data):
        with pytest.raises(ConfigurationError):
            config_from_dict(data)


class TestConfigFiles:

    def test_round_trip(self, tmp_path):
        path = tmp_path / "config.json"
        config = CatalogConfig()
        config.sentinels.no_song = "nothing"

        save_config(config, path)
        loaded = load_config(path)

        assert loaded == config

    def test_create_default_config(self, tmp_path):
        path = tmp_path / "config.json"

        create_default_config(path)

        data = json.loads(path.read_text())
        assert set(data) == {"sentinels", "likes", "logging", "events"}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(tmp_path / "missing.json")
