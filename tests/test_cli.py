"""Tests for CLI module."""

import json

import pytest
from click.testing import CliRunner

from music_catalog.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def script_file(tmp_path):
    path = tmp_path / "script.json"
    path.write_text(json.dumps({"operations": [
        {"op": "create_user", "name": "Alice", "mobile": "999"},
        {"op": "create_album", "title": "Hits", "artist": "A1"},
        {"op": "create_song", "title": "S1", "album": "Hits", "length": 200},
        {"op": "like_song", "mobile": "999", "title": "S1"},
    ]}))
    return path


class TestRunCommand:

    def test_successful_run(self, runner, script_file):
        result = runner.invoke(cli, ["run", str(script_file)])

        assert result.exit_code == 0, result.output
        assert "All 4 operations succeeded" in result.output
        assert "Most popular song: S1" in result.output

    def test_failed_operation_exit_code(self, runner, tmp_path):
        path = tmp_path / "script.json"
        path.write_text(json.dumps({"operations": [
            {"op": "create_song", "title": "S2", "album": "Nope", "length": 100},
        ]}))

        result = runner.invoke(cli, ["run", str(path)])

        assert result.exit_code == 1
        assert "1 of 1 operations failed" in result.output

    def test_invalid_script(self, runner, tmp_path):
        path = tmp_path / "script.json"
        path.write_text(json.dumps({"operations": [{"op": "nope"}]}))

        result = runner.invoke(cli, ["run", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_run_with_config(self, runner, script_file, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"likes": {"propagate_to_artist": False}}))

        result = runner.invoke(cli, ["run", str(script_file), "--config", str(config_path)])

        assert result.exit_code == 0, result.output

    def test_bad_config(self, runner, script_file, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"bogus": {}}))

        result = runner.invoke(cli, ["run", str(script_file), "--config", str(config_path)])

        assert result.exit_code == 1


class TestValidateCommand:

    def test_valid(self, runner, script_file):
        result = runner.invoke(cli, ["validate", str(script_file)])

        assert result.exit_code == 0
        assert "Valid script with 4 operations" in result.output

    def test_invalid(self, runner, tmp_path):
        path = tmp_path / "script.json"
        path.write_text(json.dumps({"operations": [{"op": "create_user"}]}))

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Validation error" in result.output

    def test_not_json(self, runner, tmp_path):
        path = tmp_path / "script.json"
        path.write_text("{")

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1


class TestInitConfig:

    def test_writes_file(self, runner, tmp_path):
        path = tmp_path / "config.json"

        result = runner.invoke(cli, ["init-config", str(path)])

        assert result.exit_code == 0
        assert json.loads(path.read_text())["likes"]["propagate_to_artist"] is True

    def test_refuses_overwrite(self, runner, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{}")

        result = runner.invoke(cli, ["init-config", str(path)])

        assert result.exit_code == 1
        assert path.read_text() == "{}"

    def test_force_overwrite(self, runner, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{}")

        result = runner.invoke(cli, ["init-config", str(path), "--force"])

        assert result.exit_code == 0
        assert "sentinels" in json.loads(path.read_text())
