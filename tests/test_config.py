"""
Unit tests for the config module.
"""

import json

from md2mrkdwn.config import DEFAULT_SETTINGS, load_config


def write_config(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_when_missing(self, tmp_path):
        assert load_config(str(tmp_path / "missing.json")) == DEFAULT_SETTINGS

    def test_default_file_in_working_directory(self, tmp_path):
        """md2mrkdwn.json in the working directory is picked up."""
        write_config(tmp_path / "md2mrkdwn.json", {"output": "blocks"})
        assert load_config()["output"] == "blocks"

    def test_env_selects_config_file(self, tmp_path, monkeypatch):
        path = write_config(tmp_path / "custom.json", {"plain": True})
        monkeypatch.setenv("MD2MRKDWN_CONFIG", path)
        assert load_config()["plain"] is True

    def test_file_values(self, tmp_path):
        path = write_config(tmp_path / "c.json", {
            "output": "BLOCKS", "plain": "yes", "json_indent": 4, "log_level": "debug",
        })
        settings = load_config(path)
        assert settings == {"output": "blocks", "plain": True, "json_indent": 4, "log_level": "DEBUG"}

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = write_config(tmp_path / "c.json", {"output": "blocks", "json_indent": 2})
        monkeypatch.setenv("MD2MRKDWN_OUTPUT", "text")
        monkeypatch.setenv("MD2MRKDWN_JSON_INDENT", "8")
        settings = load_config(path)
        assert settings["output"] == "text"
        assert settings["json_indent"] == 8

    def test_invalid_output_mode_ignored(self, tmp_path):
        path = write_config(tmp_path / "c.json", {"output": "html"})
        assert load_config(path)["output"] == "text"

    def test_invalid_indent(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MD2MRKDWN_JSON_INDENT", "wide")
        assert load_config(str(tmp_path / "none.json"))["json_indent"] is None

    def test_unknown_keys_ignored(self, tmp_path):
        path = write_config(tmp_path / "c.json", {"colour": "red"})
        assert load_config(path) == DEFAULT_SETTINGS

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_config(str(path)) == DEFAULT_SETTINGS

    def test_non_object_json(self, tmp_path):
        path = write_config(tmp_path / "list.json", ["output", "blocks"])
        assert load_config(path) == DEFAULT_SETTINGS

    def test_defaults_not_mutated(self, tmp_path):
        path = write_config(tmp_path / "c.json", {"plain": True})
        load_config(path)
        assert DEFAULT_SETTINGS["plain"] is False
