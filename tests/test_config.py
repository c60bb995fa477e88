"""Tests for configuration."""

from pathlib import Path

import pytest

from pvg.config import Config


class TestConfig:
    """Environment-driven settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PVG_WORKSPACE", "/tmp/scenes")
        monkeypatch.setenv("PVG_DOCUMENT", "intro.yaml")
        monkeypatch.setenv("PVG_JSON_INDENT", "4")
        cfg = Config()
        assert cfg.document_path == Path("/tmp/scenes/intro.yaml")
        assert cfg.json_indent == 4

    def test_defaults(self, monkeypatch):
        for name in ("PVG_WORKSPACE", "PVG_DOCUMENT", "PVG_JSON_INDENT"):
            monkeypatch.delenv(name, raising=False)
        cfg = Config()
        assert cfg.document_path == Path("project.json")
        assert cfg.json_indent == 2

    def test_negative_indent_rejected(self):
        with pytest.raises(ValueError):
            Config(json_indent=-1).validate_required()
