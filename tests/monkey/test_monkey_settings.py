"""Tests for Monkey settings persistence."""

import json

import pytest

from monkey import MonkeySettings


class TestMonkeySettings:
    """Test defaults, loading and saving."""

    def test_defaults(self):
        """Default settings match the interactive conventions."""
        settings = MonkeySettings.create_default()
        assert settings.prompt == ">> "
        assert settings.filename == "<stdin>"
        assert settings.show_face is True
        assert settings.log_level == "WARNING"

    def test_save_and_load(self, tmp_path):
        """Saved settings load back equal."""
        path = tmp_path / "config" / "settings.json"
        original = MonkeySettings(prompt="? ", filename="shell", show_face=False, log_level="DEBUG")
        original.save(str(path))

        assert path.exists()
        assert MonkeySettings.load(str(path)) == original

    def test_partial_file_keeps_defaults(self, tmp_path):
        """Keys missing from the file keep their default values."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"prompt": "$ ", "log_level": "info", "unknown": 1}), encoding="utf-8")

        settings = MonkeySettings.load(str(path))
        assert settings.prompt == "$ "
        assert settings.log_level == "INFO"
        assert settings.filename == "<stdin>"
        assert settings.show_face is True

    @pytest.mark.parametrize("value", ["false", 0, None, "no"])
    def test_show_face_requires_boolean(self, tmp_path, value):
        """Non-boolean show_face values keep the default."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"show_face": value}), encoding="utf-8")
        assert MonkeySettings.load(str(path)).show_face is True

    def test_show_face_false(self, tmp_path):
        """A JSON false turns the face off."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"show_face": False}), encoding="utf-8")
        assert MonkeySettings.load(str(path)).show_face is False

    def test_invalid_json(self, tmp_path):
        """Malformed files raise a decode error."""
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            MonkeySettings.load(str(path))

    def test_missing_file(self, tmp_path):
        """A missing file raises OSError."""
        with pytest.raises(OSError):
            MonkeySettings.load(str(tmp_path / "absent.json"))
