"""Unit tests for the config module."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from exception_assert.config import CONFIG_FILENAME, DEFAULT_CONFIG, AssertConfig


class TestAssertConfigCreate:
    """Tests for creating AssertConfig instances."""

    def test_no_path_uses_defaults(self):
        """No path gives default config values."""
        cfg = AssertConfig(None)
        assert cfg.details == DEFAULT_CONFIG["details"]
        assert cfg.max_details_length is None
        assert cfg.reporter == "assert"

    def test_nonexistent_path_uses_defaults(self):
        """Nonexistent file path gives default config values."""
        with tempfile.TemporaryDirectory() as tmpdir:
            cfg = AssertConfig(Path(tmpdir) / "missing.json")
            assert cfg.details == "traceback"
            assert cfg.reporter == "assert"

    def test_load_from_file(self):
        """Config is loaded from a JSON file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / CONFIG_FILENAME
            path.write_text(json.dumps({
                "details": "repr",
                "max_details_length": 200,
                "reporter": "context",
            }))
            cfg = AssertConfig(path)
            assert cfg.details == "repr"
            assert cfg.max_details_length == 200
            assert cfg.reporter == "context"

    def test_partial_file_fills_defaults(self):
        """Missing keys in config file are filled from defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / CONFIG_FILENAME
            path.write_text(json.dumps({"details": "repr"}))
            cfg = AssertConfig(path)
            assert cfg.details == "repr"
            assert cfg.reporter == "assert"  # default

    def test_corrupted_file_uses_defaults(self):
        """Corrupted JSON file falls back to defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / CONFIG_FILENAME
            path.write_text("{ invalid json }")
            cfg = AssertConfig(path)
            assert cfg.config == DEFAULT_CONFIG

    def test_non_dict_file_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / CONFIG_FILENAME
            path.write_text("[1, 2]")
            cfg = AssertConfig(path)
            assert cfg.config == DEFAULT_CONFIG


class TestAssertConfigValidation:
    """Invalid values are rejected."""

    def test_invalid_details_in_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / CONFIG_FILENAME
            path.write_text(json.dumps({"details": "xml"}))
            cfg = AssertConfig(path)
            with pytest.raises(ValueError, match="Invalid details style"):
                cfg.details

    def test_invalid_reporter_in_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / CONFIG_FILENAME
            path.write_text(json.dumps({"reporter": "junit"}))
            cfg = AssertConfig(path)
            with pytest.raises(ValueError, match="Invalid reporter"):
                cfg.reporter

    def test_set_config_rejects_invalid(self):
        cfg = AssertConfig(None)
        with pytest.raises(ValueError, match="Invalid details style"):
            cfg.set_config(details="xml")
        with pytest.raises(ValueError, match="Invalid reporter"):
            cfg.set_config(reporter="junit")


class TestAssertConfigSave:
    """Tests for saving configuration."""

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / CONFIG_FILENAME
            cfg = AssertConfig(path)
            cfg.set_config(details="repr", max_details_length=80, reporter="pytest")
            cfg.save()
            reloaded = AssertConfig(path)
            assert reloaded.details == "repr"
            assert reloaded.max_details_length == 80
            assert reloaded.reporter == "pytest"
            assert path.read_text().endswith("\n")

    def test_save_without_path_raises(self):
        cfg = AssertConfig(None)
        with pytest.raises(ValueError, match="No config file path"):
            cfg.save()

    def test_config_returns_copy(self):
        cfg = AssertConfig(None)
        data = cfg.config
        data["details"] = "repr"
        assert cfg.details == "traceback"
