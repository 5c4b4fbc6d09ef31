"""
test_config_manager.py
----------------------
Unit tests for config loading, merging and settings overrides.
"""

import json

import pytest

from survival.core.debug.debug_logger import LoggerConfig
from survival.core.runtime.game_settings import Display, Physics
from survival.core.services import config_manager
from survival.core.services.config_manager import (
    ConfigError,
    apply_settings_overrides,
    load_config,
)


DEFAULTS = {"display": {"width": 800, "height": 600}, "logging": {"level": "INFO"}}


def test_yaml_merges_over_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("_notes: ignored\ndisplay:\n  width: 1024\n", encoding="utf-8")

    config = load_config(str(path), DEFAULTS)

    assert config == {"display": {"width": 1024, "height": 600}, "logging": {"level": "INFO"}}


def test_json_config(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"logging": {"level": "WARN"}}), encoding="utf-8")

    config = load_config(str(path), DEFAULTS)

    assert config["logging"]["level"] == "WARN"
    assert config["display"]["width"] == 800


def test_py_config(tmp_path):
    path = tmp_path / "settings.py"
    path.write_text("DEFAULT_CONFIG = {'display': {'fps': 30}}\n", encoding="utf-8")

    assert load_config(str(path))["display"] == {"fps": 30}


def test_py_config_with_syntax_error(tmp_path):
    path = tmp_path / "broken.py"
    path.write_text("DEFAULT_CONFIG = {\n", encoding="utf-8")

    assert load_config(str(path), DEFAULTS) == DEFAULTS
    with pytest.raises(ConfigError):
        load_config(str(path), strict=True)


def test_py_config_must_be_a_dict(tmp_path):
    path = tmp_path / "listy.py"
    path.write_text("DEFAULT_CONFIG = [1, 2]\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(path), strict=True)


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path), DEFAULTS) == DEFAULTS


def test_missing_file_falls_back(tmp_path):
    config = load_config(str(tmp_path / "nope.yaml"), DEFAULTS)
    assert config == DEFAULTS
    assert config is not DEFAULTS


def test_missing_file_strict_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"), strict=True)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("display: [unclosed\n", encoding="utf-8")

    assert load_config(str(path), DEFAULTS) == DEFAULTS
    with pytest.raises(ConfigError):
        load_config(str(path), strict=True)


def test_non_mapping_yaml_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path), strict=True)


def test_bundled_settings_resolve_by_name():
    config_manager.rebuild_file_index()
    config = load_config("settings.yaml", strict=True)
    assert config["display"]["caption"] == "Survival Game"
    assert "_notes" not in config


def test_apply_settings_overrides(monkeypatch):
    monkeypatch.setattr(Display, "WIDTH", Display.WIDTH)
    monkeypatch.setattr(Display, "CAPTION", Display.CAPTION)
    monkeypatch.setattr(Physics, "MAX_FRAME_TIME", Physics.MAX_FRAME_TIME)

    apply_settings_overrides({
        "display": {"width": 1024, "caption": "Test"},
        "physics": {"max_frame_time": 0.05},
        "logging": {"level": "verbose", "categories": {"collision": False, "render": True}},
    })

    assert Display.WIDTH == 1024
    assert Display.CAPTION == "Test"
    assert Physics.MAX_FRAME_TIME == 0.05
    assert LoggerConfig.LOG_LEVEL == "VERBOSE"
    assert LoggerConfig.CATEGORIES["collision"] is False
    assert LoggerConfig.CATEGORIES["render"] is True


def test_empty_sections_leave_settings_alone(tmp_path, monkeypatch):
    monkeypatch.setattr(Display, "WIDTH", 800)
    monkeypatch.setattr(Physics, "MAX_FRAME_TIME", 0.1)
    path = tmp_path / "blank_sections.yaml"
    path.write_text("display:\nphysics:\nlogging:\n  categories:\n", encoding="utf-8")

    config = load_config(str(path), strict=True)
    apply_settings_overrides(config)

    assert Display.WIDTH == 800
    assert Physics.MAX_FRAME_TIME == 0.1


def test_non_mapping_sections_are_skipped(monkeypatch):
    monkeypatch.setattr(Display, "WIDTH", 800)
    categories = dict(LoggerConfig.CATEGORIES)

    apply_settings_overrides({"display": 5, "logging": {"categories": ["collision"]}})

    assert Display.WIDTH == 800
    assert LoggerConfig.CATEGORIES == categories
