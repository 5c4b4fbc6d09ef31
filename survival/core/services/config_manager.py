"""
config_manager.py
-----------------
Configuration loader for game settings overrides.

Features:
- Supports .yaml/.yml, .json and .py config files
- Builds file index once at startup for O(1) lookups
- Recursively merges defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
import importlib.util

import yaml

from survival.core.debug.debug_logger import DebugLogger, LoggerConfig
from survival.core.runtime.game_settings import Display, Physics


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

SEARCH_DIRS = [
    DATA_ROOT,
]

CONFIG_EXTENSIONS = (".yaml", ".yml", ".json", ".py")

_FILE_INDEX = None


class ConfigError(ValueError):
    """Raised in strict mode when a config file exists but cannot be parsed."""


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a configuration file.

    Args:
        filename: Filename or full path (.yaml, .json or .py)
        default_dict: Default fallback config
        strict: If True, raise on missing or malformed file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    if os.path.exists(filename):
        path = filename
    else:
        path = _resolve_search_path(filename)

    try:
        if path.endswith(".py"):
            data = _load_py_module(path)
        elif path.endswith(".json"):
            data = _load_json(path)
        else:
            data = _load_yaml(path)

    except FileNotFoundError as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Config '{filename}' not found - using defaults", category="loading")
        return _merge_dicts({}, default_dict)

    except (json.JSONDecodeError, yaml.YAMLError, ConfigError) as e:
        if strict:
            raise ConfigError(f"Malformed config {path}: {e}") from e
        DebugLogger.warn(f"Failed to parse {path}: {e} - using defaults", category="loading")
        return _merge_dicts({}, default_dict)

    return _merge_dicts(default_dict, data)


def build_file_index():
    """Scan config directories and cache all file paths. Call once at startup."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for file in files:
                if file.endswith(CONFIG_EXTENSIONS) and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def rebuild_file_index():
    """Clear and rebuild index."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


def apply_settings_overrides(config):
    """
    Copy recognised keys from a loaded settings dict onto the settings classes.

    Supported sections:
        display: width, height, fps, caption
        physics: max_frame_time
        logging: enabled, level, categories

    Empty sections are treated as absent; non-mapping sections are skipped
    with a warning.
    """
    display = _section(config, "display")
    for key, attr in (("width", "WIDTH"), ("height", "HEIGHT"), ("fps", "FPS"), ("caption", "CAPTION")):
        if key in display:
            setattr(Display, attr, display[key])

    physics = _section(config, "physics")
    if "max_frame_time" in physics:
        Physics.MAX_FRAME_TIME = float(physics["max_frame_time"])

    logging_cfg = _section(config, "logging")
    if "enabled" in logging_cfg:
        LoggerConfig.ENABLE_LOGGING = bool(logging_cfg["enabled"])
    if "level" in logging_cfg:
        DebugLogger.set_level(str(logging_cfg["level"]))
    for category, enabled in _section(logging_cfg, "categories", "logging.").items():
        LoggerConfig.CATEGORIES[category] = bool(enabled)


def _section(config, name, prefix=""):
    """Return config[name] as a dict; None becomes {}, other types are rejected."""
    value = config.get(name) or {}
    if not isinstance(value, dict):
        DebugLogger.warn(
            f"Config section '{prefix}{name}' must be a mapping, got {type(value).__name__} - ignored",
            category="loading"
        )
        return {}
    return value


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_search_path(filename):
    """O(1) lookup from pre-built index."""
    if _FILE_INDEX is None:
        build_file_index()

    filename = filename.replace("\\", "/").lstrip("/")
    basename = filename.split("/")[-1]

    if basename in _FILE_INDEX:
        return _FILE_INDEX[basename]

    # Try with extensions
    for ext in CONFIG_EXTENSIONS:
        key = basename + ext
        if key in _FILE_INDEX:
            return _FILE_INDEX[key]

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_yaml(path):
    """Load YAML config file. An empty file yields an empty dict."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"top level must be a mapping, got {type(data).__name__}")
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigError(f"top level must be an object, got {type(data).__name__}")
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


def _load_py_module(path):
    """Load Python config file and return DEFAULT_CONFIG if present."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    try:
        spec = importlib.util.spec_from_file_location("config_module", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    except (ImportError, AttributeError, SyntaxError) as e:
        raise ConfigError(f"cannot import: {e}") from e

    data = getattr(module, "DEFAULT_CONFIG", {})
    if not isinstance(data, dict):
        raise ConfigError(f"DEFAULT_CONFIG must be a dict, got {type(data).__name__}")
    DebugLogger.system(f"Loaded {os.path.basename(path)} (Python)", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {k: v for k, v in default.items() if k != "_notes"}
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
