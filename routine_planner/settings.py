"""
Configuration loading for routine generation.

Reads config.yaml (path overridable via ROUTINE_PLANNER_CONFIG) and merges it
over built-in defaults. ROUTINE_PLANNER_PROFILE overrides the active profile.
"""

import copy
import os

import yaml


CONFIG_ENV = "ROUTINE_PLANNER_CONFIG"
PROFILE_ENV = "ROUTINE_PLANNER_PROFILE"
DEFAULT_CONFIG_PATH = "config.yaml"

DEFAULT_CONFIG = {
    "generation": {
        "profile": "experience",
        "defaults": {
            "frequency": 3,
            "split": 3,
            "focus": None,
            "level": None,
        },
        "max_exercises_per_day": None,
    },
}


def _deep_merge(base, override):
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_config_path(path=None):
    return path or os.getenv(CONFIG_ENV) or DEFAULT_CONFIG_PATH


def load_config(path=None):
    """
    Load configuration with defaults.

    A missing or unreadable file yields the defaults; the environment profile
    override is applied last.
    """
    config_path = get_config_path(path)
    file_config = {}
    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            file_config = {}
    if not isinstance(file_config, dict):
        file_config = {}

    config = _deep_merge(DEFAULT_CONFIG, file_config)
    if not isinstance(config.get("generation"), dict):
        config["generation"] = copy.deepcopy(DEFAULT_CONFIG["generation"])
    if not isinstance(config["generation"].get("defaults"), dict):
        config["generation"]["defaults"] = copy.deepcopy(DEFAULT_CONFIG["generation"]["defaults"])

    profile_override = os.getenv(PROFILE_ENV)
    if profile_override:
        config["generation"]["profile"] = profile_override.strip().lower()

    return config
