import json
import os

from rich.console import Console

from simulator.errors import ConfigError

console = Console(stderr=True)

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "initial_state": 0,
    "max_iterations": 1_000,
    "frame_timeout_ms": 250,
    "speed": 4,
    "history_height": 5,
    "tape_window": 12,
    "output_directory": "logs/",
    "log_file_prefix": "turing_",
    "json_log": False,
}

# Expected types for validation
CONFIG_SCHEMA = {
    "initial_state": int,
    "max_iterations": int,
    "frame_timeout_ms": int,
    "speed": int,
    "history_height": int,
    "tape_window": int,
    "output_directory": str,
    "log_file_prefix": str,
    "json_log": bool,
}

# Lower bound for integer keys
CONFIG_MINIMUMS = {
    "initial_state": 0,
    "max_iterations": 1,
    "frame_timeout_ms": 0,
    "speed": 1,
    "history_height": 1,
    "tape_window": 3,
}


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ConfigError(f"Missing required configuration key: {key}")
        value = config[key]
        # bool is a subclass of int
        if expected_type is int and isinstance(value, bool):
            raise ConfigError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")
        if not isinstance(value, expected_type):
            raise ConfigError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    for key, minimum in CONFIG_MINIMUMS.items():
        if config[key] < minimum:
            raise ConfigError(f"Config key '{key}' must be >= {minimum}, got {config[key]}.")


def load_config(path=None, overrides=None, verbose=False):
    """Merge DEFAULT_CONFIG with the JSON file at `path` and `overrides`.

    Without an explicit path the default location is used when it exists.
    """
    user_config = {}
    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found at: {path}")
        user_config = _read_json(path)
    elif os.path.exists(DEFAULT_CONFIG_PATH):
        user_config = _read_json(DEFAULT_CONFIG_PATH)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)
    config.update({k: v for k, v in (overrides or {}).items() if v is not None})

    validate_config(config)

    if verbose:
        console.print("[cyan]Loaded config:[/cyan]")
        for key, value in config.items():
            console.print(f"  {key}: {value}")

    return config


def save_config(config, path=DEFAULT_CONFIG_PATH):
    validate_config(config)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)


def _read_json(path):
    with open(path, "r", encoding="utf-8") as f:
        try:
            user_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration file {path}: {e}") from e
    if not isinstance(user_config, dict):
        raise ConfigError(f"Configuration file {path} must contain a JSON object.")
    return user_config
