import json
import os
from datetime import datetime

DEFAULT_CONFIG = {
    "max_steps": 10_000,
    "trace": False,
    "show_heads": False,
    "log_results": False,
    "output_directory": "logs/",
    "log_file_prefix": "tm_runs_",
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "trace": bool,
    "show_heads": bool,
    "log_results": bool,
    "output_directory": str,
    "log_file_prefix": str,
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is a subclass of int, so reject it explicitly for int keys
        if expected_type is int and isinstance(config[key], bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if config["max_steps"] < 1:
        raise ValueError("max_steps must be at least 1.")

def load_config(path=None, verbose=False):
    config = DEFAULT_CONFIG.copy()

    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found at: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        # Merge defaults with overrides
        config.update(user_config)

    # Validate schema
    validate_config(config)

    if config["log_results"]:
        os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
