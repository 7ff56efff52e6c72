"""Configuration loading and management."""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import find_dotenv, load_dotenv


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Values from the file are merged over the built-in defaults, then secrets
    are taken from the environment (a `.env` file is loaded first).

    Args:
        config_path: Path to config file (defaults to configs/default.yaml)

    Returns:
        Configuration dictionary
    """
    load_dotenv(find_dotenv(usecwd=True))

    if config_path is None:
        possible_paths = [
            Path("configs/default.yaml"),
            Path(__file__).parent.parent.parent / "configs" / "default.yaml"
        ]

        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break
        else:
            return override_with_env(get_default_config())

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}

    config = _deep_merge(get_default_config(), loaded)
    return override_with_env(config)


def save_config(config: Dict[str, Any], config_path: str) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration dictionary
        config_path: Output path
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def override_with_env(config: Dict[str, Any]) -> Dict[str, Any]:
    """Override config with environment variables."""
    env_mappings = {
        "OPENROUTER_API_KEY": ["translation", "api_key"],
        "VTRANSLATE_MODEL": ["translation", "model"],
        "VTRANSLATE_BASE_URL": ["translation", "base_url"],
        "STRIPE_SECRET_KEY": ["payments", "secret_key"],
        "STRIPE_PUBLISHABLE_KEY": ["payments", "publishable_key"],
        "VTRANSLATE_HISTORY_DIR": ["storage", "history_dir"],
        "VTRANSLATE_LOG_LEVEL": ["logging", "level"],
    }

    for env_var, path in env_mappings.items():
        value = os.getenv(env_var)
        if value:
            current = config
            for key in path[:-1]:
                if key not in current or current[key] is None:
                    current[key] = {}
                current = current[key]
            current[path[-1]] = value

    return config


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


DEFAULT_CONFIG: Dict[str, Any] = {
    "translation": {
        "base_url": "https://openrouter.ai/api/v1",
        "model": "openai/gpt-4o-mini",
        "api_key": "",
        "temperature": 0.3,
        "timeout": 30.0,
        "debounce_delay": 0.5,
        "referer": "https://vtranslate.com",
        "app_title": "VTranslate",
    },
    "panel": {
        "source_language": "English",
        "target_languages": ["Spanish", "French"],
    },
    "storage": {
        "history_dir": ".cache/vtranslate/history",
        "max_history": 100,
    },
    "payments": {
        "secret_key": "",
        "publishable_key": "",
        "currency": "usd",
        "api_version": None,
    },
    "server": {
        "host": "127.0.0.1",
        "port": 8000,
        "allowed_origins": ["http://localhost:8000", "http://127.0.0.1:8000"],
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _deep_merge(base[key], value)
        else:
            base[key] = value
    return base
