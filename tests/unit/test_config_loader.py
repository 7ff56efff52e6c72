"""Unit tests for configuration loading."""

import os

import pytest
import yaml

from vtranslate.utils.config_loader import load_config, save_config, get_default_config

ENV_VARS = [
    "OPENROUTER_API_KEY",
    "VTRANSLATE_MODEL",
    "VTRANSLATE_BASE_URL",
    "STRIPE_SECRET_KEY",
    "STRIPE_PUBLISHABLE_KEY",
    "VTRANSLATE_HISTORY_DIR",
    "VTRANSLATE_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    # load_dotenv writes straight to os.environ
    for name in ENV_VARS:
        os.environ.pop(name, None)


def test_defaults():
    config = get_default_config()

    assert config["translation"]["base_url"] == "https://openrouter.ai/api/v1"
    assert config["translation"]["model"] == "openai/gpt-4o-mini"
    assert config["translation"]["temperature"] == 0.3
    assert config["translation"]["debounce_delay"] == 0.5
    assert config["storage"]["max_history"] == 100
    assert config["panel"]["target_languages"] == ["Spanish", "French"]


def test_defaults_are_copies():
    get_default_config()["panel"]["target_languages"].append("German")
    assert get_default_config()["panel"]["target_languages"] == ["Spanish", "French"]


def test_file_is_merged_over_defaults(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text(yaml.dump({"translation": {"model": "openai/gpt-4o"}, "server": {"port": 9000}}))

    config = load_config(str(path))

    assert config["translation"]["model"] == "openai/gpt-4o"
    assert config["translation"]["temperature"] == 0.3
    assert config["server"]["port"] == 9000
    assert config["server"]["host"] == "127.0.0.1"


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text(yaml.dump({"translation": {"model": "from-file"}}))
    monkeypatch.setenv("VTRANSLATE_MODEL", "from-env")
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-env")
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_env")

    config = load_config(str(path))

    assert config["translation"]["model"] == "from-env"
    assert config["translation"]["api_key"] == "sk-or-env"
    assert config["payments"]["secret_key"] == "sk_test_env"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("STRIPE_PUBLISHABLE_KEY=pk_test_dotenv\n")
    path = tmp_path / "custom.yaml"
    path.write_text("{}\n")

    config = load_config(str(path))

    assert config["payments"]["publishable_key"] == "pk_test_dotenv"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_save_and_reload(tmp_path):
    config = get_default_config()
    config["server"]["port"] = 8123
    path = tmp_path / "out" / "config.yaml"

    save_config(config, str(path))

    assert load_config(str(path))["server"]["port"] == 8123
