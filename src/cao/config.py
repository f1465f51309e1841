"""Model configuration stored as JSON in $XDG_CONFIG_HOME/cao or ~/.cao."""

import copy
import json
import logging
import os
from pathlib import Path

from cao.errors import ConfigError
from cao.models import ModelConfig

log = logging.getLogger(__name__)

DEFAULT_CONFIG: dict = {
    "models": {
        "deepseek": {
            "api_base": "https://api.deepseek.com/v1",
            "model": "deepseek-coder",
            "provider": "deepseek",
        },
        "openai": {
            "api_base": "https://api.openai.com/v1",
            "model": "gpt-4o",
            "provider": "openai",
        },
        "ollama": {
            "api_base": "http://localhost:11434/v1",
            "model": "qwen2.5-coder:7b",
            "provider": "ollama",
        },
    },
    "default_model": "deepseek",
}


def get_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    config_dir = Path(xdg) / "cao" if xdg else Path.home() / ".cao"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file() -> Path:
    return get_config_dir() / "config.json"


def load_config() -> dict:
    """Defaults merged with the user's config file (created if missing)."""
    path = get_config_file()
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path.exists():
        save_config(config)
        return config

    try:
        user = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.error("Failed to load config file %s: %s", path, e)
        return config
    if not isinstance(user, dict):
        log.error("Ignoring config file %s: expected a JSON object", path)
        return config

    if isinstance(user.get("models"), dict):
        config["models"].update(user["models"])
    if user.get("default_model") in config["models"]:
        config["default_model"] = user["default_model"]
    return config


def save_config(config: dict) -> bool:
    path = get_config_file()
    try:
        path.write_text(json.dumps(config, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        log.error("Failed to save config file %s: %s", path, e)
        return False
    return True


def add_model(name: str, api_base: str, model: str, api_key: str | None = None) -> bool:
    """Add or replace a model entry. provider defaults to `name`."""
    config = load_config()
    entry = ModelConfig(api_base=api_base, model=model, provider=name, api_key=api_key)
    config["models"][name] = entry.to_dict()
    return save_config(config)


def remove_model(name: str) -> bool:
    """False if `name` is unknown or is the default model."""
    config = load_config()
    if name not in config["models"] or name == config["default_model"]:
        return False
    del config["models"][name]
    return save_config(config)


def set_default_model(name: str) -> bool:
    config = load_config()
    if name not in config["models"]:
        return False
    config["default_model"] = name
    return save_config(config)


def get_supported_models() -> dict[str, dict]:
    return load_config()["models"]


def get_default_model() -> str:
    return load_config()["default_model"]


def get_model_config(name: str) -> ModelConfig:
    """ModelConfig for `name`, with provider defaulted to the entry name."""
    models = get_supported_models()
    if name not in models:
        raise ConfigError(
            f"Error: unsupported model '{name}'. Supported models: {', '.join(models)}"
        )
    cfg = ModelConfig.from_dict(models[name])
    if not cfg.provider:
        cfg.provider = name
    return cfg
