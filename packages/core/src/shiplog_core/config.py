import os
from pathlib import Path
from typing import Optional

import yaml

from shiplog_core.errors import ConfigError
from shiplog_core.models import AIConfig

DEFAULT_CONFIG: dict = {
    "provider": "openai",  # "openai", "openrouter", or a custom base URL starting with http
    "model": "gpt-4o-mini",
    "changelog_path": "CHANGELOG.md",
    "include_labels": [],  # when non-empty, only PRs carrying one of these labels get an entry
    "exclude_labels": [],
}

PROVIDER_BASE_URLS = {
    "openai": "https://api.openai.com/v1",
    "openrouter": "https://openrouter.ai/api/v1",
}


def parse_label_list(value) -> list[str]:
    """Normalise a label filter given either as a YAML list or a comma-separated string."""
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(label).strip() for label in value if str(label).strip()]


def load_config(config_path: str = ".shiplog.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .shiplog.yml in the current directory
      3. CLI argument overrides
    """
    config = {
        **DEFAULT_CONFIG,
        "include_labels": list(DEFAULT_CONFIG["include_labels"]),
        "exclude_labels": list(DEFAULT_CONFIG["exclude_labels"]),
    }

    path = Path(config_path)
    if path.exists():
        try:
            with open(path) as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping of settings.")
        config.update(file_config)

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    config["include_labels"] = parse_label_list(config.get("include_labels"))
    config["exclude_labels"] = parse_label_list(config.get("exclude_labels"))

    # Resolve credentials from environment variables
    config["github_token"] = os.environ.get("GITHUB_TOKEN")
    config["api_key"] = os.environ.get("SHIPLOG_API_KEY") or os.environ.get("OPENAI_API_KEY")

    return config


def resolve_base_url(provider: str) -> str:
    """Map a provider identifier to the chat-completions base URL."""
    if provider in PROVIDER_BASE_URLS:
        return PROVIDER_BASE_URLS[provider]
    if provider.startswith("http"):
        return provider
    raise ConfigError(f"Unknown provider: {provider!r}. Use 'openai', 'openrouter', or a custom URL.")


def resolve_ai_config(provider: str, model: str, api_key: str | None) -> AIConfig:
    if not api_key:
        raise ConfigError("No API key found. Set SHIPLOG_API_KEY or OPENAI_API_KEY.")
    return AIConfig(api_key=api_key, base_url=resolve_base_url(provider), model=model)
