"""Tests for configuration loading and provider resolution."""

import pytest

from shiplog_core.config import load_config, parse_label_list, resolve_ai_config, resolve_base_url
from shiplog_core.errors import ConfigError


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["provider"] == "openai"
    assert config["model"] == "gpt-4o-mini"
    assert config["changelog_path"] == "CHANGELOG.md"
    assert config["include_labels"] == []
    assert config["exclude_labels"] == []


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".shiplog.yml"
    cfg.write_text("provider: openrouter\nmodel: anthropic/claude-3.5-haiku\n")
    config = load_config(config_path=str(cfg))
    assert config["provider"] == "openrouter"
    assert config["model"] == "anthropic/claude-3.5-haiku"


def test_label_lists_loaded_from_yaml_list(tmp_path):
    cfg = tmp_path / ".shiplog.yml"
    cfg.write_text("exclude_labels:\n  - skip-changelog\n  - dependencies\n")
    config = load_config(config_path=str(cfg))
    assert config["exclude_labels"] == ["skip-changelog", "dependencies"]


def test_cli_overrides_config_file(tmp_path):
    cfg = tmp_path / ".shiplog.yml"
    cfg.write_text("model: gpt-4o\n")
    config = load_config(config_path=str(cfg), cli_overrides={"model": "gpt-4o-mini"})
    assert config["model"] == "gpt-4o-mini"


def test_none_cli_overrides_ignored(tmp_path):
    cfg = tmp_path / ".shiplog.yml"
    cfg.write_text("model: gpt-4o\n")
    config = load_config(config_path=str(cfg), cli_overrides={"model": None})
    assert config["model"] == "gpt-4o"


def test_comma_separated_label_override(tmp_path):
    config = load_config(
        config_path=str(tmp_path / "nonexistent.yml"),
        cli_overrides={"include_labels": "feature, fix,,"},
    )
    assert config["include_labels"] == ["feature", "fix"]


def test_env_vars_loaded(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "gh-token")
    monkeypatch.setenv("SHIPLOG_API_KEY", "sl-key")
    monkeypatch.setenv("OPENAI_API_KEY", "oai-key")
    config = load_config(config_path="nonexistent.yml")
    assert config["github_token"] == "gh-token"
    assert config["api_key"] == "sl-key"


def test_openai_api_key_used_as_fallback(monkeypatch):
    monkeypatch.delenv("SHIPLOG_API_KEY", raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "oai-key")
    config = load_config(config_path="nonexistent.yml")
    assert config["api_key"] == "oai-key"


def test_label_lists_are_not_shared_references(tmp_path):
    """Mutating one config's label list must not affect another."""
    config_a = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_b = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_a["exclude_labels"].append("wip")
    assert config_b["exclude_labels"] == []


class TestParseLabelList:
    def test_empty_values(self):
        assert parse_label_list(None) == []
        assert parse_label_list("") == []
        assert parse_label_list([]) == []

    def test_strips_and_drops_blanks(self):
        assert parse_label_list([" a ", "", "b"]) == ["a", "b"]


class TestResolveBaseUrl:
    def test_openai(self):
        assert resolve_base_url("openai") == "https://api.openai.com/v1"

    def test_openrouter(self):
        assert resolve_base_url("openrouter") == "https://openrouter.ai/api/v1"

    def test_custom_url_used_verbatim(self):
        assert resolve_base_url("httpsomething-custom") == "httpsomething-custom"
        assert resolve_base_url("http://localhost:11434/v1") == "http://localhost:11434/v1"

    def test_unknown_provider_raises(self):
        with pytest.raises(ConfigError, match="unknown-x"):
            resolve_base_url("unknown-x")


class TestResolveAIConfig:
    def test_builds_config(self):
        ai = resolve_ai_config("openrouter", "some/model", "key")
        assert ai.base_url == "https://openrouter.ai/api/v1"
        assert ai.model == "some/model"
        assert ai.api_key == "key"

    def test_missing_api_key_raises(self):
        with pytest.raises(ConfigError):
            resolve_ai_config("openai", "gpt-4o-mini", None)

    def test_unknown_provider_raises_even_with_key(self):
        with pytest.raises(ConfigError):
            resolve_ai_config("unknown-x", "gpt-4o-mini", "key")


def test_malformed_yaml_raises_config_error(tmp_path):
    cfg = tmp_path / ".shiplog.yml"
    cfg.write_text("provider: [openai\nmodel: gpt-4o-mini\n")
    with pytest.raises(ConfigError, match="shiplog.yml"):
        load_config(config_path=str(cfg))


def test_non_mapping_yaml_raises_config_error(tmp_path):
    cfg = tmp_path / ".shiplog.yml"
    cfg.write_text("- openai\n- gpt-4o-mini\n")
    with pytest.raises(ConfigError):
        load_config(config_path=str(cfg))
