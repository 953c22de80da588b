"""Tests for generation settings loading."""

import pytest

from synthqa.config import (
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    GenerationSettings,
    load_settings,
)


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "generation.yaml"
    path.write_text(
        "generation:\n"
        "  provider: ollama\n"
        "  model: llama3\n"
        "  temperature: 0.2\n"
        "  max_tokens: 512\n"
        "  timeout: 15\n"
        "  max_retries: 1\n"
        "  base_url: http://localhost:11434\n"
    )
    return path


class TestLoadSettings:
    def test_missing_file_uses_defaults(self, clean_llm_env, tmp_path):
        settings = load_settings(str(tmp_path / "missing.yaml"))

        assert settings == GenerationSettings()
        assert settings.model == DEFAULT_MODEL
        assert settings.api_key is None

    def test_reads_yaml_values(self, clean_llm_env, settings_file):
        settings = load_settings(str(settings_file))

        assert settings.provider == "ollama"
        assert settings.model == "llama3"
        assert settings.temperature == 0.2
        assert settings.max_tokens == 512
        assert settings.timeout == 15.0
        assert settings.max_retries == 1
        assert settings.base_url == "http://localhost:11434"

    def test_flat_mapping_is_accepted(self, clean_llm_env, tmp_path):
        path = tmp_path / "flat.yaml"
        path.write_text("model: gpt-4o\n")

        assert load_settings(str(path)).model == "gpt-4o"

    def test_environment_overrides_yaml(self, clean_llm_env, monkeypatch, settings_file):
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("LLM_TEMPERATURE", "0.9")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("SYNTHQA_PROVIDER", "openai")

        settings = load_settings(str(settings_file))

        assert settings.model == "gpt-4o-mini"
        assert settings.temperature == 0.9
        assert settings.api_key == "sk-test"
        assert settings.provider == "openai"
        assert settings.max_tokens == 512

    def test_invalid_numeric_env_keeps_file_value(self, clean_llm_env, monkeypatch, settings_file):
        monkeypatch.setenv("LLM_MAX_TOKENS", "lots")
        monkeypatch.setenv("LLM_TIMEOUT", "soon")

        settings = load_settings(str(settings_file))

        assert settings.max_tokens == 512
        assert settings.timeout == 15.0

    def test_config_path_from_environment(self, clean_llm_env, monkeypatch, settings_file):
        monkeypatch.setenv("SYNTHQA_CONFIG", str(settings_file))

        assert load_settings().model == "llama3"

    def test_non_mapping_file_rejected(self, clean_llm_env, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_settings(str(path))

    def test_empty_file_uses_defaults(self, clean_llm_env, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_settings(str(path)).temperature == DEFAULT_TEMPERATURE
