"""Configuration for synthqa generation runs."""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# ============================================================================
# Defaults
# ============================================================================

DEFAULT_PROVIDER = "openai"
DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_RETRIES = 3
DEFAULT_LOG_LEVEL = "INFO"

# Generation settings file, relative to the project root
DEFAULT_CONFIG_PATH = "config/generation.yaml"


@dataclass(frozen=True)
class GenerationSettings:
    provider: str = DEFAULT_PROVIDER
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL


def _env_float(env_var: str, default: float) -> float:
    """Get a float from the environment or return default."""
    try:
        return float(os.getenv(env_var, default))
    except ValueError:
        logger.warning(f"Invalid {env_var}, using default {default}")
        return default


def _env_int(env_var: str, default: int) -> int:
    """Get an int from the environment or return default."""
    try:
        return int(os.getenv(env_var, default))
    except ValueError:
        logger.warning(f"Invalid {env_var}, using default {default}")
        return default


def _load_yaml(path: str) -> Dict[str, Any]:
    config_path = Path(path)
    if not config_path.exists():
        logger.warning(f"Generation config not found: {config_path} (using defaults)")
        return {}

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Generation config must be a mapping: {config_path}")

    return data.get("generation", data)


def load_settings(config_path: Optional[str] = None) -> GenerationSettings:
    """
    Load generation settings.

    Values come from the YAML file first and are then overridden by
    environment variables (including those loaded from .env).

    Args:
        config_path: Path to a YAML settings file (defaults to
            SYNTHQA_CONFIG or config/generation.yaml)

    Returns:
        GenerationSettings
    """
    path = config_path or os.getenv("SYNTHQA_CONFIG", DEFAULT_CONFIG_PATH)
    data = _load_yaml(path)

    settings = GenerationSettings(
        provider=data.get("provider", DEFAULT_PROVIDER),
        model=data.get("model", DEFAULT_MODEL),
        temperature=float(data.get("temperature", DEFAULT_TEMPERATURE)),
        max_tokens=int(data.get("max_tokens", DEFAULT_MAX_TOKENS)),
        timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
        max_retries=int(data.get("max_retries", DEFAULT_MAX_RETRIES)),
        base_url=data.get("base_url"),
        log_level=data.get("log_level", DEFAULT_LOG_LEVEL),
    )

    return replace(
        settings,
        provider=os.getenv("SYNTHQA_PROVIDER", settings.provider),
        model=os.getenv("OPENAI_MODEL", settings.model),
        temperature=_env_float("LLM_TEMPERATURE", settings.temperature),
        max_tokens=_env_int("LLM_MAX_TOKENS", settings.max_tokens),
        timeout=_env_float("LLM_TIMEOUT", settings.timeout),
        max_retries=_env_int("LLM_MAX_RETRIES", settings.max_retries),
        base_url=os.getenv("LLM_BASE_URL", settings.base_url),
        api_key=os.getenv("OPENAI_API_KEY"),
        log_level=os.getenv("LOG_LEVEL", settings.log_level),
    )


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for command line runs."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
