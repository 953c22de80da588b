"""Pytest configuration and shared fixtures for synthqa tests.

This module provides:
- Basic pytest configuration
- Common fixtures (scripted completion providers, sample documents)
- Environment isolation between tests
"""

import os
import sys
from pathlib import Path
from typing import Dict

import pytest

# Add project root to Python path to allow imports from synthqa and cli
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.fixtures.mock_completions import failing_llm, make_llm
from tests.fixtures.sample_documents import DL_TEXT, ML_TEXT, RL_TEXT, make_documents


# ==================== Environment Fixtures ====================

@pytest.fixture(scope="function", autouse=True)
def isolate_environment():
    """Restore environment variables after each test."""
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def clean_llm_env(monkeypatch) -> None:
    """Remove settings-related environment variables."""
    for name in [
        "OPENAI_API_KEY",
        "OPENAI_MODEL",
        "LLM_TEMPERATURE",
        "LLM_MAX_TOKENS",
        "LLM_TIMEOUT",
        "LLM_MAX_RETRIES",
        "LLM_BASE_URL",
        "SYNTHQA_PROVIDER",
        "SYNTHQA_CONFIG",
        "LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_env_vars(monkeypatch, clean_llm_env) -> Dict[str, str]:
    """Provide mock environment variables for testing."""
    env_vars = {
        "OPENAI_API_KEY": "test-openai-key",
        "LOG_LEVEL": "ERROR",
    }

    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)

    return env_vars


# ==================== Mock Data Fixtures ====================

@pytest.fixture
def llm():
    """Completion provider mock answering every pipeline prompt."""
    return make_llm()


@pytest.fixture
def broken_llm():
    """Completion provider mock whose every call fails."""
    return failing_llm()


@pytest.fixture
def two_documents() -> list[dict]:
    return make_documents(ML_TEXT, DL_TEXT)


@pytest.fixture
def three_documents() -> list[dict]:
    return make_documents(ML_TEXT, DL_TEXT, RL_TEXT)
