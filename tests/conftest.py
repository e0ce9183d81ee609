# tests/conftest.py
"""Shared test fixtures.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/options/
"""

import os
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from hypothesis import Phase, Verbosity, settings

from plugin_skeleton.core.config import Settings
from plugin_skeleton.main import create_app

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# App fixtures
# =============================================================================


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite file, ignoring any local .env."""
    return Settings(
        _env_file=None,
        app_env="test",
        log_level="WARNING",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
    )


@pytest.fixture
def client(app_settings: Settings) -> Iterator[TestClient]:
    """TestClient with the lifespan running (tables created, defaults provisioned)."""
    app = create_app(app_settings)
    with TestClient(app) as c:
        yield c
