"""
Test Configuration
==================

Pytest configuration with fixtures shared by unit and integration tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import Mock

# Settings and logging are configured on import, so the environment is set first
TEST_STORAGE = Path(tempfile.gettempdir()) / "positronic_test_storage"
os.environ.setdefault("POSITRONIC_ENVIRONMENT", "testing")
os.environ.setdefault("POSITRONIC_STORAGE_PATH", str(TEST_STORAGE))
os.environ.setdefault("POSITRONIC_LOG_LEVEL", "DEBUG")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic_settings import SettingsConfigDict

from positronic.api.main import create_app
from positronic.client.positronic_db import PositronicDB, get_positronic_db
from positronic.config.settings import Settings


class AppTestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    storage_path: Path = TEST_STORAGE
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test", env_prefix="POSITRONIC_TEST_")


@pytest.fixture
def test_settings() -> AppTestSettings:
    """Test settings fixture."""
    return AppTestSettings()


@pytest.fixture
def app(test_settings: AppTestSettings) -> FastAPI:
    """FastAPI application built with test settings."""
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mock_db(app: FastAPI) -> Generator[Mock, None, None]:
    """Replace the PositronicDB dependency with a mock."""
    db = Mock(spec=PositronicDB)
    app.dependency_overrides[get_positronic_db] = lambda: db
    yield db
    app.dependency_overrides.clear()
