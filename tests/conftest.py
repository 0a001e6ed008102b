"""Shared fixtures for the frame service tests."""

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from config.settings import Settings

DOMAIN = "http://localhost"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(domain=DOMAIN, app_env="test", assets_dir=str(tmp_path))


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
