"""
Pytest configuration for the resource API.

Provides fixtures for:
- Building a fresh application (and therefore fresh stores) per test
- A ``TestClient`` bound to that application
"""

from __future__ import annotations

from typing import Any, Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from crud_api.app.core.config import Settings
from crud_api.app.main import create_app


def build_settings(**overrides: Any) -> Settings:
    """Settings independent of the developer's environment."""
    values = {
        "project_name": "Express Assignment",
        "environment": "production",
        "debug": False,
        "log_level": "WARNING",
        "log_file": "",
        "api_prefix": "/api",
        "id_strategy": "counter",
        "seed_demo_data": False,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def make_app() -> Callable[..., FastAPI]:
    def _make(**overrides: Any) -> FastAPI:
        return create_app(build_settings(**overrides))

    return _make


@pytest.fixture
def make_client(make_app: Callable[..., FastAPI]) -> Callable[..., TestClient]:
    """
    Factory for test clients.

    Server exceptions are not re-raised so that the 500 handler can be
    asserted on.
    """

    def _make(**overrides: Any) -> TestClient:
        return TestClient(make_app(**overrides), raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client: Callable[..., TestClient]) -> TestClient:
    return make_client()
