"""Pytest fixtures for testing"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from credit_engine.api.main import create_app


class FixedRandom:
    """Random source returning a fixed draw"""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def app() -> FastAPI:
    """Fresh application instance"""
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def fixed_random():
    """Factory for deterministic random sources"""
    return FixedRandom
