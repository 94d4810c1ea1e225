"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from cashflow_engine.api.main import create_app
from cashflow_engine.api.dependencies import get_today


FIXED_TODAY = date(2025, 3, 10)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a pinned reference date"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: FIXED_TODAY
    return TestClient(app)


@pytest.fixture
def card() -> dict:
    """Card that closes on the 10th and is due on the 15th"""
    return {"closing_day": 10, "due_day": 15}
