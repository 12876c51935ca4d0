"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from growthcheck.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def payload():
    """A valid submission: 13-year-old boy, 150 cm, parents 175 / 160 cm."""
    return {
        "age": 13,
        "sex": "male",
        "current_height": 150,
        "father_height": 175,
        "mother_height": 160,
    }
