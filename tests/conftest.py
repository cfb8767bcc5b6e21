import pytest
from fastapi.testclient import TestClient

from app.main import create_app


@pytest.fixture
def client():
    """Test client over a fresh app, so mock records never leak between tests."""
    with TestClient(create_app(geojson_strict=True, api_key="test-key")) as c:
        yield c


@pytest.fixture
def lenient_client():
    with TestClient(create_app(geojson_strict=False)) as c:
        yield c


@pytest.fixture
def square_ring():
    return [[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]


@pytest.fixture
def point():
    return {"type": "Point", "coordinates": [102.0, 0.5]}


@pytest.fixture
def polygon(square_ring):
    return {"type": "Polygon", "coordinates": [square_ring]}
