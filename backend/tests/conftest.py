# backend/tests/conftest.py
import os
import sys
import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# The solve endpoint's fallback and /distance-matrix both need haversine
os.environ.setdefault("ENABLE_HAVERSINE", "1")

# Import app only after setting env
from main import app
from models.solvers import SolveRequest
from data_toy import SQUARE_MATRIX, SQUARE_WAYPOINTS


@pytest.fixture(scope="session")
def client():
    # Use context manager so FastAPI lifespan (startup/shutdown) runs
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_request():
    """Build an engine SolveRequest from plain dicts."""

    def _make(waypoints, matrix, start_id=None, end_id=None):
        return SolveRequest(
            waypoints=waypoints, matrix=matrix, start_id=start_id, end_id=end_id
        )

    return _make


@pytest.fixture
def square(make_request):
    def _square(start_id=None, end_id=None):
        return make_request(SQUARE_WAYPOINTS, SQUARE_MATRIX, start_id, end_id)

    return _square
