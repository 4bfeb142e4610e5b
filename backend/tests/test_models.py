# backend/tests/test_models.py
import pytest
from pydantic import ValidationError

from models.distance_matrix import CostMatrix, MatrixRequest
from models.solvers import SolveBody
from models.waypoints import Waypoint


@pytest.mark.parametrize(
    "raw",
    [
        {"id": "x", "label": "X", "latitude": 1.5, "longitude": 2.5},
        {"id": "x", "label": "X", "lat": 1.5, "lon": 2.5},
        {"id": "x", "label": "X", "lat": 1.5, "lng": 2.5},
        {"id": "x", "label": "X", "location": {"lat": 1.5, "lon": 2.5}},
    ],
)
def test_waypoint_accepts_coordinate_shapes(raw):
    wp = Waypoint(**raw)
    assert (wp.latitude, wp.longitude) == (1.5, 2.5)


def test_waypoint_label_defaults_to_id():
    assert Waypoint(id="depot", lat=0, lon=0).label == "depot"


def test_waypoint_is_frozen():
    wp = Waypoint(id="x", lat=0, lon=0)
    with pytest.raises(ValidationError):
        wp.latitude = 3.0


def test_cost_matrix_shape_checks():
    m = CostMatrix(distances=[[0, 1], [1, 0]], durations=[[0, 5], [5, 0]])
    assert m.is_square()
    assert m.is_square(2)
    assert not m.is_square(3)
    assert not CostMatrix(distances=[[0, 1], [1]]).is_square()
    assert not CostMatrix(distances=[[0, 1], [1, 0]], durations=[[0]]).is_square()


def test_matrix_request_mirrors_coordinates():
    req = MatrixRequest(coordinates=[[-122.4194, 37.7749], {"lat": 34.05, "lon": -118.24}])
    assert req.origins == req.destinations
    assert req.origins[0].lat == pytest.approx(37.7749)
    assert req.adapter == "haversine"


def test_matrix_request_requires_origins():
    with pytest.raises(ValidationError):
        MatrixRequest(adapter="haversine")


def test_solve_body_defaults():
    body = SolveBody(waypoints=[{"id": "a", "lat": 0, "lon": 0}])
    assert body.mode == "auto"
    assert body.matrix is None
    assert body.confirm_exact is False


def test_matrix_request_only_carries_what_adapters_read():
    assert set(MatrixRequest.model_fields) == {
        "adapter",
        "origins",
        "destinations",
        "coordinates",
    }
