# backend/tests/test_adapters.py
import asyncio

import pytest

from adapters.offline.haversine_adapter import (
    HaversineAdapter,
    build_haversine_matrix,
    haversine_m,
)
from core.adapter_factory_registry import AdapterFactoryRegistry
from core import exceptions
from core.exceptions import DistanceMatrixRequestError
from core.register_adapters import register_adapters
from models.distance_matrix import MatrixRequest
from models.waypoints import Waypoint
from services.solver_factory import get_solver, list_solvers, register_solver
from data_toy import CITY_WAYPOINTS

CITIES = [Waypoint(**w) for w in CITY_WAYPOINTS]


def test_haversine_sf_to_la():
    assert 550_000 < haversine_m(CITIES[0], CITIES[1]) < 570_000


def test_haversine_one_degree_of_longitude_at_equator():
    a = Waypoint(id="a", lat=0, lon=0)
    b = Waypoint(id="b", lat=0, lon=1)
    assert haversine_m(a, b) == pytest.approx(111_195, rel=1e-3)


def test_build_haversine_matrix_is_symmetric():
    m = build_haversine_matrix(CITIES)
    assert m.provider == "haversine"
    assert m.durations is None
    assert m.is_square(3)
    for i in range(3):
        assert m.distances[i][i] == 0.0
        for j in range(3):
            assert m.distances[i][j] == m.distances[j][i]


def test_haversine_adapter_rectangular():
    req = MatrixRequest(
        origins=[{"lat": 37.7749, "lon": -122.4194}, {"lat": 34.0522, "lon": -118.2437}],
        destinations=[{"lat": 36.1699, "lon": -115.1398}],
    )
    m = asyncio.run(HaversineAdapter().get_matrix(req))
    assert len(m.distances) == 2 and len(m.distances[0]) == 1


def test_haversine_adapter_requires_origins():
    req = MatrixRequest.model_construct(origins=[], destinations=None)
    with pytest.raises(DistanceMatrixRequestError):
        asyncio.run(HaversineAdapter().get_matrix(req))


def test_adapter_registry():
    register_adapters()
    assert AdapterFactoryRegistry.is_registered("Haversine ")
    assert isinstance(AdapterFactoryRegistry.get("haversine"), HaversineAdapter)
    with pytest.raises(ValueError):
        AdapterFactoryRegistry.get("nope")
    with pytest.raises(ValueError):
        AdapterFactoryRegistry.register("haversine", HaversineAdapter)


def test_solver_registry():
    assert list_solvers() == ["auto", "exact", "heuristic"]
    assert get_solver(" EXACT ").name == "exact"
    with pytest.raises(ValueError):
        get_solver("annealing")
    with pytest.raises(ValueError):
        register_solver("exact", lambda: None)


def test_error_hierarchy_is_rooted_at_app_error():
    errors = {
        name
        for name, obj in vars(exceptions).items()
        if isinstance(obj, type) and issubclass(obj, exceptions.AppError)
    }
    assert errors == {"AppError", "SolverRequestError", "DistanceMatrixRequestError"}
