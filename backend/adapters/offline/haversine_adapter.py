import math
from typing import List, Sequence
from core.interfaces import DistanceMatrixAdapter
from core.exceptions import DistanceMatrixRequestError
from models.distance_matrix import MatrixRequest, CostMatrix
from models.waypoints import Waypoint

EARTH_RADIUS_M = 6371.0 * 1000.0


def _haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)
    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    )
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))  # m


def haversine_m(a: Waypoint, b: Waypoint) -> float:
    return _haversine_m(a.latitude, a.longitude, b.latitude, b.longitude)


def build_haversine_matrix(waypoints: Sequence[Waypoint]) -> CostMatrix:
    """Symmetric great-circle matrix in **metres**; no durations."""
    n = len(waypoints)
    distances = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            d = haversine_m(waypoints[i], waypoints[j])
            distances[i][j] = d
            distances[j][i] = d
    return CostMatrix(distances=distances, durations=None, provider="haversine")


class HaversineAdapter(DistanceMatrixAdapter):
    """
    Offline adapter. Returns distances in **metres**; durations None.
    """

    async def get_matrix(self, request: MatrixRequest) -> CostMatrix:
        if not request.origins:
            raise DistanceMatrixRequestError("Haversine: 'origins' is required.")
        # If destinations omitted, treat as square matrix (origins->origins)
        destinations = request.destinations or request.origins

        distances: List[List[float]] = []
        for o in request.origins:
            row = []
            for d in destinations:
                row.append(_haversine_m(o.lat, o.lon, d.lat, d.lon))
            distances.append(row)

        return CostMatrix(distances=distances, durations=None, provider="haversine")
