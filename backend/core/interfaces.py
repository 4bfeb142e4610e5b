from __future__ import annotations
from abc import ABC, abstractmethod
from models.distance_matrix import MatrixRequest, CostMatrix
from models.solvers import SolveRequest, SolveResult


class DistanceMatrixAdapter(ABC):
    """All distance matrix providers must implement this."""

    @abstractmethod
    async def get_matrix(self, request: MatrixRequest) -> CostMatrix: ...


class RouteSolver(ABC):
    """All itinerary solvers (exact, heuristic, adaptive) must implement this."""

    name: str = ""

    @abstractmethod
    def solve(self, request: SolveRequest) -> SolveResult: ...
