from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class DistanceMatrixRequestError(AppError):
    """Raised when a distance-matrix provider fails."""


class SolverRequestError(AppError):
    """Raised when a solve request is malformed or misconfigured."""
