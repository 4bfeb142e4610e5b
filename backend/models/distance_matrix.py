from typing import List, Dict, Optional, Any
from pydantic import BaseModel, field_validator, model_validator


class Coordinate(BaseModel):
    lat: float
    lon: float


def _coerce_coords(raw: Any) -> List[Dict[str, float]]:
    """
    Accept:
      - [{lat,lon}, ...]
      - [[lon,lat], ...]  (also tolerates [lat,lon] and swaps via heuristic)
    Return: list of {lon, lat} dicts.
    """
    out: List[Dict[str, float]] = []
    if raw is None:
        return out
    for item in raw:
        if isinstance(item, dict) and "lat" in item and "lon" in item:
            out.append({"lat": float(item["lat"]), "lon": float(item["lon"])})
        elif isinstance(item, (list, tuple)) and len(item) >= 2:
            a = float(item[0])
            b = float(item[1])
            # Heuristic swap if the first looks like lat and the second like lon
            # (lat in [-90,90], lon in [-180,180])
            if abs(a) <= 90 and abs(b) > 90:
                a, b = b, a
            out.append({"lon": a, "lat": b})
        else:
            raise ValueError(f"Bad coordinate item: {item!r}")
    return out


class MatrixRequest(BaseModel):
    adapter: str = "haversine"

    # You may send either origins+destinations, or a single coordinates array
    origins: Optional[List[Coordinate]] = None
    destinations: Optional[List[Coordinate]] = None
    coordinates: Optional[List[Coordinate]] = None

    @model_validator(mode="before")
    @classmethod
    def fill_and_coerce(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        values = dict(values)
        # Coerce any incoming coord shapes BEFORE field validation
        for key in ("origins", "destinations", "coordinates"):
            if key in values and values[key] is not None:
                values[key] = _coerce_coords(values[key])

        # If only `coordinates` was provided, use it for both O & D
        if (
            values.get("origins") is None or values.get("destinations") is None
        ) and values.get("coordinates"):
            values["origins"] = values.get("origins") or values["coordinates"]
            values["destinations"] = values.get("destinations") or values["coordinates"]

        if values.get("origins") is None:
            raise ValueError("origins are required (or provide coordinates)")
        return values

    @field_validator("origins")
    @classmethod
    def non_empty(cls, v: List[Coordinate]) -> List[Coordinate]:
        if not v:
            raise ValueError("must contain at least 1 coordinate")
        return v


class CostMatrix(BaseModel):
    """
    Pairwise travel costs aligned 1:1 with a waypoint list.

    ``distances[i][j]`` is the cost from waypoint i to waypoint j and may be
    asymmetric. ``durations`` is optional and shaped the same. ``provider`` is a
    display tag only; solvers never look at it.
    """

    distances: List[List[float]]
    durations: Optional[List[List[float]]] = None
    provider: str = "custom"

    def is_square(self, n: Optional[int] = None) -> bool:
        n = len(self.distances) if n is None else n
        if len(self.distances) != n or any(len(row) != n for row in self.distances):
            return False
        if self.durations is not None:
            if len(self.durations) != n or any(len(row) != n for row in self.durations):
                return False
        return True
