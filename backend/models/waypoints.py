from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, model_validator


class Waypoint(BaseModel):
    """A named geographic stop. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    latitude: float
    longitude: float

    # Accept the short/nested coordinate shapes the frontend sends:
    #   {id, lat, lon}  or  {id, location: {lat, lon}}
    @model_validator(mode="before")
    @classmethod
    def _accept_short_shapes(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return v

        out: Dict[str, Any] = dict(v)  # shallow copy

        loc = out.pop("location", None)
        if isinstance(loc, dict):
            out.setdefault("latitude", loc.get("lat"))
            out.setdefault("longitude", loc.get("lon"))

        if "lat" in out:
            out.setdefault("latitude", out.pop("lat"))
        if "lon" in out:
            out.setdefault("longitude", out.pop("lon"))
        elif "lng" in out:
            out.setdefault("longitude", out.pop("lng"))

        # label falls back to id
        if not out.get("label") and out.get("id") is not None:
            out["label"] = str(out["id"])

        return out
