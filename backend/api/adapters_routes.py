# api/adapters_routes.py
from fastapi import APIRouter, HTTPException

from api._resp import ok
from core.adapter_factory_registry import AdapterFactoryRegistry
from core.exceptions import DistanceMatrixRequestError
from models.distance_matrix import MatrixRequest

router = APIRouter()


@router.post(
    "/distance-matrix", summary="Compute a distance/duration matrix via adapter"
)
async def get_distance_matrix(req: MatrixRequest):
    try:
        adapter = AdapterFactoryRegistry.get(req.adapter)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        result = await adapter.get_matrix(req)
    except DistanceMatrixRequestError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Internal error: {e}")

    return ok(result.model_dump())
