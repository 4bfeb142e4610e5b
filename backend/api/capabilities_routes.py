from fastapi import APIRouter
from config import get_settings
from core.capabilities import filter_registered
from services.solver_factory import register_solvers, list_solvers
from core.adapter_factory_registry import AdapterFactoryRegistry

router = APIRouter(prefix="/capabilities", tags=["capabilities"])


@router.get("", summary="List solver/adapter capabilities")
def get_capabilities():
    register_solvers()  # idempotent
    data = filter_registered(
        list_solvers(),
        AdapterFactoryRegistry.list_adapters(),
        exact_threshold=get_settings().EXACT_THRESHOLD,
    )
    return {"status": "success", "data": data}
