# core/register_adapters.py
from __future__ import annotations
import logging
from typing import Callable

from core.adapter_factory_registry import AdapterFactoryRegistry
from adapters.offline.haversine_adapter import HaversineAdapter

logger = logging.getLogger(__name__)

_registered = False


def _safe_register(name: str, factory: Callable[[], object]) -> None:
    """Don't blow up if already registered (idempotent)."""
    try:
        AdapterFactoryRegistry.register(name, factory)
    except ValueError:
        logger.debug("adapter %s already registered", name)


def register_adapters() -> None:
    global _registered
    if _registered:
        return

    from config import get_settings

    # Offline geodesic fallback, on by default
    if get_settings().ENABLE_HAVERSINE != "0":
        _safe_register("haversine", lambda: HaversineAdapter())

    _registered = True
