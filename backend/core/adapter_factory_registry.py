# core/adapter_factory_registry.py
from typing import Callable, Dict, List
from core.interfaces import DistanceMatrixAdapter


class AdapterFactoryRegistry:
    """Name -> factory map for distance-matrix providers (case-insensitive)."""

    _factories: Dict[str, Callable[[], DistanceMatrixAdapter]] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.lower().strip()

    @classmethod
    def register(cls, name: str, factory: Callable[[], DistanceMatrixAdapter]) -> None:
        key = cls._key(name)
        if key in cls._factories:
            raise ValueError(f"Adapter '{name}' is already registered.")
        cls._factories[key] = factory

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return cls._key(name) in cls._factories

    @classmethod
    def get(cls, name: str) -> DistanceMatrixAdapter:
        key = cls._key(name)
        if key not in cls._factories:
            raise ValueError(f"Adapter '{name}' is not registered.")
        return cls._factories[key]()  # create instance

    @classmethod
    def list_adapters(cls) -> List[str]:
        return sorted(cls._factories.keys())
