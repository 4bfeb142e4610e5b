# core/load_plugins.py
import logging

logger = logging.getLogger(__name__)


def load_plugins():
    # Adapters
    from core.register_adapters import register_adapters

    register_adapters()

    # Solvers
    from services.solver_factory import register_solvers, list_solvers

    register_solvers()

    from core.adapter_factory_registry import AdapterFactoryRegistry

    logger.info(
        "plugins loaded: solvers=%s adapters=%s",
        list_solvers(),
        AdapterFactoryRegistry.list_adapters(),
    )
