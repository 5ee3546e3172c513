"""
Bundled solutions.
Each module registers its solutions with @register_solution when imported.
"""

import importlib
import logging
import pkgutil

logger = logging.getLogger(__name__)

_loaded = False


def load_solutions() -> None:
    """Import every solution module in this package once."""
    global _loaded
    if _loaded:
        return

    for module_info in pkgutil.walk_packages(__path__, prefix=f"{__name__}."):
        importlib.import_module(module_info.name)
        logger.debug(f"Imported solution module {module_info.name}")

    _loaded = True
