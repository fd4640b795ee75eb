"""
Named grid factories.

Edit requests arrive without the page that rendered the grid, so every
grid used with inline editing is registered under a name and rebuilt from
its factory for each request. ``GridoConfig.ready()`` imports the ``grids``
module of every installed app so decorators run at startup.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from django.http import HttpRequest

from .components.grid import Grid
from .exceptions import GridNotFound

logger = logging.getLogger(__name__)

GridFactory = Callable[[Optional[HttpRequest]], Grid]

_registry: dict[str, GridFactory] = {}


def register_grid(name: str, factory: GridFactory) -> GridFactory:
    if name in _registry and _registry[name] is not factory:
        logger.warning(f"Grid factory '{name}' is being replaced")
    _registry[name] = factory
    return factory


def unregister_grid(name: str) -> None:
    _registry.pop(name, None)


def grid_factory(name: str) -> Callable[[GridFactory], GridFactory]:
    """Decorator form of ``register_grid``."""

    def decorator(factory: GridFactory) -> GridFactory:
        return register_grid(name, factory)

    return decorator


def get_registered_grids() -> list[str]:
    return sorted(_registry)


def build_grid(name: str, request: Optional[HttpRequest] = None) -> Grid:
    """
    Build a fresh grid instance.

    Raises:
        GridNotFound: If no factory is registered under ``name``.
    """
    factory = _registry.get(name)
    if factory is None:
        raise GridNotFound(f"No grid registered under '{name}'", grid_name=name)
    grid = factory(request)
    if grid.name != name:
        logger.warning(f"Grid factory '{name}' built a grid named '{grid.name}'")
    return grid
