"""
Model wrapper bound to a grid.

The grid always talks to its data through ``Model``; capability checks
look at the wrapped data source.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .base import DataSource, RowFetchable, Updatable

logger = logging.getLogger(__name__)


class Model:
    """Wraps a ``DataSource`` and forwards capability calls to it."""

    def __init__(self, data_source: DataSource):
        self.data_source = data_source

    def get_data(self) -> list[Any]:
        return self.data_source.get_data()

    def get_count(self) -> int:
        return self.data_source.get_count()

    def supports_update(self) -> bool:
        return isinstance(self.data_source, Updatable)

    def supports_get_row(self) -> bool:
        return isinstance(self.data_source, RowFetchable)

    def update(self, id: Any, changes: Mapping[str, Any], primary_key: str) -> Any:
        if not self.supports_update():
            raise NotImplementedError(
                f"{type(self.data_source).__name__} does not support update()"
            )
        logger.debug(f"Updating row {id!r} ({primary_key}) with {dict(changes)!r}")
        return self.data_source.update(id, changes, primary_key)

    def get_row(self, id: Any, primary_key: str) -> Any:
        if not self.supports_get_row():
            raise NotImplementedError(
                f"{type(self.data_source).__name__} does not support get_row()"
            )
        return self.data_source.get_row(id, primary_key)


def model_lacks(model: Any, capability: type) -> bool:
    """
    Return True when ``model`` cannot be relied on for ``capability``.

    Anything that is not a ``Model`` is opaque and treated as lacking every
    capability.
    """
    if not isinstance(model, Model):
        return True
    return not isinstance(model.data_source, capability)
