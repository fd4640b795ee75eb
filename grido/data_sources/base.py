"""
Data source interfaces.

A data source declares what it can do by subclassing the capability
interfaces. Editable columns only rely on declared capabilities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class DataSource(ABC):
    """Base class for grid data sources."""

    @abstractmethod
    def get_data(self) -> list[Any]:
        """Return the rows to render."""

    def get_count(self) -> int:
        return len(self.get_data())


class Updatable(ABC):
    """Capability: persist changes of a single row."""

    @abstractmethod
    def update(self, id: Any, changes: Mapping[str, Any], primary_key: str) -> Any:
        """Apply ``changes`` to the row identified by ``id``; truthy on success."""


class RowFetchable(ABC):
    """Capability: fetch a single row by its primary key."""

    @abstractmethod
    def get_row(self, id: Any, primary_key: str) -> Any:
        """Return the row identified by ``id``."""
