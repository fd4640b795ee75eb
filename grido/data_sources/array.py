"""
In-memory data source over a list of dicts or objects.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, MutableMapping, Optional

from ..utils.accessors import PropertyAccessor
from .base import DataSource, RowFetchable, Updatable


class ArrayDataSource(DataSource, Updatable, RowFetchable):
    """Rows live in a Python list; updates mutate them in place."""

    def __init__(self, rows: Iterable[Any], accessor: Optional[PropertyAccessor] = None):
        self.rows = list(rows)
        self.accessor = accessor or PropertyAccessor()

    def get_data(self) -> list[Any]:
        return list(self.rows)

    def _find(self, id: Any, primary_key: str) -> Optional[Any]:
        for row in self.rows:
            if str(self.accessor.get_value(row, primary_key)) == str(id):
                return row
        return None

    def update(self, id: Any, changes: Mapping[str, Any], primary_key: str) -> bool:
        row = self._find(id, primary_key)
        if row is None:
            return False
        for key, value in changes.items():
            if isinstance(row, MutableMapping):
                row[key] = value
            else:
                setattr(row, key, value)
        return True

    def get_row(self, id: Any, primary_key: str) -> Any:
        row = self._find(id, primary_key)
        if row is None:
            raise LookupError(f"No row with {primary_key}={id!r}")
        return row
