"""
Property access on opaque grid rows.

Rows may be dicts (array data sources, ``.values()`` querysets) or objects
(model instances). Dotted paths walk relations.
"""

import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)

RELATION_SEPARATOR = "."


class PropertyAccessor:
    """Read a named property from a row."""

    def get_value(self, row: Any, path: str) -> Any:
        value = row
        for part in str(path).split(RELATION_SEPARATOR):
            if value is None:
                return None
            value = self._get_part(value, part)
        return value

    def _get_part(self, value: Any, part: str) -> Any:
        if isinstance(value, Mapping):
            return value.get(part)
        if not hasattr(value, part):
            logger.debug(f"Row {value!r} has no property '{part}'")
            return None
        return getattr(value, part)


def is_relation_path(path: Any) -> bool:
    """Return True when ``path`` is not a bare field name."""
    return not isinstance(path, str) or RELATION_SEPARATOR in path
