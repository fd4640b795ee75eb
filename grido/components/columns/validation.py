"""
Configuration checks for editable columns.

Runs during the grid render pass (and before every edit request) so a
column that could never persist or re-render an edit fails loudly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...data_sources import RowFetchable, Updatable, model_lacks
from ...exceptions import ConfigurationError
from ...utils.accessors import is_relation_path
from .editable import EditableColumn

if TYPE_CHECKING:
    from ..grid import Grid

logger = logging.getLogger(__name__)


def validate_editable_column(grid: "Grid", column: EditableColumn) -> None:
    """
    Check that ``column`` has everything it needs to service edit requests.

    Raises:
        ConfigurationError: If an edit or row callback is required but missing.
    """
    name = column.get_name()

    if column.get_editable_callback() is None and (
        is_relation_path(column.get_column()) or model_lacks(grid.model, Updatable)
    ):
        raise ConfigurationError(
            f"Column '{name}' has error: You must define callback via set_editable_callback().",
            grid_name=grid.name,
            column_name=name,
        )

    if (
        column.get_editable_row_callback() is None
        and column.custom_render is not None
        and model_lacks(grid.model, RowFetchable)
    ):
        raise ConfigurationError(
            f"Column '{name}' has error: You must define callback via set_editable_row_callback().",
            grid_name=grid.name,
            column_name=name,
        )


def validate_editable_columns(grid: "Grid") -> None:
    """Validate every editable column of ``grid``."""
    checked = 0
    for column in grid.get_columns():
        if not isinstance(column, EditableColumn) or not column.is_editable():
            continue
        validate_editable_column(grid, column)
        checked += 1
    logger.debug(f"Validated {checked} editable column(s) of grid '{grid.name}'")
