"""
Custom exceptions for grids and editable columns.

Configuration problems are raised while the grid renders so that they are
visible before any edit request is serviced.
"""

from typing import Optional


class GridoError(Exception):
    """Base exception for grid errors."""

    def __init__(self, message: str, grid_name: Optional[str] = None):
        self.grid_name = grid_name
        super().__init__(message)


class ConfigurationError(GridoError):
    """Raised when an editable column cannot be serviced with its configuration."""

    def __init__(
        self,
        message: str,
        grid_name: Optional[str] = None,
        column_name: Optional[str] = None,
    ):
        self.column_name = column_name
        super().__init__(message, grid_name)


class InvalidArgumentError(GridoError, TypeError):
    """Raised when a setter receives a value of an unsupported type."""

    pass


class EditableControlError(GridoError, RuntimeError):
    """Raised when a resolved edit control is not a form field."""

    pass


class GridNotFound(GridoError):
    """Raised when no grid factory is registered under the requested name."""

    pass
