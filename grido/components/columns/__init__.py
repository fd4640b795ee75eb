"""
Grid column types.
"""

from .column import Column
from .control_source import ControlSource, ControlSourceKind, resolve_control
from .date import DateColumn
from .editable import (
    EDITABLE_ACTION,
    EDITABLE_CONTROL_ACTION,
    EditableColumn,
    EditableState,
)
from .number import NumberColumn
from .text import TextColumn
from .validation import validate_editable_column, validate_editable_columns

__all__ = [
    "Column",
    "ControlSource",
    "ControlSourceKind",
    "DateColumn",
    "EDITABLE_ACTION",
    "EDITABLE_CONTROL_ACTION",
    "EditableColumn",
    "EditableState",
    "NumberColumn",
    "TextColumn",
    "resolve_control",
    "validate_editable_column",
    "validate_editable_columns",
]
