"""
Grid composite.

The grid owns its columns, the bound model, the form holding edit
controls and the options handed to the client-side script. Grids are
rebuilt for every request (see ``grido.registry``), so nothing here is
shared between requests.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

from django.http import HttpRequest
from django.urls import reverse
from django.utils.safestring import SafeString, mark_safe

from ..data_sources import Model, wrap_model
from ..forms import FormContainer
from ..utils.accessors import PropertyAccessor
from ..utils.html import Html
from .columns.column import Column
from .columns.date import DateColumn
from .columns.number import NumberColumn
from .columns.text import TextColumn
from .columns.validation import validate_editable_columns

logger = logging.getLogger(__name__)

COLUMN_ACTION_URL_NAME = "grido:column_action"


class Grid:
    """A server-rendered data grid."""

    def __init__(
        self,
        name: str,
        request: Optional[HttpRequest] = None,
        primary_key: str = "id",
    ):
        self.name = name
        self.request = request
        self.primary_key = primary_key
        self.model: Any = None
        self.property_accessor = PropertyAccessor()
        self.on_render: list[Callable[["Grid"], Any]] = []
        self.editable_registered = False
        self.table_prototype = Html.el("table", {"class": "grido", "id": f"grid-{name}"})
        self._client_side_options: dict[str, Any] = {}
        self._columns: dict[str, Column] = {}
        self._form: Optional[FormContainer] = None

    # Configuration

    def set_model(self, model: Any) -> "Grid":
        self.model = wrap_model(model)
        return self

    def set_primary_key(self, primary_key: str) -> "Grid":
        self.primary_key = primary_key
        return self

    def set_property_accessor(self, accessor: PropertyAccessor) -> "Grid":
        self.property_accessor = accessor
        return self

    def get_client_side_options(self) -> dict[str, Any]:
        return dict(self._client_side_options)

    def set_client_side_options(self, options: dict[str, Any]) -> "Grid":
        self._client_side_options.update(options)
        return self

    def enable_inline_editing(self) -> None:
        """Register inline editing once per grid."""
        if self.editable_registered:
            return
        self.editable_registered = True
        self.set_client_side_options({"editable": True})
        logger.debug(f"Inline editing registered for grid '{self.name}'")

    # Columns

    def add_column(self, column: Column) -> Column:
        if column.name in self._columns:
            raise ValueError(f"Column '{column.name}' already exists in grid '{self.name}'")
        self._columns[column.name] = column
        return column

    def add_column_text(
        self, name: str, label: Optional[str] = None, column: Optional[str] = None
    ) -> TextColumn:
        return self.add_column(TextColumn(self, name, label, column))

    def add_column_number(
        self, name: str, label: Optional[str] = None, column: Optional[str] = None
    ) -> NumberColumn:
        return self.add_column(NumberColumn(self, name, label, column))

    def add_column_date(
        self, name: str, label: Optional[str] = None, column: Optional[str] = None
    ) -> DateColumn:
        return self.add_column(DateColumn(self, name, label, column))

    def get_column(self, name: str) -> Optional[Column]:
        return self._columns.get(name)

    def get_columns(self) -> list[Column]:
        return list(self._columns.values())

    # Form and links

    def get_form(self) -> FormContainer:
        if self._form is None:
            self._form = FormContainer(self.name)
        return self._form

    def link(self, column_name: str, action: str) -> str:
        return reverse(
            COLUMN_ACTION_URL_NAME,
            kwargs={
                "grid_name": self.name,
                "column_name": column_name,
                "action": action,
            },
        )

    # Rendering

    def validate(self) -> None:
        """Check column configuration; raises ``ConfigurationError``."""
        if self.editable_registered:
            validate_editable_columns(self)

    def trigger_render(self) -> None:
        """Run validation and the ``on_render`` hooks."""
        self.validate()
        for hook in list(self.on_render):
            hook(self)

    def get_data(self) -> list[Any]:
        if self.model is None:
            return []
        if not isinstance(self.model, Model):
            logger.warning(
                f"Grid '{self.name}' has an opaque model {type(self.model).__name__}; "
                "rendering without rows"
            )
            return []
        return list(self.model.get_data())

    def render(self) -> SafeString:
        self.trigger_render()
        columns = self.get_columns()

        header = "".join(column.render_header() for column in columns)
        body = "".join(
            f"<tr>{''.join(column.render_cell(row) for column in columns)}</tr>"
            for row in self.get_data()
        )

        table = self.table_prototype.copy()
        table.set_attribute("data-grido-options", json.dumps(self.get_client_side_options()))
        table.set_html(mark_safe(f"<thead><tr>{header}</tr></thead><tbody>{body}</tbody>"))
        return table.render()

    def __repr__(self) -> str:
        return f"<Grid {self.name!r} columns={list(self._columns)!r}>"
