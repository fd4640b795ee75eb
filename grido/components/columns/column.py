"""
Base grid column.

A column reads a value from a row through the grid property accessor,
applies replacements and formats it as escaped HTML. A custom render
callback replaces that pipeline entirely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from django.utils.html import conditional_escape
from django.utils.safestring import SafeString, mark_safe

from ...utils.html import Html
from ...utils.sanitization import clean_html

if TYPE_CHECKING:
    from ...forms import FormContainer
    from ..grid import Grid


class Column:
    """A named column bound to a grid."""

    def __init__(
        self,
        grid: "Grid",
        name: str,
        label: Optional[str] = None,
        column: Optional[str] = None,
    ):
        self.grid = grid
        self.name = name
        self.label = label if label is not None else name.replace("_", " ").title()
        self.column = column or name
        self.replacements: dict[Any, Any] = {}
        self.custom_render: Optional[Callable[[Any], Any]] = None
        self.header_prototype = Html.el("th", {"class": f"column grid-header-{name}"})
        self.cell_prototype = Html.el("td", {"class": f"grid-cell-{name}"})

    def get_name(self) -> str:
        return self.name

    def get_column(self) -> str:
        return self.column

    def set_column(self, column: str) -> "Column":
        self.column = column
        return self

    def set_replacement(self, replacements: Mapping[Any, Any]) -> "Column":
        self.replacements = dict(replacements)
        return self

    def set_custom_render(self, callback: Callable[[Any], Any]) -> "Column":
        self.custom_render = callback
        return self

    def get_header_prototype(self) -> Html:
        return self.header_prototype.copy()

    def get_cell_prototype(self, row: Any = None) -> Html:
        return self.cell_prototype.copy()

    def get_value(self, row: Any) -> Any:
        return self.grid.property_accessor.get_value(row, self.column)

    def apply_replacement(self, value: Any) -> Any:
        try:
            return self.replacements.get(value, value)
        except TypeError:
            return value

    def format_value(self, value: Any) -> SafeString:
        if value is None:
            return mark_safe("")
        return conditional_escape(value)

    def render(self, row: Any) -> SafeString:
        if self.custom_render is not None:
            return self.render_custom(row)
        value = self.apply_replacement(self.get_value(row))
        return self.format_value(value)

    def render_custom(self, row: Any) -> SafeString:
        return clean_html(self.custom_render(row))

    def render_header(self) -> SafeString:
        return self.get_header_prototype().set_html(self.label).render()

    def render_cell(self, row: Any) -> SafeString:
        return self.get_cell_prototype(row).set_html(self.render(row)).render()

    def get_form(self) -> "FormContainer":
        return self.grid.get_form()

    def link(self, action: str) -> str:
        return self.grid.link(self.name, action)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} column={self.column!r}>"
