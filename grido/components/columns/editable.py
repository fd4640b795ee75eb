"""
Inline editable columns.

An editable column marks its cells for the client-side script, hands out
edit controls and serves two AJAX actions:

- ``editable``: persist a new value and return the re-rendered cell
  (``{"updated": bool, "html": str}``).
- ``editableControl``: return the rendered edit control for a seed value.

Editing is on as soon as ``set_editable()`` is called or any of the
control/edit/value/row callbacks is configured, unless the column was
disabled with ``disable_editable()``, which is final.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from html import unescape
from typing import TYPE_CHECKING, Any, Callable, Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.html import strip_tags
from django.utils.safestring import SafeString, mark_safe

from ...config import get_grido_settings
from ...forms import FormContainer, FormControl
from ...utils.html import Html
from ...utils.request import is_ajax_request
from .column import Column
from .control_source import ControlSource, resolve_control

if TYPE_CHECKING:
    from ..grid import Grid

logger = logging.getLogger(__name__)

EDITABLE_ACTION = "editable"
EDITABLE_CONTROL_ACTION = "editableControl"

EDITABLE_CSS_CLASS = "editable"
EDITABLE_AUTO_INIT_CSS_CLASS = "editable-auto-init"


@dataclass
class EditableState:
    """Inline editing configuration of one column."""

    requested: bool = False
    auto_init: bool = False
    disabled: bool = False
    disable_predicate: Optional[Callable[[Any], bool]] = None
    edit_callback: Optional[Callable[[Any, Any, Any, "EditableColumn"], Any]] = None
    value_callback: Optional[Callable[[Any, "EditableColumn"], Any]] = None
    row_callback: Optional[Callable[[Any, "EditableColumn"], Any]] = None
    control_source: ControlSource = field(default_factory=ControlSource.default)

    @property
    def configured(self) -> bool:
        return (
            not self.control_source.is_default
            or self.edit_callback is not None
            or self.value_callback is not None
            or self.row_callback is not None
        )

    @property
    def enabled(self) -> bool:
        if self.disabled:
            return False
        return self.requested or self.configured


def _plain_text(markup: Any) -> str:
    """Reduce rendered markup to text the widget escapes again."""
    # str.__str__ drops the SafeString marker.
    return str.__str__(unescape(strip_tags(markup)))


class EditableColumn(Column):
    """Column with AJAX inline editing."""

    def __init__(
        self,
        grid: "Grid",
        name: str,
        label: Optional[str] = None,
        column: Optional[str] = None,
    ):
        super().__init__(grid, name, label, column)
        self.editable = EditableState()
        self.inline_edit_confirm_prototype = Html.el(
            "button", {"data-confirm-inline-edit": True}
        )

    # Configuration

    def set_editable(
        self,
        callback: Optional[Callable[[Any, Any, Any, "EditableColumn"], Any]] = None,
        control: Any = None,
        auto_init: bool = False,
        disable_predicate: Optional[Callable[[Any], bool]] = None,
    ) -> "EditableColumn":
        """
        Turn inline editing on.

        Args:
            callback: ``callback(id, new_value, old_value, column)`` persisting an edit.
            control: A ``django.forms.Field`` prototype or a ``(container, name)`` factory.
            auto_init: Render cells directly as edit controls.
            disable_predicate: ``predicate(row)``; a truthy result keeps that row read-only.
        """
        self.editable.requested = True
        self.editable.auto_init = auto_init
        self.editable.disable_predicate = disable_predicate
        self._register_inline_editing()

        if callback is not None:
            self.set_editable_callback(callback)
        if control is not None:
            self.set_editable_control(control)

        return self

    def set_editable_control(self, control: Any) -> "EditableColumn":
        """
        Set the edit control prototype or factory.

        Raises:
            InvalidArgumentError: If ``control`` is neither a form field nor callable.
        """
        self.editable.control_source = ControlSource.from_value(control)
        self._register_inline_editing()
        return self

    def set_editable_callback(
        self, callback: Callable[[Any, Any, Any, "EditableColumn"], Any]
    ) -> "EditableColumn":
        self.editable.edit_callback = callback
        self._register_inline_editing()
        return self

    def set_editable_value_callback(
        self, callback: Callable[[Any, "EditableColumn"], Any]
    ) -> "EditableColumn":
        self.editable.value_callback = callback
        self._register_inline_editing()
        return self

    def set_editable_row_callback(
        self, callback: Callable[[Any, "EditableColumn"], Any]
    ) -> "EditableColumn":
        """Required with a custom render when the model cannot fetch rows."""
        self.editable.row_callback = callback
        self._register_inline_editing()
        return self

    def disable_editable(self) -> "EditableColumn":
        self.editable.requested = False
        self.editable.disabled = True
        return self

    def _register_inline_editing(self) -> None:
        if self.editable.disabled:
            logger.debug(
                f"Column '{self.name}' has inline editing disabled; configuration stored only"
            )
            return
        self.grid.enable_inline_editing()

    # Accessors

    def get_editable_callback(self):
        return self.editable.edit_callback

    def get_editable_value_callback(self):
        return self.editable.value_callback

    def get_editable_row_callback(self):
        return self.editable.row_callback

    def get_editable_control_source(self) -> ControlSource:
        return self.editable.control_source

    def get_inline_edit_confirm_prototype(self) -> Html:
        return self.inline_edit_confirm_prototype

    def is_editable(self) -> bool:
        return self.editable.enabled

    def is_editable_auto_init(self) -> bool:
        return self.editable.auto_init

    def is_editable_disabled(self) -> bool:
        return self.editable.disabled

    def is_editable_for(self, row: Any) -> bool:
        """Whether ``row`` can be edited in this column."""
        if not self.is_editable():
            return False
        if self.editable.disable_predicate is None:
            return True
        return not self.editable.disable_predicate(row)

    # Rendering

    def get_header_prototype(self) -> Html:
        th = super().get_header_prototype()
        if self.is_editable():
            th.set_attribute("data-grido-editable-handler", self.link(EDITABLE_ACTION))
            th.set_attribute(
                "data-grido-editableControl-handler", self.link(EDITABLE_CONTROL_ACTION)
            )
        return th

    def get_cell_prototype(self, row: Any = None) -> Html:
        td = super().get_cell_prototype(row)

        if row is not None and self.is_editable_for(row):
            td.add_class(EDITABLE_CSS_CLASS)
            if self.is_editable_auto_init():
                td.add_class(EDITABLE_AUTO_INIT_CSS_CLASS)

            value_callback = self.editable.value_callback
            value = (
                self.get_value(row)
                if value_callback is None
                else value_callback(row, self)
            )
            td.set_attribute(
                "data-grido-editable-value", "" if value is None else str(value)
            )

        return td

    def get_editable_control(self, container: FormContainer, name: Any) -> FormControl:
        """
        Return a fresh, unpopulated edit control named ``name`` in ``container``.

        Raises:
            EditableControlError: If the prototype or factory did not yield a form field.
        """
        return resolve_control(self.editable.control_source, container, name)

    def get_edit_control_name(self) -> str:
        return f"{get_grido_settings().edit_control_prefix}{self.name}"

    def get_edit_container(self, name: str) -> FormContainer:
        form = self.get_form()
        container = form.get_container(name)
        if container is None:
            # A control fetched earlier under the same name gives way.
            form.fields.pop(name, None)
            container = form.add_container(name)
        return container

    def render(self, row: Any) -> SafeString:
        if not (self.editable.auto_init and self.is_editable_for(row)):
            return super().render(row)

        replacements = self.replacements
        self.replacements = {}
        try:
            value = super().render(row)
        finally:
            self.replacements = replacements

        row_id = self.grid.property_accessor.get_value(row, self.grid.primary_key)
        container = self.get_edit_container(self.get_edit_control_name())
        control = self.get_editable_control(container, row_id)
        control.set_value(_plain_text(value))

        return mark_safe(f"{control.render()}{self.inline_edit_confirm_prototype.render()}")

    # Request handlers

    def handle_editable(
        self, request: HttpRequest, id: Any, new_value: Any, old_value: Any
    ) -> HttpResponse:
        """
        Persist an inline edit and return the re-rendered cell content.

        Configuration errors, callback errors and data source errors propagate.
        """
        self.grid.trigger_render()

        if not is_ajax_request(request) or not self.is_editable():
            return self._terminate(request, EDITABLE_ACTION)

        edit_callback = self.editable.edit_callback
        if edit_callback is not None:
            success = edit_callback(id, new_value, old_value, self)
        else:
            success = self.grid.model.update(
                id, {self.get_column(): new_value}, self.grid.primary_key
            )

        if self.custom_render is not None:
            html = self.render_custom(self._get_editable_row(id))
        else:
            html = self.format_value(new_value)

        logger.debug(
            f"Inline edit of '{self.grid.name}.{self.name}' row {id!r}: updated={bool(success)}"
        )
        return JsonResponse({"updated": bool(success), "html": str(html)})

    def handle_editable_control(self, request: HttpRequest, value: Any) -> HttpResponse:
        """Return the rendered edit control populated with ``value``."""
        self.grid.trigger_render()

        if not is_ajax_request(request) or not self.is_editable():
            return self._terminate(request, EDITABLE_CONTROL_ACTION)

        control = self.get_editable_control(self.get_form(), self.get_edit_control_name())
        control.set_value(value)

        return HttpResponse(control.render(), content_type="text/plain; charset=utf-8")

    def _get_editable_row(self, id: Any) -> Any:
        row_callback = self.editable.row_callback
        if row_callback is not None:
            return row_callback(id, self)
        return self.grid.model.get_row(id, self.grid.primary_key)

    def _terminate(self, request: HttpRequest, action: str) -> HttpResponse:
        logger.info(
            f"Terminated '{action}' request for column '{self.grid.name}.{self.name}' "
            f"(ajax={is_ajax_request(request)}, editable={self.is_editable()})"
        )
        return HttpResponse(status=get_grido_settings().terminate_status_code)
