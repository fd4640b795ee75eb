"""
Column action endpoint.

Serves the two inline editing actions of editable columns:

    POST <grid_name>/<column_name>/editable/         id, newValue, oldValue
    POST <grid_name>/<column_name>/editableControl/  value

Parameters may be sent as JSON, form data or query string. The column
decides whether the request is served (AJAX only, editing enabled).
"""

import logging

from django.http import Http404
from django.views import View

from .components.columns.editable import (
    EDITABLE_ACTION,
    EDITABLE_CONTROL_ACTION,
    EditableColumn,
)
from .exceptions import GridNotFound
from .registry import build_grid
from .utils.request import get_request_params

logger = logging.getLogger(__name__)


class ColumnActionView(View):
    """Dispatch an AJAX action to an editable column of a registered grid."""

    http_method_names = ["get", "post"]

    def get(self, request, grid_name, column_name, action):
        return self._dispatch_action(request, grid_name, column_name, action)

    def post(self, request, grid_name, column_name, action):
        return self._dispatch_action(request, grid_name, column_name, action)

    def _dispatch_action(self, request, grid_name, column_name, action):
        try:
            grid = build_grid(grid_name, request)
        except GridNotFound as exc:
            raise Http404(str(exc)) from exc

        column = grid.get_column(column_name)
        if not isinstance(column, EditableColumn):
            raise Http404(f"Grid '{grid_name}' has no editable column '{column_name}'")

        params = get_request_params(request)

        if action == EDITABLE_ACTION:
            return column.handle_editable(
                request,
                params.get("id"),
                params.get("newValue"),
                params.get("oldValue"),
            )
        if action == EDITABLE_CONTROL_ACTION:
            return column.handle_editable_control(request, params.get("value"))

        logger.info(f"Unknown column action '{action}' for '{grid_name}.{column_name}'")
        raise Http404(f"Unknown column action '{action}'")


column_action_view = ColumnActionView.as_view()
