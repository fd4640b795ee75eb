"""
Grids used by the integration tests; discovered by ``GridoConfig.ready()``.
"""

from django import forms

from grido.components import Grid
from grido.registry import grid_factory
from tests.models import TestTask

EDIT_LOG = []


def _record_owner_edit(id, new_value, old_value, column):
    EDIT_LOG.append((id, new_value, old_value, column.name))
    return True


@grid_factory("tasks")
def build_tasks_grid(request=None):
    grid = Grid("tasks", request)
    grid.set_model(TestTask.objects.all())

    grid.add_column_text("title").set_editable()
    grid.add_column_text("status").set_replacement({"open": "Open", "done": "Done"}).set_editable(
        auto_init=True
    )
    grid.add_column_number("priority").set_editable_control(
        forms.IntegerField(required=False, widget=forms.NumberInput(attrs={"class": "form-control"}))
    )
    grid.add_column_text("owner", "Owner", "owner.name").set_editable(_record_owner_edit)
    grid.add_column_date("due_date").set_editable().set_custom_render(
        lambda row: f"<em>{row.due_date or '-'}</em>"
    )
    grid.add_column_text("readonly_title", "Read only", "title")
    return grid


@grid_factory("broken_tasks")
def build_broken_tasks_grid(request=None):
    grid = Grid("broken_tasks", request)
    grid.set_model(TestTask.objects.all())
    grid.add_column_text("owner", "Owner", "owner.name").set_editable()
    return grid
