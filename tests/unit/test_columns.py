"""
Tests for base column rendering and the concrete column types.
"""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from django.test import override_settings

from grido.components import Grid
from grido.components.columns import EditableColumn

pytestmark = pytest.mark.unit


def _grid():
    grid = Grid("orders")
    grid.set_model([])
    return grid


def test_label_defaults_to_title_cased_name():
    column = _grid().add_column_text("due_date")

    assert column.label == "Due Date"
    assert column.get_column() == "due_date"


def test_value_is_read_through_dotted_path():
    column = _grid().add_column_text("owner", "Owner", "owner.name")
    row = SimpleNamespace(id=1, owner=SimpleNamespace(name="Ann"))

    assert column.get_value(row) == "Ann"
    assert column.get_value({"owner": {"name": "Bob"}}) == "Bob"
    assert column.get_value({"owner": None}) is None


def test_render_applies_replacements_and_escapes():
    column = _grid().add_column_text("status").set_replacement({"open": "<Open>"})

    assert column.render({"status": "open"}) == "&lt;Open&gt;"
    assert column.render({"status": "a & b"}) == "a &amp; b"
    assert column.render({"status": None}) == ""


def test_unhashable_values_skip_replacements():
    column = _grid().add_column_text("tags").set_replacement({"x": "y"})

    assert column.render({"tags": ["x"]}) == "[&#x27;x&#x27;]"


def test_custom_render_replaces_formatting():
    column = _grid().add_column_text("status")
    column.set_custom_render(
        lambda row: f'<span class="badge" data-id="7" style="color:red">{row["status"]}</span>'
    )

    assert (
        column.render({"status": "open"})
        == '<span class="badge" data-id="7" style="color:red">open</span>'
    )


@override_settings(GRIDO={"sanitize_custom_render": True})
def test_custom_render_can_be_sanitized():
    column = _grid().add_column_text("status")
    column.set_custom_render(lambda row: '<span class="badge" data-id="7"><marquee>hi</marquee></span>')

    assert column.render({"status": "open"}) == '<span class="badge">hi</span>'


def test_text_column_truncates():
    column = _grid().add_column_text("title").set_truncate(5)

    assert column.render({"title": "Inline editing"}) == "Inli…"


def test_number_column_formats_numbers():
    column = _grid().add_column_number("price").set_number_format(2, ",", " ")

    assert column.render({"price": Decimal("1234.5")}) == "1 234,50"
    assert column.format_value("12") == "12,00"
    assert column.format_value("n/a") == "n/a"
    assert column.format_value("") == ""


def test_number_column_default_format():
    column = _grid().add_column_number("qty")

    assert column.render({"qty": 42}) == "42"


def test_date_column_formats_dates_and_iso_strings():
    column = _grid().add_column_date("due").set_date_format("Y-m-d")

    assert column.render({"due": date(2026, 10, 18)}) == "2026-10-18"
    assert column.format_value("2026-10-20") == "2026-10-20"
    assert column.format_value("tomorrow") == "tomorrow"
    assert column.format_value(None) == ""


def test_concrete_columns_are_editable_columns():
    grid = _grid()

    for column in (
        grid.add_column_text("a"),
        grid.add_column_number("b"),
        grid.add_column_date("c"),
    ):
        assert isinstance(column, EditableColumn)


def test_render_cell_wraps_value_in_prototype():
    column = _grid().add_column_text("status")

    assert column.render_cell({"status": "open"}) == '<td class="grid-cell-status">open</td>'
    assert column.render_header() == '<th class="column grid-header-status">Status</th>'
