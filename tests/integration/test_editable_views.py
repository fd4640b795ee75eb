"""
Integration tests for the column action endpoint.
"""

import json
from datetime import date

import pytest
from django.test import Client

from grido.exceptions import ConfigurationError
from grido.registry import build_grid
from tests.grids import EDIT_LOG
from tests.models import TestOwner, TestTask

pytestmark = [pytest.mark.integration, pytest.mark.django_db]

AJAX = {"HTTP_X_REQUESTED_WITH": "XMLHttpRequest"}


@pytest.fixture
def task():
    owner = TestOwner.objects.create(name="Ann")
    return TestTask.objects.create(
        title="Write docs",
        status="open",
        priority=2,
        due_date=date(2026, 10, 18),
        owner=owner,
    )


def _url(grid, column, action):
    return f"/grido/{grid}/{column}/{action}/"


def test_commit_updates_model_field(task):
    response = Client().post(
        _url("tasks", "title", "editable"),
        {"id": task.pk, "newValue": "Write more docs", "oldValue": task.title},
        **AJAX,
    )

    assert response.status_code == 200
    assert response.json() == {"updated": True, "html": "Write more docs"}
    task.refresh_from_db()
    assert task.title == "Write more docs"


def test_commit_accepts_json_body(task):
    response = Client().post(
        _url("tasks", "title", "editable"),
        data=json.dumps({"id": task.pk, "newValue": "A & B", "oldValue": task.title}),
        content_type="application/json",
        **AJAX,
    )

    assert response.json() == {"updated": True, "html": "A &amp; B"}
    task.refresh_from_db()
    assert task.title == "A & B"


def test_commit_for_missing_row_reports_not_updated(task):
    response = Client().post(
        _url("tasks", "title", "editable"),
        {"id": task.pk + 100, "newValue": "x", "oldValue": "y"},
        **AJAX,
    )

    assert response.json() == {"updated": False, "html": "x"}


def test_commit_on_relation_column_goes_through_callback(task):
    EDIT_LOG.clear()

    response = Client().post(
        _url("tasks", "owner", "editable"),
        {"id": task.pk, "newValue": "Bob", "oldValue": "Ann"},
        **AJAX,
    )

    assert response.json() == {"updated": True, "html": "Bob"}
    assert EDIT_LOG == [(str(task.pk), "Bob", "Ann", "owner")]
    assert TestOwner.objects.get().name == "Ann"


def test_commit_with_custom_render_reloads_row(task):
    response = Client().post(
        _url("tasks", "due_date", "editable"),
        {"id": task.pk, "newValue": "2026-11-01", "oldValue": "2026-10-18"},
        **AJAX,
    )

    assert response.json() == {"updated": True, "html": "<em>2026-11-01</em>"}


def test_fetch_control_returns_prototype_widget(task):
    response = Client().post(
        _url("tasks", "priority", "editableControl"), {"value": "3"}, **AJAX
    )
    content = response.content.decode()

    assert response.status_code == 200
    assert 'type="number"' in content
    assert 'name="editpriority"' in content
    assert 'value="3"' in content


def test_fetch_control_via_get(task):
    response = Client().get(
        _url("tasks", "title", "editableControl"), {"value": "42"}, **AJAX
    )

    assert 'type="text"' in response.content.decode()
    assert 'value="42"' in response.content.decode()


def test_non_ajax_request_is_terminated(task):
    response = Client().post(
        _url("tasks", "title", "editable"),
        {"id": task.pk, "newValue": "changed", "oldValue": task.title},
    )

    assert response.status_code == 204
    assert response.content == b""
    task.refresh_from_db()
    assert task.title == "Write docs"


def test_plain_column_is_terminated(task):
    response = Client().post(
        _url("tasks", "readonly_title", "editable"),
        {"id": task.pk, "newValue": "changed", "oldValue": task.title},
        **AJAX,
    )

    assert response.status_code == 204
    task.refresh_from_db()
    assert task.title == "Write docs"


@pytest.mark.parametrize(
    "grid, column, action",
    [
        ("missing", "title", "editable"),
        ("tasks", "missing", "editable"),
        ("tasks", "title", "delete"),
    ],
)
def test_unknown_targets_return_404(grid, column, action):
    response = Client().post(_url(grid, column, action), {}, **AJAX)

    assert response.status_code == 404


def test_misconfigured_grid_fails_before_update(task):
    with pytest.raises(ConfigurationError, match="Column 'owner' has error"):
        Client().post(
            _url("broken_tasks", "owner", "editable"),
            {"id": task.pk, "newValue": "Bob", "oldValue": "Ann"},
            **AJAX,
        )


def test_grid_render_marks_editable_cells(task):
    html = build_grid("tasks").render()

    assert 'data-grido-options="{&quot;editable&quot;: true}"' in html
    assert f'name="editstatus-{task.pk}"' in html
    assert 'value="open"' in html
    assert "editable-auto-init" in html
    assert 'data-grido-editable-value="Ann"' in html
    assert "<em>2026-10-18</em>" in html
    assert 'class="grid-cell-readonly_title">Write docs</td>' in html
