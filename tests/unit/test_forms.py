import pytest
from django import forms

from grido.forms import FormContainer

pytestmark = pytest.mark.unit


def test_nested_containers_prefix_control_names():
    form = FormContainer("orders")
    container = form.add_container("editstatus")

    control = container.add_text(7)

    assert control.name == "7"
    assert control.html_name == "editstatus-7"
    assert form.get_container("editstatus") is container
    assert form.has_component("editstatus")


def test_containers_inside_prefixed_forms():
    form = FormContainer("orders", prefix="grid")
    container = form.add_container("edit")

    assert container.add_text("x").html_name == "grid-edit-x"


def test_duplicate_container_names_are_rejected():
    form = FormContainer("orders")
    form.add_container("editstatus")

    with pytest.raises(ValueError):
        form.add_container("editstatus")


def test_set_value_is_picked_up_by_next_render():
    form = FormContainer("orders")
    control = form.add_control("qty", forms.IntegerField(required=False))

    control.set_value(1)
    first = control.render()
    control.set_value(2)
    second = control.render()

    assert 'value="1"' in first
    assert 'value="2"' in second


def test_get_control_requires_existing_field():
    form = FormContainer("orders")
    form.add_text("title")

    assert form.get_control("title").field is form.fields["title"]
    with pytest.raises(KeyError):
        form.get_control("missing")


def test_add_class_appends_once():
    form = FormContainer("orders")
    control = form.add_text("title").add_class("a").add_class("a").add_class("b")

    assert control.field.widget.attrs["class"] == "a b"
