"""
Form containers for inline edit controls.

A grid owns one ``FormContainer``. Auto-initialised cells add a named
sub-container per column so that every row gets its own control name
(``edit<column>-<row id>``).
"""

from __future__ import annotations

from typing import Any, Optional

from django import forms
from django.utils.safestring import SafeString


class FormContainer(forms.Form):
    """A Django form whose fields are added at runtime and which nests containers."""

    def __init__(
        self,
        name: str = "",
        parent: Optional["FormContainer"] = None,
        *args: Any,
        **kwargs: Any,
    ):
        prefix = kwargs.pop("prefix", None)
        if prefix is None and parent is not None:
            prefix = parent.add_prefix(name) if parent.prefix else name
        super().__init__(*args, prefix=prefix, **kwargs)
        self.name = name
        self.parent = parent
        self.containers: dict[str, FormContainer] = {}

    def add_container(self, name: str) -> "FormContainer":
        name = str(name)
        if self.has_component(name):
            raise ValueError(f"Component '{name}' already exists in form '{self.name}'")
        container = FormContainer(name, parent=self, renderer=self.renderer)
        self.containers[name] = container
        return container

    def get_container(self, name: str) -> Optional["FormContainer"]:
        return self.containers.get(str(name))

    def has_component(self, name: str) -> bool:
        name = str(name)
        return name in self.containers or name in self.fields

    def add_control(self, name: Any, field: forms.Field) -> "FormControl":
        name = str(name)
        self.fields[name] = field
        return FormControl(self, name)

    def add_text(self, name: Any, label: Optional[str] = None) -> "FormControl":
        return self.add_control(name, forms.CharField(label=label, required=False))

    def get_control(self, name: Any) -> "FormControl":
        name = str(name)
        if name not in self.fields:
            raise KeyError(f"Control '{name}' not found in form '{self.name}'")
        return FormControl(self, name)


class FormControl:
    """A field of a ``FormContainer`` addressed by name."""

    def __init__(self, container: FormContainer, name: Any):
        self.container = container
        self.name = str(name)

    @property
    def field(self) -> forms.Field:
        return self.container.fields[self.name]

    @property
    def html_name(self) -> str:
        return self.container.add_prefix(self.name)

    def add_class(self, css_class: str) -> "FormControl":
        widget_attrs = self.field.widget.attrs
        classes = str(widget_attrs.get("class", "")).split()
        if css_class not in classes:
            classes.append(css_class)
        widget_attrs["class"] = " ".join(classes)
        return self

    def set_value(self, value: Any) -> "FormControl":
        self.container.initial[self.name] = value
        return self

    def get_value(self) -> Any:
        return self.bound_field().value()

    def bound_field(self) -> forms.BoundField:
        # A fresh bound field picks up the current initial value.
        return self.field.get_bound_field(self.container, self.name)

    def render(self) -> SafeString:
        return self.bound_field().as_widget()

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<FormControl {self.html_name} {type(self.field).__name__}>"

