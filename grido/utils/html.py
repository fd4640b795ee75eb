"""
Minimal HTML element builder used for cell prototypes.

Attributes are rendered through Django's ``flatatt`` so values are escaped,
``True`` renders a bare attribute and ``None``/``False`` drop it.
"""

from __future__ import annotations

import copy
from typing import Any, Optional

from django.forms.utils import flatatt
from django.utils.html import conditional_escape, format_html
from django.utils.safestring import SafeString, mark_safe


class Html:
    """A single HTML element with attributes, CSS classes and inner content."""

    def __init__(self, name: str, attrs: Optional[dict[str, Any]] = None):
        self.name = name
        self.attrs: dict[str, Any] = {}
        self.classes: list[str] = []
        self._content: str = ""
        for key, value in (attrs or {}).items():
            self.set_attribute(key, value)

    @classmethod
    def el(cls, name: str, attrs: Optional[dict[str, Any]] = None) -> "Html":
        return cls(name, attrs)

    def set_attribute(self, name: str, value: Any) -> "Html":
        if name == "class":
            self.classes = []
            for css_class in str(value or "").split():
                self.add_class(css_class)
            return self
        self.attrs[name] = value
        return self

    def get_attribute(self, name: str) -> Any:
        if name == "class":
            return " ".join(self.classes)
        return self.attrs.get(name)

    def add_class(self, css_class: str) -> "Html":
        if css_class and css_class not in self.classes:
            self.classes.append(css_class)
        return self

    def has_class(self, css_class: str) -> bool:
        return css_class in self.classes

    def set_html(self, content: Any) -> "Html":
        """Set inner content; plain strings are escaped, safe strings kept."""
        self._content = conditional_escape("" if content is None else content)
        return self

    def start_tag(self) -> SafeString:
        attrs = dict(self.attrs)
        if self.classes:
            attrs["class"] = " ".join(self.classes)
        return format_html("<{}{}>", self.name, flatatt(attrs))

    def end_tag(self) -> SafeString:
        return format_html("</{}>", self.name)

    def render(self) -> SafeString:
        return mark_safe(f"{self.start_tag()}{self._content}{self.end_tag()}")

    def copy(self) -> "Html":
        return copy.deepcopy(self)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Html {self.name} {self.attrs!r} classes={self.classes!r}>"
