"""
Text column.
"""

from __future__ import annotations

from typing import Any, Optional

from django.utils.html import conditional_escape
from django.utils.safestring import SafeString, mark_safe
from django.utils.text import Truncator

from .editable import EditableColumn


class TextColumn(EditableColumn):
    """Plain text, optionally truncated to a number of characters."""

    truncate: Optional[int] = None

    def set_truncate(self, max_length: int) -> "TextColumn":
        self.truncate = max_length
        return self

    def format_value(self, value: Any) -> SafeString:
        if value is None:
            return mark_safe("")
        text = str(value)
        if self.truncate:
            text = Truncator(text).chars(self.truncate)
        return conditional_escape(text)
