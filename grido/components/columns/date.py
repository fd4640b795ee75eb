"""
Date column.

Values may be ``date``/``datetime`` objects or ISO strings (as posted by
the inline editor); anything unparsable is shown as-is.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from django.utils import formats, timezone
from django.utils.dateparse import parse_date, parse_datetime
from django.utils.html import conditional_escape
from django.utils.safestring import SafeString, mark_safe

from .editable import EditableColumn


class DateColumn(EditableColumn):
    date_format: str = "DATE_FORMAT"

    def set_date_format(self, date_format: str) -> "DateColumn":
        self.date_format = date_format
        return self

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, (date, datetime)):
            return value
        text = str(value).strip()
        try:
            return parse_datetime(text) or parse_date(text) or value
        except ValueError:
            return value

    def format_value(self, value: Any) -> SafeString:
        if value is None or value == "":
            return mark_safe("")
        coerced = self._coerce(value)
        if not isinstance(coerced, (date, datetime)):
            return conditional_escape(value)
        if isinstance(coerced, datetime) and timezone.is_aware(coerced):
            coerced = timezone.localtime(coerced)
        return conditional_escape(formats.date_format(coerced, self.date_format))
