"""
Number column.

Uses Django's localized number formatting unless explicit separators are
configured with ``set_number_format``.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from django.utils import formats, numberformat
from django.utils.html import conditional_escape
from django.utils.safestring import SafeString, mark_safe

from .editable import EditableColumn


class NumberColumn(EditableColumn):
    decimals: Optional[int] = 0
    decimal_separator: Optional[str] = None
    thousand_separator: Optional[str] = None

    def set_number_format(
        self,
        decimals: Optional[int] = 0,
        decimal_separator: Optional[str] = None,
        thousand_separator: Optional[str] = None,
    ) -> "NumberColumn":
        self.decimals = decimals
        self.decimal_separator = decimal_separator
        self.thousand_separator = thousand_separator
        return self

    def format_value(self, value: Any) -> SafeString:
        if value is None or value == "":
            return mark_safe("")
        try:
            number = value if isinstance(value, (int, float, Decimal)) else Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return conditional_escape(value)

        if self.decimal_separator is None and self.thousand_separator is None:
            formatted = formats.number_format(number, decimal_pos=self.decimals)
        else:
            formatted = numberformat.format(
                number,
                self.decimal_separator or ".",
                decimal_pos=self.decimals,
                grouping=3 if self.thousand_separator else 0,
                thousand_sep=self.thousand_separator or "",
                force_grouping=bool(self.thousand_separator),
            )
        return conditional_escape(formatted)
