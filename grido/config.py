"""
Grid configuration settings.

Values come from the ``GRIDO`` dict in Django settings. Missing keys fall
back to the defaults below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

import bleach
from django.conf import settings as django_settings
from django.core.signals import setting_changed
from django.dispatch import receiver

from .utils.coercion import coerce_bool, coerce_int

DEFAULT_CONTROL_CSS_CLASS = "form-control"
DEFAULT_EDIT_CONTROL_PREFIX = "edit"
DEFAULT_TERMINATE_STATUS_CODE = 204

DEFAULT_ALLOWED_HTML_TAGS = frozenset(bleach.ALLOWED_TAGS) | {
    "span",
    "div",
    "p",
    "br",
}
DEFAULT_ALLOWED_HTML_ATTRIBUTES = {
    "*": ["class", "title"],
    "a": ["href", "title", "class"],
}


@dataclass(frozen=True)
class GridoSettings:
    default_control_css_class: str = DEFAULT_CONTROL_CSS_CLASS
    edit_control_prefix: str = DEFAULT_EDIT_CONTROL_PREFIX
    terminate_status_code: int = DEFAULT_TERMINATE_STATUS_CODE
    sanitize_custom_render: bool = False
    allowed_html_tags: frozenset[str] = DEFAULT_ALLOWED_HTML_TAGS
    allowed_html_attributes: dict[str, Any] = field(
        default_factory=lambda: dict(DEFAULT_ALLOWED_HTML_ATTRIBUTES)
    )


@lru_cache(maxsize=1)
def get_grido_settings() -> GridoSettings:
    raw = getattr(django_settings, "GRIDO", {}) or {}
    allowed_tags = raw.get("allowed_html_tags")
    allowed_attributes = raw.get("allowed_html_attributes")
    return GridoSettings(
        default_control_css_class=str(
            raw.get("default_control_css_class", DEFAULT_CONTROL_CSS_CLASS)
        ),
        edit_control_prefix=str(
            raw.get("edit_control_prefix", DEFAULT_EDIT_CONTROL_PREFIX)
        ),
        terminate_status_code=coerce_int(
            raw.get("terminate_status_code"), default=DEFAULT_TERMINATE_STATUS_CODE
        ),
        sanitize_custom_render=coerce_bool(
            raw.get("sanitize_custom_render"), default=False
        ),
        allowed_html_tags=(
            frozenset(str(tag) for tag in allowed_tags)
            if allowed_tags is not None
            else DEFAULT_ALLOWED_HTML_TAGS
        ),
        allowed_html_attributes=(
            dict(allowed_attributes)
            if isinstance(allowed_attributes, dict)
            else dict(DEFAULT_ALLOWED_HTML_ATTRIBUTES)
        ),
    )


@receiver(setting_changed)
def _reset_grido_settings(sender, setting, **kwargs):
    if setting == "GRIDO":
        get_grido_settings.cache_clear()
