"""
HTML sanitization for custom rendered cell content.
"""

import bleach
from django.utils.safestring import SafeString, mark_safe

from ..config import get_grido_settings


def clean_html(content: object) -> SafeString:
    """
    Clean custom rendered markup with the configured tag allowlist.

    Markup passes through untouched unless ``sanitize_custom_render`` is on.

    Args:
        content: Markup returned by a custom render callback.

    Returns:
        Markup for the table cell.

    Examples:
        >>> # GRIDO = {"sanitize_custom_render": True}
        >>> clean_html("<b>done</b><script>x()</script>")
        '<b>done</b>x()'
    """
    if content is None:
        return mark_safe("")
    grido_settings = get_grido_settings()
    if not grido_settings.sanitize_custom_render:
        return mark_safe(str(content))
    cleaned = bleach.clean(
        str(content),
        tags=grido_settings.allowed_html_tags,
        attributes=grido_settings.allowed_html_attributes,
        strip=True,
    )
    return mark_safe(cleaned)
