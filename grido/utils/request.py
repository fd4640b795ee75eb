"""
Request utilities for grid actions.

This module provides helpers for detecting AJAX calls and reading the
parameters sent by the inline editing script.
"""

import json
from typing import Any

from django.http import HttpRequest

AJAX_HEADER_VALUE = "XMLHttpRequest"


def is_ajax_request(request: HttpRequest) -> bool:
    """
    Return True when the request was issued by client-side script.

    Args:
        request: The Django request.

    Returns:
        Whether the ``X-Requested-With`` header marks an AJAX call.
    """
    return request.headers.get("x-requested-with") == AJAX_HEADER_VALUE


def get_request_params(request: HttpRequest) -> dict[str, Any]:
    """
    Collect action parameters from a JSON body, form data or the query string.

    JSON bodies win over form data, form data wins over query parameters.
    """
    params: dict[str, Any] = {key: request.GET.get(key) for key in request.GET}

    if request.method == "POST":
        content_type = (request.content_type or "").split(";")[0].strip()
        if content_type == "application/json":
            try:
                body = json.loads(request.body or b"{}")
            except (TypeError, ValueError):
                body = {}
            if isinstance(body, dict):
                params.update(body)
        else:
            params.update({key: request.POST.get(key) for key in request.POST})

    return params


__all__ = ["is_ajax_request", "get_request_params", "AJAX_HEADER_VALUE"]
