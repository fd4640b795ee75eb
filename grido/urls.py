"""
URL configuration for grid column actions.

Usage in your project urls.py:
    from django.urls import include, path

    urlpatterns = [
        path("grido/", include("grido.urls")),
    ]
"""

from django.urls import path

from .views import column_action_view

app_name = "grido"

urlpatterns = [
    path(
        "<str:grid_name>/<str:column_name>/<str:action>/",
        column_action_view,
        name="column_action",
    ),
]
