"""
Django ORM data source.
"""

from __future__ import annotations

from typing import Any, Mapping

from django.db.models import QuerySet

from .base import DataSource, RowFetchable, Updatable


class QuerySetDataSource(DataSource, Updatable, RowFetchable):
    """Rows are model instances of a queryset."""

    def __init__(self, queryset: QuerySet):
        self.queryset = queryset

    def get_data(self) -> list[Any]:
        return list(self.queryset.all())

    def get_count(self) -> int:
        return self.queryset.count()

    def update(self, id: Any, changes: Mapping[str, Any], primary_key: str) -> int:
        return self.queryset.filter(**{primary_key: id}).update(**dict(changes))

    def get_row(self, id: Any, primary_key: str) -> Any:
        return self.queryset.get(**{primary_key: id})
