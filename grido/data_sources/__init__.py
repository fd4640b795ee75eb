"""
Grid data sources.

``wrap_model`` turns what users hand to ``Grid.set_model`` into a ``Model``
when the type is recognised.
"""

from typing import Any

from django.db.models import QuerySet

from .array import ArrayDataSource
from .base import DataSource, RowFetchable, Updatable
from .model import Model, model_lacks
from .queryset import QuerySetDataSource


def wrap_model(model: Any) -> Any:
    """Wrap querysets, lists and data sources; return anything else unchanged."""
    if isinstance(model, Model):
        return model
    if isinstance(model, DataSource):
        return Model(model)
    if isinstance(model, QuerySet):
        return Model(QuerySetDataSource(model))
    if isinstance(model, (list, tuple)):
        return Model(ArrayDataSource(model))
    return model


__all__ = [
    "ArrayDataSource",
    "DataSource",
    "Model",
    "QuerySetDataSource",
    "RowFetchable",
    "Updatable",
    "model_lacks",
    "wrap_model",
]
