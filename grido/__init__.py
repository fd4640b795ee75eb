"""
django-grido: server-rendered data grids with inline editable columns.

The package exposes a grid composite, column types able to switch into an
AJAX editing mode, data sources for the Django ORM and in-memory rows, and
a view that serves the column edit actions.
"""

__version__ = "0.1.0"
