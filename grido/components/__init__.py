"""
Grid components: the grid composite and its columns.
"""

from .grid import Grid

__all__ = ["Grid"]
