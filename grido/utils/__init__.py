"""
Utility modules for grids.

Import helpers from their submodules; this package does not re-export them
so that ``grido.config`` can depend on ``grido.utils.coercion``.
"""
