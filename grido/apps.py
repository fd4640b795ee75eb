"""
Django app configuration for django-grido.

Imports the ``grids`` module of every installed app so grid factories
register themselves before the first column action request.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.utils.module_loading import autodiscover_modules

logger = logging.getLogger(__name__)


class GridoConfig(BaseAppConfig):
    """Django app configuration for django-grido."""

    name = "grido"
    verbose_name = "Grido"
    label = "grido"

    def ready(self):
        autodiscover_modules("grids")

        from .registry import get_registered_grids

        logger.debug(f"Registered grids: {get_registered_grids()}")
