"""
Local development settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = True

LOG_LEVEL = 'DEBUG'
LOGGING['root']['level'] = LOG_LEVEL  # noqa: F405
for _logger in LOGGING['loggers'].values():  # noqa: F405
    _logger['level'] = LOG_LEVEL
