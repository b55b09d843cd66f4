"""
Test settings.
"""
from .base import *  # noqa: F401,F403

RESTAURANT_API_BASE_URL = 'http://testserver/api'
RESTAURANT_API_TIMEOUT = 1.0

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'restaurant-commerce-tests',
    }
}
