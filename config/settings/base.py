"""
Base settings shared by every environment.
"""
import os
from decimal import Decimal
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'dev-secret-key-change-me')

DEBUG = False

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'rest_framework',
]

DATABASES = {}

USE_TZ = False
TIME_ZONE = os.environ.get('TIME_ZONE', 'Asia/Ho_Chi_Minh')
LANGUAGE_CODE = 'vi'

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'restaurant-commerce',
    }
}

# Restaurant backend
RESTAURANT_API_BASE_URL = os.environ.get('RESTAURANT_API_BASE_URL', 'http://localhost:5000/api')
RESTAURANT_API_TIMEOUT = float(os.environ.get('RESTAURANT_API_TIMEOUT', '15'))

CATALOG_CACHE_TIMEOUT = int(os.environ.get('CATALOG_CACHE_TIMEOUT', '300'))

# Pricing
RESTAURANT_SHIPPING_FEE = Decimal(os.environ.get('RESTAURANT_SHIPPING_FEE', '20000'))

# Reservations
RESTAURANT_RESERVATION = {
    'OPENING_HOUR': 8,
    'LAST_BOOKING_HOUR': 21,
    'MAX_DAYS_AHEAD': 3,
}
RESTAURANT_PARTY_SIZE = {
    'MIN': 1,
    'MAX': 20,
}

# Bank transfer QR
VIETQR_BANK = {
    'BANK_CODE': os.environ.get('VIETQR_BANK_CODE', 'MB'),
    'ACCOUNT_NUMBER': os.environ.get('VIETQR_ACCOUNT_NUMBER', '2506200466666'),
    'ACCOUNT_NAME': os.environ.get('VIETQR_ACCOUNT_NAME', 'NGO TRI ANH VU'),
}

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'shared': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
