"""
Test settings: isolated cache, no outbound geolocation calls.
"""
from .base import *


DEBUG = False

SECRET_KEY = 'giftdesk-test-key'

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'giftdesk-test',
    }
}

GEOLOCATION_URL = 'http://geolocation.invalid/{ip}'
GEOLOCATION_TIMEOUT = 0.1
