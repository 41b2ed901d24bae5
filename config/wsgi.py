import os

from django.core.wsgi import get_wsgi_application
from decouple import config

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev' if config('DEBUG', default=False, cast=bool) else 'config.settings.prod')

application = get_wsgi_application()
