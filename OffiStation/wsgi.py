"""WSGI config for the OffiStation storefront."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "OffiStation.settings")

application = get_wsgi_application()
