"""
ASGI entry point for the helpdesk backend.

The default settings module is the development configuration.
"""

import os

from django.conf import settings
from django.core.asgi import get_asgi_application
from django.contrib.staticfiles.handlers import ASGIStaticFilesHandler

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "helpdesk_backend.settings.dev")

application = get_asgi_application()

# Serve /static/ when using uvicorn in DEBUG mode
if settings.DEBUG:
    application = ASGIStaticFilesHandler(application)
