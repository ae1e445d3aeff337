"""
WSGI entry point for the helpdesk backend.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "helpdesk_backend.settings.dev")

application = get_wsgi_application()
