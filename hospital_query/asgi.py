"""
ASGI config for the hospital_query project.

The service only speaks plain HTTP, so the Django ASGI handler is the
whole application.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hospital_query.settings")

application = get_asgi_application()
