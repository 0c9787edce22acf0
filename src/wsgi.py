"""
WSGI entry point for production.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from src.config.django import settings_module_for
from src.config.env import env

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", settings_module_for(env.DJANGO_ENV))

application = get_wsgi_application()
