"""
ASGI config for project.

It exposes the ASGI callable as a module-level variable named ``application``.
"""
import os

from src.config.django import settings_module_for
from src.config.env import env

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", settings_module_for(env.DJANGO_ENV))

application = get_asgi_application()
