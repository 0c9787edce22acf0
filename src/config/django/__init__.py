"""
Settings modules, one per DJANGO_ENV value.
"""

SETTINGS_MODULES = {
    "production": "src.config.django.prod",
    "test": "src.config.django.test",
    "development": "src.config.django.base",
}


def settings_module_for(django_env: str) -> str:
    return SETTINGS_MODULES.get(django_env, "src.config.django.base")
