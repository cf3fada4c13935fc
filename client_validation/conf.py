"""Settings accessors with the app's defaults."""

from typing import List

from django.conf import settings

DEFAULT_NAMESPACE = "App"
DEFAULT_CACHE_TIMEOUT = 60 * 60 * 24 * 7
DEFAULT_AUTODISCOVER_MODULES = ["forms", "view_models"]


def get_namespace() -> str:
    return getattr(settings, "CLIENT_VALIDATION_NAMESPACE", DEFAULT_NAMESPACE)


def get_cache_timeout() -> int:
    return getattr(settings, "CLIENT_VALIDATION_CACHE_TIMEOUT", DEFAULT_CACHE_TIMEOUT)


def get_autodiscover_modules() -> List[str]:
    return list(getattr(settings, "CLIENT_VALIDATION_AUTODISCOVER_MODULES", DEFAULT_AUTODISCOVER_MODULES))
