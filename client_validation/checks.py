import re

from django.core.checks import Error, Tags, register

from .conf import get_cache_timeout, get_namespace

JS_NAMESPACE_RE = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")


@register(Tags.compatibility)
def check_client_validation_settings(app_configs, **kwargs):
    errors = []

    namespace = get_namespace()
    if not isinstance(namespace, str) or not JS_NAMESPACE_RE.match(namespace):
        errors.append(Error(
            f"CLIENT_VALIDATION_NAMESPACE {namespace!r} is not a dotted JavaScript identifier.",
            hint="Use a global object path such as 'App' or 'App.validation'.",
            id="client_validation.E001",
        ))

    timeout = get_cache_timeout()
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        errors.append(Error(
            f"CLIENT_VALIDATION_CACHE_TIMEOUT must be a positive integer, got {timeout!r}.",
            id="client_validation.E002",
        ))

    return errors
