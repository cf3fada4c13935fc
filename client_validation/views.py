"""
Client Validation Rule Views

Publishes the validation rules of every view model for client-side
validation. Server remains authoritative; client mirrors constraints for UX.
Rules only change on deployment, so responses are cached for
``CLIENT_VALIDATION_CACHE_TIMEOUT`` seconds.
"""

from django.views.decorators.cache import cache_page
from rest_framework.decorators import (
    api_view,
    authentication_classes,
    permission_classes,
    renderer_classes,
)
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response

from .conf import get_cache_timeout
from .renderers import ClientValidationScriptRenderer
from .rules import build_client_validation_rules


@cache_page(get_cache_timeout())
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
@renderer_classes([ClientValidationScriptRenderer])
def client_validation_script(request):
    """
    Returns JavaScript that assigns the rules dictionary to the configured
    namespace when embedded on a page.
    """
    return Response(build_client_validation_rules())


@cache_page(get_cache_timeout())
@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
@renderer_classes([JSONRenderer])
def client_validation_json(request):
    """Returns the rules dictionary as JSON."""
    return Response(build_client_validation_rules())
