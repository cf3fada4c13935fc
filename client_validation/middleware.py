"""
Error Handling Middleware

Turns exceptions escaping the API views into standardized JSON error
responses. Errors raised during rule extraction surface here as 500s.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse

from .errors import APIError, ErrorCode, ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware:
    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        return self.get_response(request)

    def process_exception(self, request: HttpRequest, exc: Exception) -> Optional[HttpResponse]:
        request_id = getattr(request, "request_id", None) or str(uuid.uuid4())

        if isinstance(exc, APIError):
            exc.request_id = request_id
            logger.error(f"{exc.code} [request_id={request_id}]: {exc.message}")
            if self._is_api_request(request):
                return exc.to_json_response()
            return None

        logger.exception(
            f"Unhandled exception [request_id={request_id}]: {exc}",
            extra={"request_id": request_id},
        )

        if self._is_api_request(request):
            message = "An unexpected error occurred. Please try again later."
            if settings.DEBUG:
                message = f"{type(exc).__name__}: {str(exc)}"

            return self._create_json_error(
                ErrorCode.INTERNAL_ERROR,
                message,
                500,
                request_id,
            )

        return None

    def _is_api_request(self, request: HttpRequest) -> bool:
        if request.path.startswith("/api/"):
            return True

        accept = request.headers.get("Accept", "")
        if "application/json" in accept:
            return True

        return False

    def _create_json_error(
        self,
        code: ErrorCode,
        message: str,
        status: int,
        request_id: str,
    ) -> JsonResponse:
        return ErrorResponse(
            error=ErrorDetail(code=code.value, message=message),
            request_id=request_id,
        ).to_json_response(status)
