"""
Standardized Error Handling

Provides consistent error format:
API: { success: false, error: { code, message }, request_id }

HTTP Status Code Standards:
- 200: Success
- 404: Not Found
- 405: Method Not Allowed
- 500: Internal Server Error (view model or rule extraction failures)
"""

from __future__ import annotations

import uuid
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from django.http import JsonResponse

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    PERMISSION_DENIED = "PERMISSION_DENIED"

    VIEW_MODEL_INSTANTIATION_FAILED = "VIEW_MODEL_INSTANTIATION_FAILED"
    RULE_EXTRACTION_FAILED = "RULE_EXTRACTION_FAILED"

    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class ErrorDetail:
    code: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
        }


@dataclass
class ErrorResponse:
    success: bool = False
    error: Optional[ErrorDetail] = None
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "error": self.error.to_dict() if self.error else None,
            "request_id": self.request_id,
        }

    def to_json_response(self, status: int = 400) -> JsonResponse:
        return JsonResponse(self.to_dict(), status=status)


class APIError(Exception):
    def __init__(
        self,
        code: Union[ErrorCode, str],
        message: str,
        status: int = 400,
        request_id: Optional[str] = None,
    ):
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.message = message
        self.status = status
        self.request_id = request_id or str(uuid.uuid4())
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            success=False,
            error=ErrorDetail(
                code=self.code,
                message=self.message,
            ),
            request_id=self.request_id,
        )

    def to_json_response(self) -> JsonResponse:
        return self.to_response().to_json_response(self.status)


class ViewModelInstantiationError(APIError):
    """A view model could not be constructed without arguments."""

    def __init__(self, type_name: str, request_id: Optional[str] = None):
        self.type_name = type_name
        super().__init__(
            code=ErrorCode.VIEW_MODEL_INSTANTIATION_FAILED,
            message=f"Could not instantiate view model {type_name}.",
            status=500,
            request_id=request_id,
        )


class RuleExtractionError(APIError):
    """Reading the validation rules of one field failed."""

    def __init__(self, type_name: str, field_name: str, request_id: Optional[str] = None):
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(
            code=ErrorCode.RULE_EXTRACTION_FAILED,
            message=f"Could not extract validation rules for {type_name}.{field_name}.",
            status=500,
            request_id=request_id,
        )
