# staffing_core/common/api/exceptions.py

from __future__ import annotations

import logging
import uuid
from typing import Any

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    NotAuthenticated,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def ensure_request_id(request) -> str:
    """
    Ensures request has a stable request_id attribute and returns it.
    """
    rid = getattr(request, "request_id", None) if request is not None else None
    if not rid:
        rid = uuid.uuid4().hex
        if request is not None:
            setattr(request, "request_id", rid)
    return rid


def build_error_envelope(*, request=None, code: str, message: str, details: Any = None) -> dict[str, Any]:
    """
    Canonical error envelope for every API error.
    """
    rid = ensure_request_id(request)
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
            "request_id": rid,
        }
    }


class AuthenticationRequired(NotAuthenticated):
    """
    No resolvable identity on a mutation (missing subject, unknown or inactive user).
    """
    default_detail = "Authentication required."
    default_code = "authentication_required"


class AuthorizationDenied(PermissionDenied):
    """
    Identity resolved, but the role/scope does not cover the target.
    """
    default_detail = "You do not have access to this resource."
    default_code = "authorization_denied"


class ConflictError(APIException):
    """
    409 Conflict that still flows through the global exception handler.
    Raised when dependency blockers prevent a hard delete.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict."
    default_code = "conflict"

    def __init__(self, detail=None, code=None, *, blockers: list[dict] | None = None):
        super().__init__(detail=detail or self.default_detail, code=code or self.default_code)
        # kept out of `detail` so counts stay ints in the envelope
        self.blockers = blockers or []


# Order matters: subclasses before their DRF parents.
_ERROR_CODES: tuple[tuple[type, str], ...] = (
    (AuthenticationRequired, "authentication_required"),
    (AuthorizationDenied, "authorization_denied"),
    (ConflictError, "conflict"),
    (ValidationError, "validation_error"),
    (NotAuthenticated, "not_authenticated"),
    (PermissionDenied, "permission_denied"),
    (NotFound, "not_found"),
    (Http404, "not_found"),
)


def _code_for(exc: Exception, http_status: int) -> str:
    for exc_type, code in _ERROR_CODES:
        if isinstance(exc, exc_type):
            return code
    if isinstance(exc, APIException):
        return getattr(exc, "default_code", "api_error") or "api_error"
    if http_status >= 500:
        return "server_error"
    return "error"


def _translate(exc: Exception) -> Exception:
    """
    Model-layer exceptions -> DRF taxonomy, so the DRF handler can render them.
    """
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, "error_dict"):
            return ValidationError(exc.message_dict)
        return ValidationError(exc.messages)
    if isinstance(exc, ObjectDoesNotExist):
        return NotFound()
    return exc


def api_exception_handler(exc: Exception, context: dict[str, Any]):
    request = context.get("request")
    exc = _translate(exc)
    response = drf_exception_handler(exc, context)

    # Truly unhandled error
    if response is None:
        logger.exception("Unhandled API error", exc_info=exc)
        return Response(
            build_error_envelope(
                request=request,
                code="server_error",
                message="Unexpected server error.",
                details=None,
            ),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    http_status = response.status_code
    code = _code_for(exc, http_status)

    # DRF standardizes errors into response.data
    data = response.data

    # 1) {"detail": "..."} only -> message=detail, details=None
    # 2) {"detail": "...", ...} -> message=detail, details={...without detail}
    # 3) otherwise -> message="Request failed.", details=data
    message = "Request failed."
    details = data

    if isinstance(data, dict) and "detail" in data:
        message = str(data.get("detail"))
        rest = {k: v for k, v in data.items() if k != "detail"}
        details = rest or None

    if isinstance(exc, ConflictError) and exc.blockers:
        details = {**(details or {}), "blockers": exc.blockers}

    return Response(
        build_error_envelope(
            request=request,
            code=code,
            message=message,
            details=details,
        ),
        status=http_status,
        headers=response.headers,
    )
