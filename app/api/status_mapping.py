"""Status Mapping — translates outcomes and error kinds to HTTP status codes.

Invariants:
    - Legacy mode: every success is 201, every failure is 401
    - Strict mode: status derived from ErrorCategory, one status per category
    - The mode is read per call so a settings reload takes effect without restart

Design Decisions:
    - Mapping lives at the API boundary, not on the exceptions: core errors stay
      transport-agnostic (ADR: tagged error kinds)
"""

from fastapi import status

from app.config import get_settings
from app.core.domain_types import ApiCompatMode
from app.core.errors import ErrorCategory

_STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.AUTHENTICATION: status.HTTP_401_UNAUTHORIZED,
    ErrorCategory.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCategory.DATABASE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCategory.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def is_legacy_mode() -> bool:
    return get_settings().api_compat_mode == ApiCompatMode.LEGACY


def success_status(strict_status: int = status.HTTP_200_OK) -> int:
    """Status for a successful response under the active contract."""
    if is_legacy_mode():
        return status.HTTP_201_CREATED
    return strict_status


def error_status(category: ErrorCategory) -> int:
    """Status for a failed response under the active contract."""
    if is_legacy_mode():
        return status.HTTP_401_UNAUTHORIZED
    return _STATUS_BY_CATEGORY[category]
