"""n-cube Foundation Domain -- pure Python domain primitives.

This package provides the application identity value object used as the
composite lookup key across a multi-tenant n-cube configuration store,
together with its release status and error types.
"""

from ncube.foundation.domain.application_id import (
    DEFAULT_APP,
    DEFAULT_TENANT,
    DEFAULT_VERSION,
    VERSION_PATTERN,
    ApplicationId,
    validate_app,
    validate_status,
    validate_tenant,
    validate_version,
)
from ncube.foundation.domain.application_id_payload import ApplicationIdPayload
from ncube.foundation.domain.exceptions import DomainError, ValidationError
from ncube.foundation.domain.release_status import ReleaseStatus

__all__ = [
    "DEFAULT_APP",
    "DEFAULT_TENANT",
    "DEFAULT_VERSION",
    "VERSION_PATTERN",
    "ApplicationId",
    "ApplicationIdPayload",
    "DomainError",
    "ReleaseStatus",
    "ValidationError",
    "validate_app",
    "validate_status",
    "validate_tenant",
    "validate_version",
]
