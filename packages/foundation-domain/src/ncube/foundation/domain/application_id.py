"""Identity of a versioned application within a multi-tenant n-cube store.

An ApplicationId binds together account (tenant), app, version and release
status. Together these fields completely identify the application and
version a given n-cube belongs to, and the identifier is used as a composite
key for lookups and caching.

Comparison rules are deliberately mixed: ``account`` and ``app`` compare
case-insensitively, ``version`` and ``status`` compare exactly.

Example:
    >>> app_id = ApplicationId("Acme", "Pricing", "1.0.0", "RELEASE")
    >>> app_id.cache_key("rates")
    'acme/pricing/1.0.0/rates'
    >>> app_id == ApplicationId("ACME", "pricing", "1.0.0", "RELEASE")
    True
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from ncube.foundation.domain.exceptions import ValidationError
from ncube.foundation.domain.release_status import ReleaseStatus

logger = logging.getLogger(__name__)

DEFAULT_TENANT = "NONE"
DEFAULT_APP = "DEFAULT_APP"
DEFAULT_VERSION = "999.99.9"

# major.minor.revision, ASCII digits only
VERSION_PATTERN: re.Pattern[str] = re.compile(r"\d+\.\d+\.\d+", re.ASCII)


def validate_tenant(tenant: str | None) -> None:
    """Reject a null or empty account.

    Whitespace is not trimmed: ``" "`` is a valid account.

    Raises:
        ValidationError: If tenant is None or empty.
    """
    if not tenant:
        raise ValidationError("account", "Tenant cannot be null or empty", value=tenant)


def validate_app(app: str | None) -> None:
    """Reject a null or empty app name.

    Raises:
        ValidationError: If app is None or empty.
    """
    if not app:
        raise ValidationError("app", "App cannot be null or empty", value=app)


def validate_version(version: str | None) -> None:
    """Require a ``major.minor.revision`` numeric version.

    The whole string must match; trailing text such as ``"1.2.3abc"`` or
    ``"1.0.0-beta"`` is rejected.

    Raises:
        ValidationError: If version is None, empty or not of the form n.n.n.
    """
    if not version:
        raise ValidationError("version", "Version cannot be null or empty", value=version)
    if not isinstance(version, str) or VERSION_PATTERN.fullmatch(version) is None:
        reason = (
            f"Invalid version: '{version}'. Version must follow the form n.n.n "
            "where n is a number 0 or greater. The numbers stand for "
            "major.minor.revision"
        )
        raise ValidationError("version", reason, value=version)


def validate_status(status: str | None) -> None:
    """Require one of the ReleaseStatus literals, matched case-sensitively.

    Raises:
        ValidationError: If status is None or not exactly SNAPSHOT or RELEASE.
    """
    ReleaseStatus.parse(status)


@dataclass(frozen=True, slots=True, eq=False)
class ApplicationId:
    """Immutable, validated application identity.

    Fields are stored verbatim and validated at construction in the order
    account, app, version, status. The first violation raises.

    Attributes:
        account: Tenant/organization identifier (case-insensitive identity).
        app: Application name within the account (case-insensitive identity).
        version: ``major.minor.revision`` string (exact identity).
        status: ``SNAPSHOT`` or ``RELEASE`` (exact identity).

    Raises:
        ValidationError: If any field is invalid.
    """

    account: str
    app: str
    version: str
    status: str

    validate_tenant = staticmethod(validate_tenant)
    validate_app = staticmethod(validate_app)
    validate_version = staticmethod(validate_version)
    validate_status = staticmethod(validate_status)

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def default(cls) -> ApplicationId:
        """Return the default identity used by deserialization frameworks.

        The defaults are valid by construction, so validation is skipped.
        """
        instance = object.__new__(cls)
        object.__setattr__(instance, "account", DEFAULT_TENANT)
        object.__setattr__(instance, "app", DEFAULT_APP)
        object.__setattr__(instance, "version", DEFAULT_VERSION)
        object.__setattr__(instance, "status", ReleaseStatus.SNAPSHOT.value)
        return instance

    def validate(self) -> None:
        """Run every field check in order, raising on the first failure."""
        validate_tenant(self.account)
        validate_app(self.app)
        validate_version(self.version)
        validate_status(self.status)

    def cache_key(self, suffix: str = "") -> str:
        """Build the lowercase ``account/app/version/suffix`` lookup key.

        Args:
            suffix: Optional trailing component, typically an n-cube name.

        Returns:
            Canonical key, identical for all equal identifiers.
        """
        return f"{self.account}/{self.app}/{self.version}/{suffix}".lower()

    def is_snapshot(self) -> bool:
        return self.status == ReleaseStatus.SNAPSHOT.value

    def is_release(self) -> bool:
        return self.status == ReleaseStatus.RELEASE.value

    def create_new_snapshot_id(self, version: str) -> ApplicationId:
        """Derive a SNAPSHOT identifier for a new version of this application.

        A new version always starts life as a snapshot, whatever the status
        of this identifier.

        Args:
            version: The new ``major.minor.revision`` version.

        Returns:
            A new, validated ApplicationId. This instance is unchanged.

        Raises:
            ValidationError: If version is malformed.
        """
        new_id = ApplicationId(self.account, self.app, version, ReleaseStatus.SNAPSHOT.value)
        logger.debug("Derived snapshot id %s from %s", new_id, self)
        return new_id

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, ApplicationId):
            return NotImplemented
        return (
            self.account.lower() == other.account.lower()
            and self.app.lower() == other.app.lower()
            and self.status == other.status
            and self.version == other.version
        )

    def __hash__(self) -> int:
        return hash((self.account.lower(), self.app.lower(), self.version, str(self.status)))

    def __str__(self) -> str:
        """Return the cache key with an empty suffix."""
        return self.cache_key()
