"""Release lifecycle status for versioned application artifacts."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from ncube.foundation.domain.exceptions import ValidationError


class ReleaseStatus(StrEnum):
    """Lifecycle stage of an application version.

    States:
        SNAPSHOT: Version is still in development and may change.
        RELEASE: Version is published and immutable.

    Uses StrEnum so members compare equal to their literal names.
    """

    SNAPSHOT = "SNAPSHOT"
    RELEASE = "RELEASE"

    @classmethod
    def parse(cls, value: Any) -> ReleaseStatus:
        """Resolve a status literal to its member.

        Matching is exact and case-sensitive: ``"Snapshot"`` is rejected.

        Args:
            value: Candidate status literal.

        Returns:
            The matching ReleaseStatus member.

        Raises:
            ValidationError: If value is None, not a string, or not a known literal.
        """
        if value is None:
            raise ValidationError("status", "Status name cannot be null")
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        allowed = ", ".join(member.value for member in cls)
        raise ValidationError(
            "status",
            f"Invalid status: {value!r}. Status must be one of: {allowed}",
            value=value,
        )
