"""Serializable representation of an ApplicationId.

Pydantic model used at serialization boundaries (JSON bodies, stored
documents). Missing fields fall back to the default identity, mirroring
``ApplicationId.default()``. Domain validation happens in ``to_domain()``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from ncube.foundation.domain.application_id import (
    DEFAULT_APP,
    DEFAULT_TENANT,
    DEFAULT_VERSION,
    ApplicationId,
)
from ncube.foundation.domain.release_status import ReleaseStatus


class ApplicationIdPayload(BaseModel):
    """Wire form of an ApplicationId.

    Example:
        >>> payload = ApplicationIdPayload.model_validate_json('{"account": "acme"}')
        >>> payload.app
        'DEFAULT_APP'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    account: str = DEFAULT_TENANT
    app: str = DEFAULT_APP
    version: str = DEFAULT_VERSION
    status: str = ReleaseStatus.SNAPSHOT.value

    @classmethod
    def from_domain(cls, app_id: ApplicationId) -> ApplicationIdPayload:
        return cls(
            account=app_id.account,
            app=app_id.app,
            version=app_id.version,
            status=str(app_id.status),
        )

    def to_domain(self) -> ApplicationId:
        """Build the validated domain identifier.

        Raises:
            ValidationError: If any field violates ApplicationId rules.
        """
        return ApplicationId(self.account, self.app, self.version, self.status)
