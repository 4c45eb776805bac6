"""Shared fixtures for foundation-domain tests."""

from __future__ import annotations

import pytest

from ncube.foundation.domain.application_id import ApplicationId


@pytest.fixture()
def release_id() -> ApplicationId:
    """Create a mixed-case RELEASE identifier."""
    return ApplicationId("Acme", "Pricing", "1.0.0", "RELEASE")
