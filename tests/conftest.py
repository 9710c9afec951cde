"""
Pytest configuration and fixtures for queryorder tests.
"""

from __future__ import annotations

import pytest

from queryorder.config.settings import Settings
from queryorder.order import ASC, Field, FieldSet, OrderBy


@pytest.fixture
def mock_settings():
    """Settings for testing."""
    return Settings(
        app_name="queryorder-test",
        debug=False,
        log_level="DEBUG",
    )


@pytest.fixture
def user_fields() -> FieldSet:
    """Whitelist for a user listing, with public and storage names differing."""
    return FieldSet(
        Field("userId", "user_id"),
        Field("name", "user_name"),
        Field("email", "users.email"),
        Field("created", "date_created"),
    )


@pytest.fixture
def default_order(user_fields: FieldSet) -> OrderBy:
    """Default ordering for the user listing."""
    return OrderBy(user_fields.lookup("userId"), ASC)
