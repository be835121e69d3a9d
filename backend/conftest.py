# conftest.py
"""
Shared fixtures: provider identities and API clients carrying their tokens.
"""

import pytest
from rest_framework.test import APIClient

from finance.mixins.owner_context import OwnerContext
from users.tests.factories import provider_token

OWNER_ID = "8d2b6a52-3c1e-4f0a-9b7d-5e4c3a2b1f00"
OTHER_OWNER_ID = "f1e2d3c4-b5a6-4978-8a6b-5c4d3e2f1a00"

# =============================================================================
# IDENTITY FIXTURES
# =============================================================================


@pytest.fixture
def owner_id():
    return OWNER_ID


@pytest.fixture
def other_owner_id():
    return OTHER_OWNER_ID


@pytest.fixture
def owner_context(owner_id):
    """Request context of the main test identity"""
    return OwnerContext(owner_id=owner_id, email="ana@example.com", name="Ana Souza")


@pytest.fixture
def other_owner_context(other_owner_id):
    return OwnerContext(owner_id=other_owner_id, email="bruno@example.com")


# =============================================================================
# API CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def api_client():
    """Client without credentials"""
    return APIClient()


@pytest.fixture
def auth_client(owner_id):
    """Client authenticated as the main test identity"""
    client = APIClient()
    token = provider_token(owner_id, email="ana@example.com", name="Ana Souza")
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


@pytest.fixture
def other_client(other_owner_id):
    """Client authenticated as a second, unrelated identity"""
    client = APIClient()
    token = provider_token(other_owner_id, email="bruno@example.com")
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client
