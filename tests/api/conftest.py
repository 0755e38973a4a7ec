"""API test fixtures - TestClient around mocked services."""

from unittest.mock import Mock

import pytest
from starlette.testclient import TestClient

from api.app import create_app
from auth.service import AuthService
from core.services.invoice_service import InvoiceService


@pytest.fixture
def mock_invoice_service():
    return Mock(spec=InvoiceService)


@pytest.fixture
def mock_auth_service():
    return Mock(spec=AuthService)


@pytest.fixture
def app(mock_invoice_service, mock_auth_service):
    return create_app(mock_invoice_service, mock_auth_service)


@pytest.fixture
def client(app):
    """Test client that does not follow redirects."""
    return TestClient(app, raise_server_exceptions=False, follow_redirects=False)


@pytest.fixture
def wired_client(invoice_service, auth_service):
    """Test client around real services with mocked store, cache and gateway."""
    app = create_app(invoice_service, auth_service)
    return TestClient(app, raise_server_exceptions=False, follow_redirects=False)
