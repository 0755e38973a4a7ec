"""Shared test fixtures for the dashboard test suite."""

from pathlib import Path
from unittest.mock import Mock

import pytest
from dotenv import load_dotenv

# Load .env file BEFORE any other imports that might use env vars
load_dotenv(Path(__file__).parent.parent / ".env", override=True)

from auth.config import AuthConfig
from auth.service import AuthService
from clients.auth_gateway_client import AuthGatewayClient
from core.config import DashboardConfig
from core.invoice_store import InvoiceStore
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService


# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture
def dashboard_config() -> DashboardConfig:
    return DashboardConfig()


@pytest.fixture
def auth_config() -> AuthConfig:
    return AuthConfig()


# =============================================================================
# COLLABORATOR FIXTURES
# =============================================================================


@pytest.fixture
def mock_store():
    """Mock invoice store - no database writes in tests."""
    return Mock(spec=InvoiceStore)


@pytest.fixture
def mock_page_cache():
    """Mock page cache - records revalidated paths."""
    return Mock(spec=PageCache)


@pytest.fixture
def mock_gateway():
    """Mock auth gateway - no HTTP sign-in calls."""
    mock = Mock(spec=AuthGatewayClient)
    mock.sign_in.return_value = "/dashboard"
    return mock


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def invoice_service(mock_store, mock_page_cache, dashboard_config):
    return InvoiceService(mock_store, mock_page_cache, dashboard_config)


@pytest.fixture
def auth_service(auth_config, mock_gateway):
    return AuthService(auth_config, mock_gateway)
