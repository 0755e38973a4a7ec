"""Application factory."""

import logging

from fastapi import FastAPI

from api.actions import create_actions_router
from api.errors import register_error_handlers
from auth.config import AuthConfig
from auth.service import AuthService
from clients.auth_gateway_client import AuthGatewayClient
from clients.postgres_client import PostgresClient
from clients.valkey_client import ValkeyClient
from clients.vault_client import get_auth_gateway_config, get_database_url, get_valkey_url
from core.config import DashboardConfig
from core.invoice_store import InvoiceStore
from core.page_cache import PageCache
from core.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)


def create_app(invoice_service: InvoiceService, auth_service: AuthService) -> FastAPI:
    """Build the FastAPI app around already-constructed services."""
    app = FastAPI(title="Invoice Dashboard")
    register_error_handlers(app)
    app.include_router(create_actions_router(invoice_service, auth_service))

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def build_app(
    dashboard_config: DashboardConfig | None = None,
    auth_config: AuthConfig | None = None,
) -> FastAPI:
    """Wire real clients from Vault secrets and build the app."""
    dashboard_config = dashboard_config or DashboardConfig()
    auth_config = auth_config or AuthConfig()

    postgres = PostgresClient(get_database_url())
    valkey = ValkeyClient(get_valkey_url())
    gateway = AuthGatewayClient(
        **get_auth_gateway_config(),
        timeout=auth_config.gateway_timeout_seconds,
    )

    invoice_service = InvoiceService(
        InvoiceStore(postgres),
        PageCache(valkey, dashboard_config),
        dashboard_config,
    )
    auth_service = AuthService(auth_config, gateway)

    logger.info("Dashboard app wired")
    return create_app(invoice_service, auth_service)
