"""Authentication service - credentials sign-in for the login form."""

import logging
from typing import Any, Mapping

from auth.config import AuthConfig
from auth.types import AuthenticateResult
from clients.auth_gateway_client import AuthGatewayClient

logger = logging.getLogger(__name__)


class AuthService:
    """Forwards login form submissions to the credentials provider."""

    def __init__(self, config: AuthConfig, gateway: AuthGatewayClient):
        self._config = config
        self._gateway = gateway

    def authenticate(self, prev_state: str | None, form: Mapping[str, Any]) -> AuthenticateResult:
        """Sign in with the submitted form fields.

        The provider's own redirect is suppressed; navigation is returned
        instead and only once the provider call has returned a target.

        Returns:
            AuthenticateResult with error=<sentinel> for rejected credentials,
            or redirect_to=<target> on success (None if no target).

        Raises:
            Exception: Any provider failure that is not a credentials rejection.
        """
        credentials = {key: form[key] for key in form.keys()}

        try:
            redirect_to = self._gateway.sign_in(
                self._config.provider,
                credentials,
                redirect=False,
            )
        except Exception as e:
            logger.info(f"Sign-in failed: {e}")
            if self._config.failure_marker in str(e):
                return AuthenticateResult(error=self._config.failure_sentinel)
            raise

        return AuthenticateResult(redirect_to=redirect_to or None)
