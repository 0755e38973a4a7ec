"""
Credentials-provider client for signing users in via an HTTP auth gateway.

Uses HMAC-SHA256 signature for request authentication. Rejected credentials
surface as CredentialsSigninError whose message carries the
"CredentialsSignin" marker; every other failure is an AuthGatewayError.
"""

import hashlib
import hmac
import json
import logging

import requests

logger = logging.getLogger(__name__)

CREDENTIALS_SIGNIN = "CredentialsSignin"


class AuthGatewayError(Exception):
    """Raised when the auth gateway request fails."""


class CredentialsSigninError(AuthGatewayError):
    """The gateway rejected the submitted credentials."""

    def __init__(self, detail: str = "invalid credentials"):
        super().__init__(f"{CREDENTIALS_SIGNIN}: {detail}")


class AuthGatewayClient:
    """Sign in against the auth gateway with HMAC signature verification."""

    def __init__(self, gateway_url: str, api_key: str, hmac_secret: str, timeout: int = 10):
        """
        Initialize with gateway credentials.

        Args:
            gateway_url: Full URL to the sign-in endpoint
            api_key: API key for X-API-Key header
            hmac_secret: Secret for HMAC-SHA256 signature
            timeout: Request timeout in seconds

        Raises:
            ValueError: If any credential is empty
        """
        if not gateway_url:
            raise ValueError("gateway_url is required")
        if not api_key:
            raise ValueError("api_key is required")
        if not hmac_secret:
            raise ValueError("hmac_secret is required")

        self.gateway_url = gateway_url
        self.api_key = api_key
        self.hmac_secret = hmac_secret
        self.timeout = timeout

    def _sign_and_send(self, payload: dict) -> requests.Response:
        payload_json = json.dumps(payload, separators=(",", ":"))

        signature = hmac.new(
            self.hmac_secret.encode("utf-8"),
            payload_json.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

        headers = {
            "Content-Type": "application/json",
            "X-API-Key": self.api_key,
            "X-Signature": signature,
        }

        try:
            return requests.post(
                self.gateway_url,
                data=payload_json,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Auth gateway connection failed: {e}")
            raise AuthGatewayError(f"Connection failed: {e}")

    def sign_in(self, provider: str, credentials: dict, redirect: bool = False) -> str | None:
        """
        Authenticate credentials with the named provider.

        Args:
            provider: Provider identifier (e.g. "credentials")
            credentials: Submitted form fields, forwarded untouched
            redirect: Whether the gateway should redirect on its own

        Returns:
            Redirect target from the gateway, or None if it produced none.

        Raises:
            CredentialsSigninError: Gateway answered 401 (bad credentials)
            AuthGatewayError: On any other failure
        """
        payload = {
            "provider": provider,
            "credentials": credentials,
            "redirect": redirect,
        }
        response = self._sign_and_send(payload)

        try:
            response_data = response.json()
        except ValueError:
            logger.error(f"Auth gateway returned invalid JSON: {response.text}")
            raise AuthGatewayError("Invalid response from gateway")

        if response.status_code == 401:
            raise CredentialsSigninError(response_data.get("message", "invalid credentials"))

        if response.status_code != 200 or not response_data.get("success"):
            error_msg = response_data.get("message", "Unknown error")
            logger.error(f"Auth gateway error: {error_msg}")
            raise AuthGatewayError(f"Gateway error: {error_msg}")

        return response_data.get("url")
