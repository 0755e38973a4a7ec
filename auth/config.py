"""Authentication configuration."""

from pydantic import BaseModel, Field


class AuthConfig(BaseModel):
    """
    Sign-in configuration.

    The failure marker is matched against the provider's error message; a
    match is a recognized bad-credentials outcome, anything else is fatal.
    """

    provider: str = Field(
        default="credentials",
        description="Provider identifier passed to the sign-in call",
        min_length=1,
    )
    failure_marker: str = Field(
        default="CredentialsSignin",
        description="Substring identifying rejected credentials in provider errors",
        min_length=1,
    )
    failure_sentinel: str = Field(
        default="CredentialSignin",
        description="Value returned to the login form when credentials are rejected",
    )
    gateway_timeout_seconds: int = Field(
        default=10,
        description="Timeout for the auth gateway request",
        ge=1,
        le=60,
    )
