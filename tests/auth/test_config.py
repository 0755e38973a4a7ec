"""Tests for auth/config.py - sign-in configuration with validation."""

import pytest
from pydantic import ValidationError

from auth.config import AuthConfig


class TestAuthConfigDefaults:

    def test_provider_default(self):
        assert AuthConfig().provider == "credentials"

    def test_marker_and_sentinel_defaults(self):
        config = AuthConfig()
        assert config.failure_marker == "CredentialsSignin"
        assert config.failure_sentinel == "CredentialSignin"

    def test_gateway_timeout_default(self):
        assert AuthConfig().gateway_timeout_seconds == 10


class TestAuthConfigValidation:

    def test_timeout_min_bound(self):
        with pytest.raises(ValidationError):
            AuthConfig(gateway_timeout_seconds=0)

    def test_timeout_max_bound(self):
        with pytest.raises(ValidationError):
            AuthConfig(gateway_timeout_seconds=61)

    def test_empty_marker_rejected(self):
        with pytest.raises(ValidationError):
            AuthConfig(failure_marker="")
