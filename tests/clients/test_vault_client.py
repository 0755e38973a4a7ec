"""Tests for VaultClient - fail-fast configuration and secret lookup."""

from unittest.mock import MagicMock, patch

import pytest
from hvac.exceptions import InvalidPath

import clients.vault_client as vault_module
from clients.vault_client import VaultClient, VaultError


@pytest.fixture
def vault_env(monkeypatch):
    monkeypatch.setenv("VAULT_ADDR", "https://vault.example.com")
    monkeypatch.setenv("VAULT_ROLE_ID", "role")
    monkeypatch.setenv("VAULT_SECRET_ID", "secret")
    monkeypatch.delenv("VAULT_NAMESPACE", raising=False)


@pytest.fixture
def mock_hvac(vault_env):
    with patch("clients.vault_client.hvac.Client") as client_cls:
        hvac_client = MagicMock()
        hvac_client.auth.approle.login.return_value = {"auth": {"client_token": "tok"}}
        hvac_client.is_authenticated.return_value = True
        client_cls.return_value = hvac_client
        yield hvac_client


@pytest.fixture(autouse=True)
def reset_cache():
    vault_module._vault_client_instance = None
    vault_module._secret_cache.clear()
    yield
    vault_module._vault_client_instance = None
    vault_module._secret_cache.clear()


class TestVaultClientInit:

    def test_missing_vault_addr_raises(self, monkeypatch):
        monkeypatch.delenv("VAULT_ADDR", raising=False)
        with pytest.raises(ValueError, match="VAULT_ADDR"):
            VaultClient()

    def test_missing_approle_credentials_raises(self, monkeypatch):
        monkeypatch.setenv("VAULT_ADDR", "https://vault.example.com")
        monkeypatch.delenv("VAULT_ROLE_ID", raising=False)
        monkeypatch.delenv("VAULT_SECRET_ID", raising=False)
        with pytest.raises(ValueError, match="VAULT_ROLE_ID"):
            VaultClient()

    def test_approle_token_applied(self, mock_hvac):
        client = VaultClient()
        assert client.client.token == "tok"

    def test_unauthenticated_raises(self, mock_hvac):
        mock_hvac.is_authenticated.return_value = False
        with pytest.raises(VaultError, match="authentication"):
            VaultClient()


class TestGetSecret:

    def test_path_scoped_to_dashboard(self, mock_hvac):
        mock_hvac.secrets.kv.v2.read_secret_version.return_value = {"data": {"data": {"url": "postgres://x"}}}

        assert VaultClient().get_secret("database", "url") == "postgres://x"
        mock_hvac.secrets.kv.v2.read_secret_version.assert_called_once_with(
            path="dashboard/database", raise_on_deleted_version=True
        )

    def test_missing_path_raises(self, mock_hvac):
        mock_hvac.secrets.kv.v2.read_secret_version.side_effect = InvalidPath()
        with pytest.raises(VaultError, match="not found"):
            VaultClient().get_secret("nonexistent", "url")

    def test_missing_field_raises_keyerror(self, mock_hvac):
        mock_hvac.secrets.kv.v2.read_secret_version.return_value = {"data": {"data": {"url": "x"}}}
        with pytest.raises(KeyError, match="not found"):
            VaultClient().get_secret("database", "password")


class TestConvenienceFunctions:

    def test_secrets_cached_per_process(self, mock_hvac):
        mock_hvac.secrets.kv.v2.read_secret_version.return_value = {"data": {"data": {"url": "redis://v"}}}

        assert vault_module.get_valkey_url() == "redis://v"
        assert vault_module.get_valkey_url() == "redis://v"
        assert mock_hvac.secrets.kv.v2.read_secret_version.call_count == 1

    def test_auth_gateway_config_fields(self, mock_hvac):
        mock_hvac.secrets.kv.v2.read_secret_version.return_value = {"data": {"data": {
            "gateway_url": "https://auth.example.com/signin",
            "api_key": "k",
            "hmac_secret": "s",
        }}}

        assert vault_module.get_auth_gateway_config() == {
            "gateway_url": "https://auth.example.com/signin",
            "api_key": "k",
            "hmac_secret": "s",
        }
