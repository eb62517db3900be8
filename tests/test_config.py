import pytest

from super_services.config import Config, ConfigError
from super_services.vault import VaultClient, VaultError


class FakeVault:
    def __init__(self, secrets=None, error=None):
        self.secrets = secrets or {}
        self.error = error
        self.paths = []

    def read_secret(self, path):
        self.paths.append(path)
        if self.error is not None:
            raise self.error
        return self.secrets


def test_value_from_vault_uses_lowercase_key_and_service_path():
    vault = FakeVault({"jwt_secret": "secret"})
    config = Config("auth", vault, {"JWT_SECRET": "placeholder"})
    assert config.get("JWT_SECRET") == "secret"
    assert vault.paths == ["auth/config"]


def test_non_string_vault_value_is_formatted():
    config = Config("auth", FakeVault({"retries": 42, "debug": True}), {})
    assert config.get("RETRIES") == "42"
    assert config.get("DEBUG") == "true"


def test_falls_back_to_environment_when_key_missing_in_vault():
    config = Config("auth", FakeVault({}), {"OAUTH_CLIENT_ID": "client"})
    assert config.get("OAUTH_CLIENT_ID") == "client"


def test_falls_back_to_environment_when_vault_fails():
    vault = FakeVault(error=VaultError("no data found at path: auth/config"))
    config = Config("auth", vault, {"PORT": "9000"})
    assert config.get("PORT") == "9000"


def test_missing_key_raises():
    config = Config("auth", None, {})
    with pytest.raises(ConfigError, match="config key not found: JWT_SECRET"):
        config.get("JWT_SECRET")


def test_empty_environment_value_counts_as_missing():
    config = Config("auth", None, {"JWT_SECRET": ""})
    with pytest.raises(ConfigError, match="config key not found"):
        config.get("JWT_SECRET")


def test_from_env_without_vault():
    config = Config.from_env("auth", {"VAULT_ENABLED": "false", "A": "b"})
    assert config.vault_enabled is False
    assert config.get("A") == "b"


def test_from_env_with_vault_but_no_address():
    with pytest.raises(ConfigError, match="vault client error: VAULT_ADDR not set"):
        Config.from_env("auth", {"VAULT_ENABLED": "true", "VAULT_TOKEN": "token"})


def test_from_env_with_vault_builds_client():
    env = {
        "VAULT_ENABLED": "true",
        "VAULT_ADDR": "http://127.0.0.1:8200",
        "VAULT_TOKEN": "token",
    }
    config = Config.from_env("billing", env)
    assert config.vault_enabled is True
    assert isinstance(config.vault_client, VaultClient)
    assert config.vault_client.address == "http://127.0.0.1:8200"
    assert config.service_name == "billing"