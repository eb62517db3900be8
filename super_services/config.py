"""Service configuration looked up in Vault first, then in the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from super_services.vault import VaultClient, VaultError


class ConfigError(Exception):
    """Raised when configuration cannot be set up or a key is missing."""


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Config:
    """Configuration for one named service."""

    def __init__(
        self,
        service_name: str,
        vault_client: VaultClient | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.service_name = service_name
        self.vault_client = vault_client
        self.environ = os.environ if environ is None else environ

    @classmethod
    def from_env(
        cls, service_name: str, environ: Mapping[str, str] | None = None
    ) -> "Config":
        """Build a configuration, connecting to Vault when VAULT_ENABLED is "true"."""
        env = os.environ if environ is None else environ
        vault_client = None
        if env.get("VAULT_ENABLED") == "true":
            try:
                vault_client = VaultClient.from_env(env)
            except VaultError as exc:
                raise ConfigError(f"vault client error: {exc}") from exc
        return cls(service_name, vault_client, env)

    @property
    def vault_enabled(self) -> bool:
        """Whether values are looked up in Vault."""
        return self.vault_client is not None

    def get(self, key: str) -> str:
        """Return the value for ``key`` from Vault, falling back to the environment."""
        if self.vault_client is not None:
            try:
                secrets = self.vault_client.read_secret(f"{self.service_name}/config")
            except VaultError:
                secrets = {}
            normalized = key.lower()
            if normalized in secrets:
                return _format_value(secrets[normalized])

        value = self.environ.get(key.upper(), "")
        if not value:
            raise ConfigError(f"config key not found: {key}")
        return value