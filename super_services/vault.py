"""Client for the key/value (version 2) secrets engine of a Vault server."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import requests

DEFAULT_MOUNT = "secret"
DEFAULT_TIMEOUT = 10.0


class VaultError(Exception):
    """Raised when a Vault operation fails."""


class VaultClient:
    """Reads, writes, deletes and lists secrets in a KV v2 mount."""

    def __init__(
        self,
        address: str,
        token: str,
        mount: str = DEFAULT_MOUNT,
        session: requests.Session | None = None,
    ) -> None:
        self.address = address.rstrip("/")
        self.token = token
        self.mount = mount.strip("/")
        self.session = session if session is not None else requests.Session()
        self.session.headers["X-Vault-Token"] = token

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "VaultClient":
        """Build a client from VAULT_ADDR and VAULT_TOKEN."""
        env = os.environ if environ is None else environ
        address = env.get("VAULT_ADDR", "")
        if not address:
            raise VaultError("VAULT_ADDR not set")
        token = env.get("VAULT_TOKEN", "")
        if not token:
            raise VaultError("VAULT_TOKEN not set")
        return cls(address, token)

    def _url(self, kind: str, path: str) -> str:
        return f"{self.address}/v1/{self.mount}/{kind}/{path.strip('/')}"

    def _request(self, action: str, method: str, url: str, **kwargs: Any) -> requests.Response:
        try:
            return self.session.request(method, url, timeout=DEFAULT_TIMEOUT, **kwargs)
        except requests.RequestException as exc:
            raise VaultError(f"failed to {action}: {exc}") from exc

    @staticmethod
    def _check(action: str, response: requests.Response) -> None:
        if response.status_code >= 400:
            raise VaultError(f"failed to {action}: HTTP {response.status_code}")

    @staticmethod
    def _json(action: str, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise VaultError(f"failed to {action}: invalid response body") from exc

    def read_secret(self, path: str) -> dict[str, Any]:
        """Return the key/value data stored at ``path``."""
        action = "read secret"
        response = self._request(action, "GET", self._url("data", path))
        if response.status_code == 404:
            raise VaultError(f"no data found at path: {path}")
        self._check(action, response)
        body = self._json(action, response)
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise VaultError(f"no data found at path: {path}")
        inner = data.get("data")
        if not isinstance(inner, dict):
            raise VaultError(f"unexpected data format at path: {path}")
        return inner

    def write_secret(self, path: str, data: Mapping[str, Any]) -> None:
        """Store ``data`` as a new version of the secret at ``path``."""
        action = "write secret"
        response = self._request(
            action, "POST", self._url("data", path), json={"data": dict(data)}
        )
        self._check(action, response)

    def delete_secret(self, path: str) -> None:
        """Delete the latest version of the secret at ``path``."""
        action = "delete secret"
        response = self._request(action, "DELETE", self._url("data", path))
        self._check(action, response)

    def list_secrets(self, path: str) -> list[str]:
        """Return the names of the secrets stored under ``path``."""
        action = "list secrets"
        response = self._request(
            action, "GET", self._url("metadata", path), params={"list": "true"}
        )
        if response.status_code == 404:
            raise VaultError(f"no secrets found at path {path}")
        self._check(action, response)
        body = self._json(action, response)
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise VaultError(f"no secrets found at path {path}")
        if "keys" not in data:
            raise VaultError("no keys found in secret data")
        keys = data["keys"]
        if not isinstance(keys, list):
            raise VaultError("unexpected data format for keys")
        return [key for key in keys if isinstance(key, str)]