"""HTTP services with a health check, Vault-backed configuration and a docker compose helper."""

__version__ = "0.1.0"