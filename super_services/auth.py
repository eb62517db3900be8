"""Authentication service: configuration and entry point."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from super_services.config import Config, ConfigError
from super_services.logger import new_logger
from super_services.server import create_app

SERVICE_NAME = "auth"
DEFAULT_PORT = "8080"


@dataclass(frozen=True)
class AuthConfig:
    """Secrets the authentication service needs at start-up."""

    jwt_secret: str
    oauth_client_id: str
    oauth_client_secret: str

    @classmethod
    def load(cls, config: Config) -> "AuthConfig":
        """Read every setting from ``config``; a missing one raises ConfigError."""
        return cls(
            jwt_secret=config.get("JWT_SECRET"),
            oauth_client_id=config.get("OAUTH_CLIENT_ID"),
            oauth_client_secret=config.get("OAUTH_CLIENT_SECRET"),
        )


def get_port(environ: Mapping[str, str] | None = None) -> str:
    """Return the port from PORT, or the default when it is unset or empty."""
    env = os.environ if environ is None else environ
    return env.get("PORT", "") or DEFAULT_PORT


def main(argv: Sequence[str] | None = None) -> int:
    """Load configuration and serve the authentication service."""
    parser = argparse.ArgumentParser(prog="auth", description="Authentication service")
    parser.parse_args(argv)
    log = new_logger(SERVICE_NAME)

    try:
        config = Config.from_env(SERVICE_NAME)
    except ConfigError as exc:
        log.error("failed to init config: %s", exc)
        return 1

    try:
        auth_config = AuthConfig.load(config)
    except ConfigError as exc:
        log.error("failed to load service config: %s", exc)
        return 1

    log.info("Auth service started with client_id: %s", auth_config.oauth_client_id)

    port = get_port()
    app = create_app(SERVICE_NAME)
    log.info("Starting auth service on port %s...", port)
    try:
        app.run(host="0.0.0.0", port=int(port))
    except (ValueError, OSError) as exc:
        log.error("server failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())