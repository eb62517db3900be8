"""Entry point for the placeholder services that only announce themselves."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

SERVICES = ("admin", "audit", "billing", "gateway", "notification", "search", "user")


def banner(name: str) -> str:
    """Return the start-up line of the service called ``name``."""
    return f"{name.capitalize()} service running..."


def main(argv: Sequence[str] | None = None) -> int:
    """Print the start-up line of the chosen service."""
    parser = argparse.ArgumentParser(prog="service", description="Run a service")
    parser.add_argument("name", choices=SERVICES, help="service to run")
    args = parser.parse_args(argv)
    print(banner(args.name))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())