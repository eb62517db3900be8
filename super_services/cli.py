"""Command-line tool for managing the service containers."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Sequence

VAULT_COMPOSE_FILES = (
    "-f",
    "./deployments/vault/docker-compose.yml",
    "-f",
    "./deployments/vault/docker-compose.dev.yml",
)


def compose_args(action: str, vault: bool = False) -> list[str]:
    """Return the ``docker`` arguments that bring the stack up or down."""
    args = ["compose"]
    if vault:
        args.extend(VAULT_COMPOSE_FILES)
    args.append(action)
    if action == "up":
        args.append("-d")
    return args


def run(name: str, *args: str) -> bool:
    """Run a program attached to this terminal; report failures on stderr."""
    try:
        completed = subprocess.run([name, *args])
    except OSError as exc:
        print("Error:", exc, file=sys.stderr)
        return False
    if completed.returncode != 0:
        print("Error:", f"exit status {completed.returncode}", file=sys.stderr)
        return False
    return True


def _container(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if args.up and args.down:
        print("Error: --up and --down cannot be used together", file=sys.stderr)
        return 1
    if args.up:
        print("Running container up...")
        run("docker-compose", "up", "-d")
    elif args.down:
        print("Running container down...")
        run("docker-compose", "down")
    else:
        print("Please use --up or --down", file=sys.stderr)
        parser.print_help()
    return 0


def _container_up(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    print("Starting containers...")
    run("docker", *compose_args("up", args.vault))
    return 0


def _container_down(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    print("Stopping containers...")
    run("docker", *compose_args("down", args.vault))
    return 0


def _vault(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    # The read/write switches belong to the container command, so they are
    # only present here when set on the namespace by a caller.
    read = getattr(args, "read", False)
    write = getattr(args, "write", False)
    if read and write:
        print("Error: --up and --down cannot be used together", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all commands."""
    parser = argparse.ArgumentParser(prog="cli", description="super services cli")
    commands = parser.add_subparsers(dest="command")

    container = commands.add_parser("container", help="Manage containers")
    container.add_argument("--up", action="store_true", help="Start the container")
    container.add_argument("--down", action="store_true", help="Stop the container")
    container.add_argument("--read", action="store_true", help="read secret key")
    container.add_argument("--write", action="store_true", help="write secret key")
    container.set_defaults(handler=_container, command_parser=container)

    actions = container.add_subparsers(dest="action")
    up = actions.add_parser("up", help="Start containers")
    up.add_argument("--vault", action="store_true", help="Start only containers of vault")
    up.set_defaults(handler=_container_up, command_parser=up)

    down = actions.add_parser("down", help="Stop containers")
    down.add_argument("--vault", action="store_true", help="Stop only containers of vault")
    down.set_defaults(handler=_container_down, command_parser=down)

    vault = commands.add_parser("vault", help="Manage Vault")
    vault.set_defaults(handler=_vault, command_parser=vault)

    parser.set_defaults(handler=None, command_parser=parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the chosen command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.handler is None:
        parser.print_help()
        return 0
    return args.handler(args, args.command_parser)


if __name__ == "__main__":
    raise SystemExit(main())