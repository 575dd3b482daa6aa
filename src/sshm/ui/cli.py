# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from dataclasses import replace
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from sshm.app import build_directory_service
from sshm.config import ConfigurationError, configure_logging, current_username
from sshm.domain.errors import DirectoryError, ErrorKind, NotFoundError
from sshm.domain.model import DEFAULT_SSH_PORT

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from sshm.domain.directory import DirectoryService
    from sshm.domain.model import HostProfile

log = logging.getLogger(__name__)

EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 2,
    ErrorKind.CONFLICT: 2,
    ErrorKind.NOT_FOUND: 3,
    ErrorKind.STORAGE: 4,
}


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sshm", description="Manage SSH host profiles")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List hosts, most recently used first")

    search = subparsers.add_parser("search", help="Search hosts by name, address, tags")
    search.add_argument("query", help="Case-insensitive text to look for")

    show = subparsers.add_parser("show", help="Show one host and its ssh command")
    show.add_argument("host", help="Host id or name")

    add = subparsers.add_parser("add", help="Add a host")
    add.add_argument("name", help="Unique profile name")
    add.add_argument("hostname", help="DNS name or IP address")
    add.add_argument("-u", "--user", default=None, help="Login name (defaults to $USER)")
    add.add_argument("-p", "--port", type=int, default=DEFAULT_SSH_PORT)
    add.add_argument("-i", "--key", dest="key_path", help="Private key file")
    add.add_argument("-d", "--description")
    add.add_argument("-t", "--tags", help="Comma separated tags")

    edit = subparsers.add_parser("edit", help="Change fields of a host")
    edit.add_argument("host", help="Host id or name")
    edit.add_argument("--name")
    edit.add_argument("--hostname")
    edit.add_argument("-u", "--user")
    edit.add_argument("-p", "--port", type=int)
    edit.add_argument("-i", "--key", dest="key_path")
    edit.add_argument("-d", "--description")
    edit.add_argument("-t", "--tags")

    remove = subparsers.add_parser("remove", help="Remove a host")
    remove.add_argument("host", help="Host id or name")
    remove.add_argument(
        "--purge-known-hosts",
        action="store_true",
        help="Also drop the host's entries from known_hosts",
    )

    subparsers.add_parser("discover", help="Import hosts from known_hosts and history")

    connect = subparsers.add_parser("connect", help="Record a use and run ssh")
    connect.add_argument("host", help="Host id or name")

    return parser.parse_args(list(argv))


def _format_row(host: HostProfile) -> str:
    target = host.connection_string
    if host.port != DEFAULT_SSH_PORT:
        target = f"{target}:{host.port}"
    last_used = host.last_used.strftime("%Y-%m-%d %H:%M") if host.last_used else "never"
    return f"{host.id:>3}  {host.name:<20} {target:<36} {last_used:<16} {host.tags or ''}"


def _format_details(host: HostProfile) -> str:
    lines = [
        f"id:          {host.id}",
        f"name:        {host.name}",
        f"hostname:    {host.hostname}",
        f"ip address:  {host.ip_address or '-'}",
        f"port:        {host.port}",
        f"user:        {host.username}",
        f"key:         {host.key_path or '-'}",
        f"description: {host.description or '-'}",
        f"tags:        {', '.join(host.tag_list) or '-'}",
        f"used:        {host.use_count} times",
        f"command:     {host.ssh_command()}",
    ]
    return "\n".join(lines)


def _print_hosts(hosts: list[HostProfile]) -> None:
    if not hosts:
        print("No hosts.")
        return
    for host in hosts:
        print(_format_row(host))


def _stored_id(host: HostProfile) -> int:
    if host.id is None:
        raise NotFoundError(name=host.name)
    return host.id


def _run_ssh(args: list[str]) -> int:
    return subprocess.run(["ssh", *args], check=False).returncode  # noqa: S603, S607


def _edited(host: HostProfile, args: argparse.Namespace) -> HostProfile:
    changes: dict[str, object] = {
        "name": args.name,
        "hostname": args.hostname,
        "username": args.user,
        "port": args.port,
        "key_path": args.key_path,
        "description": args.description,
        "tags": args.tags,
    }
    return replace(host, **{field: value for field, value in changes.items() if value is not None})


def _dispatch(service: DirectoryService, args: argparse.Namespace) -> int:
    command = args.command
    if command == "list":
        _print_hosts(service.list_hosts())
    elif command == "search":
        _print_hosts(service.search_hosts(args.query))
    elif command == "show":
        print(_format_details(service.get_host(args.host)))
    elif command == "add":
        host = service.add_host(
            args.name,
            args.hostname,
            args.user or current_username(),
            port=args.port,
            key_path=args.key_path,
            description=args.description,
            tags=args.tags,
        )
        print(f"Added {host.name} (id {host.id})")
    elif command == "edit":
        service.edit_host(_edited(service.get_host(args.host), args))
        print("Updated.")
    elif command == "remove":
        host = service.get_host(args.host)
        service.remove_host(_stored_id(host), purge_known_hosts=args.purge_known_hosts)
        print(f"Removed {host.name}")
    elif command == "discover":
        created = service.run_discovery()
        print(f"Discovered {created} new host(s)")
    elif command == "connect":
        host = service.get_host(args.host)
        service.record_connection_use(_stored_id(host))
        return _run_ssh(host.ssh_args())
    else:
        raise ValueError(f"Unsupported command: {command}")
    return 0


def main(argv: Sequence[str] | None = None, *, service: DirectoryService | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
        active_service = service or build_directory_service()
        exit_code = _dispatch(active_service, parsed_args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except DirectoryError as exc:
        log.debug("Command %s failed", parsed_args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_CODES[exc.kind])
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)
    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
