"""Print the HTTP request a Matrix endpoint would send, without sending it.

Usage:
    matrix-request ENDPOINT [--homeserver URL] [--json]
    matrix-request login --username USER --password PASS
    matrix-request register [--username USER --password PASS]
    matrix-request logout [--token TOKEN]
    matrix-request --help

Endpoints:
    versions     Supported Matrix specification versions
    discovery    Well-known client discovery document
    login        Login flows, or password login with --username/--password
    logout       Logout with --token (or access_token from config)
    register     Guest registration, or full registration with credentials
    rooms        Public room directory

Options:
    --homeserver URL   Homeserver base URL (default: from config)
    --config PATH      Config file (default: $MATRIX_CONFIG or ~/.config/matrix/config.json)
    --json             Output as JSON
    --help             Show this help

Examples:
    # Inspect a password login for matrix.org
    matrix-request login --homeserver https://matrix.org -u alice -p secret

    # Logout request for the token in the config file, as JSON
    matrix-request logout --json
"""

import json
import sys

from matrix_sdk import request
from matrix_sdk.config import load_config

ENDPOINTS = ["versions", "discovery", "login", "logout", "register", "rooms"]


def build_request(args, config: dict | None) -> request.Request:
    """Pick the builder for args.endpoint and call it."""
    base_url = args.homeserver or config["homeserver"]

    if args.endpoint == "versions":
        return request.spec_versions(base_url)
    if args.endpoint == "discovery":
        return request.server_discovery(base_url)
    if args.endpoint == "rooms":
        return request.room_discovery(base_url)
    if args.endpoint == "logout":
        return request.logout(base_url, args.token or config["access_token"])
    if args.endpoint == "login":
        if args.username is not None:
            return request.login_with_password(base_url, args.username, args.password)
        return request.login(base_url)
    if args.endpoint == "register":
        if args.username is not None:
            return request.register_user(base_url, args.username, args.password)
        return request.register_guest(base_url)
    raise ValueError(f"Unknown endpoint: {args.endpoint}")


def format_request(req: request.Request) -> str:
    """Render a descriptor as METHOD URL, header lines, then the JSON body."""
    lines = [f"{req.method.value} {req.url}"]
    for name, value in req.headers:
        lines.append(f"{name}: {value}")
    if req.body:
        lines.append("")
        lines.append(json.dumps(req.body, indent=2))
    return "\n".join(lines)


def main(argv: list[str] | None = None):
    import argparse

    parser = argparse.ArgumentParser(description="Print a Matrix API request without sending it")
    parser.add_argument("endpoint", choices=ENDPOINTS, help="Endpoint to build a request for")
    parser.add_argument("--homeserver", help="Homeserver base URL (default: from config)")
    parser.add_argument("--username", "-u", help="User name (login, register)")
    parser.add_argument("--password", "-p", help="Password (login, register)")
    parser.add_argument("--token", "-t", help="Access token (logout)")
    parser.add_argument("--config", metavar="PATH", help="Config file path")
    parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    if (args.username is None) != (args.password is None):
        parser.error("--username and --password must be given together")
    if args.username is not None and args.endpoint not in ("login", "register"):
        parser.error(f"--username/--password do not apply to {args.endpoint}")
    if args.token is not None and args.endpoint != "logout":
        parser.error("--token only applies to logout")

    # Only touch the config file when an argument is missing
    needs_token = args.endpoint == "logout" and not args.token
    config = None
    if not args.homeserver or needs_token:
        config = load_config(
            args.config,
            require_access_token=needs_token,
            require_homeserver=not args.homeserver,
        )

    req = build_request(args, config)

    if args.json:
        print(json.dumps(req.to_dict(), indent=2))
    else:
        print(format_request(req))


if __name__ == "__main__":
    main()
