"""Application entry point and composition root."""

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence

from falcon.asgi import App

from mdbiam import __version__
from mdbiam.application.dto import AuthOptions
from mdbiam.config import Settings, get_settings
from mdbiam.domain.exceptions import IamUtilError
from mdbiam.domain.value_objects import AuthType
from mdbiam.infrastructure.auth.registry import supported_auth_types
from mdbiam.infrastructure.logging import setup_logging
from mdbiam.interfaces.api.app import create_app
from mdbiam.role_manager import MongoRoleManager


def build_options(settings: Settings, args: argparse.Namespace | None = None) -> AuthOptions:
    """AuthOptions from settings, overridden by command line flags."""
    options = AuthOptions.from_settings(settings)
    if args is None:
        return options
    if args.uri:
        options.uri = args.uri
    if args.auth_type:
        options.auth_type = AuthType.parse(args.auth_type)
    if args.tls_cert_key_file:
        options.tls_certificate_key_file = args.tls_cert_key_file
    if args.tls_ca_file:
        options.tls_ca_file = args.tls_ca_file
    return options


def create_mdbiam_app(role_manager: MongoRoleManager | None = None) -> App:
    """Composition root - build Falcon app around one role manager."""
    if role_manager is None:
        role_manager = MongoRoleManager(AuthOptions.from_settings(get_settings()))
    return create_app(role_manager)


def run_server(role_manager: MongoRoleManager, host: str, port: int) -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_mdbiam_app(role_manager), host=host, port=port)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbiam",
        description="Audit roles and permissions of a MongoDB user",
    )
    parser.add_argument("--version", action="version", version=f"mdbiam {__version__}")
    parser.add_argument("--uri", help="Connection string (default: MONGODB_URI)")
    parser.add_argument(
        "--auth-type",
        help=f"Authentication type: {', '.join(supported_auth_types())} (default: AUTH_TYPE)",
    )
    parser.add_argument("--tls-cert-key-file", help="Client certificate + key PEM for X.509")
    parser.add_argument("--tls-ca-file", help="CA bundle PEM")

    sub = parser.add_subparsers(dest="command", required=True)

    p_username = sub.add_parser("username", help="Print the audited username")
    p_username.add_argument("--username", help="Explicit username")

    p_roles = sub.add_parser("roles", help="List roles granted on the admin database")
    p_roles.add_argument("--username", help="Explicit username")

    p_privileges = sub.add_parser("privileges", help="List actions granted by a role")
    p_privileges.add_argument("role", help="Role name")

    p_verify = sub.add_parser("verify", help="Diff required actions against effective actions")
    p_verify.add_argument("required", nargs="*", help="Required action names")
    p_verify.add_argument(
        "--role",
        action="append",
        dest="roles",
        help="Role to verify instead of the user's roles (repeatable)",
    )

    p_serve = sub.add_parser("serve", help="Run the audit HTTP API")
    p_serve.add_argument("--host", help="Bind host (default: API_HOST)")
    p_serve.add_argument("--port", type=int, help="Bind port (default: API_PORT)")
    return parser


async def _run_command(manager: MongoRoleManager, args: argparse.Namespace) -> dict:
    if args.command == "username":
        return {"username": await manager.get_username(args.username)}
    if args.command == "roles":
        username = await manager.get_username(args.username)
        roles = await manager.get_user_roles(username)
        return {"username": username, "roles": sorted(roles)}
    if args.command == "privileges":
        privileges = await manager.get_privileges_of_role(args.role)
        return {"role": args.role, "privileges": sorted(privileges)}
    diff = await manager.verify_permissions(args.required, args.roles)
    return diff.to_dict()


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings)

    try:
        options = build_options(settings, args)
    except IamUtilError as e:
        parser.error(str(e))
    manager = MongoRoleManager(options)

    if args.command == "serve":
        run_server(manager, args.host or settings.api_host, args.port or settings.api_port)
        return 0

    try:
        result = asyncio.run(_run_command(manager, args))
    except IamUtilError as e:
        print(json.dumps({"error": str(e)}), file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
