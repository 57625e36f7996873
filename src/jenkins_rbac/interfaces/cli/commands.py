"""Command line interface: apply, destroy and import jenkins_role resources."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx

from jenkins_rbac import __version__
from jenkins_rbac.config import Settings, get_settings
from jenkins_rbac.domain.exceptions import JenkinsRbacError, RoleApplyError, ValidationError
from jenkins_rbac.infrastructure.jenkins.role_strategy_client import RoleStrategyClient
from jenkins_rbac.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jenkins-rbac",
        description="Reconcile Jenkins role-strategy roles for a user",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--jenkins-url", help="Jenkins base URL (JENKINS_URL)")
    parser.add_argument("--username", help="Jenkins user (JENKINS_USERNAME)")
    parser.add_argument("--api-token", help="Jenkins API token (JENKINS_API_TOKEN)")
    parser.add_argument(
        "--endpoint-variant",
        choices=["user", "sid"],
        help="assignUserRole/user or legacy assignRole/sid endpoints",
    )
    parser.add_argument("--fail-fast", action="store_true", default=None, help="Stop at the first failed call")
    parser.add_argument("--log-level", help="Logging level (LOG_LEVEL)")

    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("apply", "Assign roles to a user"),
        ("destroy", "Unassign roles from a user"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("user_id", help="Jenkins user id")
        cmd.add_argument("--global", dest="global_roles", action="append", default=[], metavar="ROLE")
        cmd.add_argument("--item", dest="item_roles", action="append", default=[], metavar="ROLE")
        cmd.add_argument("--node", dest="node_roles", action="append", default=[], metavar="ROLE")
        cmd.add_argument(
            "--roles-file",
            type=Path,
            help="JSON file with {\"role\": [{\"global\": [...], ...}]} (e.g. saved state)",
        )

    cmd = sub.add_parser("import", help="Print the roles a user holds on Jenkins")
    cmd.add_argument("user_id", help="Jenkins user id")

    cmd = sub.add_parser("serve", help="Run the HTTP API")
    cmd.add_argument("--host", help="Bind host (API_HOST)")
    cmd.add_argument("--port", type=int, help="Bind port (API_PORT)")

    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        "jenkins_url": args.jenkins_url,
        "jenkins_username": args.username,
        "jenkins_api_token": args.api_token,
        "endpoint_variant": args.endpoint_variant,
        "fail_fast": args.fail_fast,
        "log_level": args.log_level,
        "api_host": getattr(args, "host", None),
        "api_port": getattr(args, "port", None),
    }
    return get_settings().model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )


def _role_blocks(args: argparse.Namespace) -> list[dict[str, Any]]:
    blocks: list[dict[str, Any]] = []
    if args.roles_file:
        try:
            data = json.loads(args.roles_file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ValidationError(f"Cannot read roles file {args.roles_file}: {e}") from e
        role = data.get("role", []) if isinstance(data, dict) else None
        if not isinstance(role, list):
            raise ValidationError("Roles file must hold an object with a 'role' list")
        blocks.extend(role)
    blocks.append(
        {"global": args.global_roles, "item": args.item_roles, "node": args.node_roles}
    )
    return blocks


async def _run(
    args: argparse.Namespace,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any] | None:
    from jenkins_rbac.application.dto.resource_state import RoleResourceState
    from jenkins_rbac.main import build_role_resource

    async with RoleStrategyClient.from_settings(settings, transport=transport) as client:
        resource = build_role_resource(client, fail_fast=settings.fail_fast)
        if args.command == "apply":
            state = await resource.create(args.user_id, _role_blocks(args))
            return state.to_dict()
        if args.command == "destroy":
            state = RoleResourceState(
                id=args.user_id, user_id=args.user_id, role=_role_blocks(args)
            )
            await resource.delete(state)
            return None
        state = await resource.import_state(args.user_id)
        return state.to_dict()


def main(
    argv: list[str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Run the CLI; returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = _settings_from_args(args)
    configure_logging(settings.log_level, settings.debug)

    if args.command == "serve":
        from jenkins_rbac.main import run_server

        try:
            run_server(settings)
        except JenkinsRbacError as e:
            print(f"error ({e.kind}): {e}", file=sys.stderr)
            return 1
        return 0

    try:
        output = asyncio.run(_run(args, settings, transport))
    except RoleApplyError as e:
        print(f"error ({e.kind}): {e}", file=sys.stderr)
        for failure in e.result.failures:
            print(json.dumps(failure.to_dict()), file=sys.stderr)
        return 1
    except JenkinsRbacError as e:
        print(f"error ({e.kind}): {e}", file=sys.stderr)
        return 1

    if output is not None:
        print(json.dumps(output, indent=2))
    return 0
