#!/usr/bin/env python3
"""Smoke test against a live Jenkins: assign, read back, unassign.

Usage:
  export JENKINS_URL=https://jenkins.example.com JENKINS_USERNAME=admin JENKINS_API_TOKEN=...
  uv run python scripts/smoke_role_strategy.py --user smoke-user --global-role reader [--rounds 10]

The roles must already exist on the server. Latencies are per role-strategy call.
"""
from __future__ import annotations

import argparse
import asyncio
import statistics
import sys
import time

from jenkins_rbac.application.use_cases.roles.apply_roles import ApplyRolesUseCase
from jenkins_rbac.application.use_cases.roles.fetch_user_roles import FetchUserRolesUseCase
from jenkins_rbac.config import get_settings
from jenkins_rbac.domain.entities import UserRoles
from jenkins_rbac.domain.exceptions import JenkinsRbacError
from jenkins_rbac.domain.value_objects import ApplyMode
from jenkins_rbac.infrastructure.jenkins.role_strategy_client import RoleStrategyClient


async def run(args: argparse.Namespace) -> int:
    desired = UserRoles(
        user_id=args.user,
        global_roles=args.global_role,
        item_roles=args.item_role,
        node_roles=args.node_role,
    )
    if desired.is_empty:
        print("Nothing to do: pass at least one --global-role/--item-role/--node-role")
        return 1

    latencies: list[float] = []
    async with RoleStrategyClient.from_settings(get_settings()) as client:
        apply_roles = ApplyRolesUseCase(client, fail_fast=True)
        fetch = FetchUserRolesUseCase(client)
        for i in range(args.rounds):
            t0 = time.perf_counter()
            await apply_roles.execute(args.user, desired, ApplyMode.ASSIGN)
            held = await fetch.execute(args.user)
            await apply_roles.execute(args.user, desired, ApplyMode.UNASSIGN)
            latencies.append(time.perf_counter() - t0)

            missing = [
                a for a in desired.assignments() if a.role_name not in held.roles_for(a.category)
            ]
            if missing:
                print(f"Round {i + 1}: assigned roles not listed: {missing}")
                return 1

    calls = 2 * len(list(desired.assignments())) + 3
    p50 = statistics.median(latencies) * 1000
    print(
        f"Role-strategy smoke test (user={args.user}, rounds={args.rounds})\n"
        f"  Round trip: p50={p50:.1f} ms, max={max(latencies) * 1000:.1f} ms\n"
        f"  Per call: ~{p50 / calls:.1f} ms over {calls} calls"
    )
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Role-strategy smoke test")
    parser.add_argument("--user", required=True, help="User id to assign roles to")
    parser.add_argument("--global-role", action="append", default=[], help="Global role name")
    parser.add_argument("--item-role", action="append", default=[], help="Item role name")
    parser.add_argument("--node-role", action="append", default=[], help="Node role name")
    parser.add_argument("--rounds", type=int, default=1, help="Assign/read/unassign rounds")
    args = parser.parse_args()

    try:
        return asyncio.run(run(args))
    except JenkinsRbacError as e:
        print(f"error ({e.kind}): {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
