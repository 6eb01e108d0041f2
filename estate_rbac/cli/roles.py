"""CLI commands for inspecting the role table.

Usage:
    estate-rbac roles list
    estate-rbac roles show <role>
    estate-rbac roles dump
"""

from __future__ import annotations

import json

import typer

from estate_rbac.rbac.permissions import PERMISSION_GROUPS
from estate_rbac.rbac.roles import get_all_role_configs, get_config, role_config_as_dict
from estate_rbac.rbac.session import parse_role

roles_app = typer.Typer(help="Role table inspection")


@roles_app.command("list")
def list_roles() -> None:
    """List roles with display names and permission counts."""
    configs = get_all_role_configs()

    typer.echo(f"{'Role':<14} {'Display name':<24} {'Permissions':>11}")
    typer.echo("-" * 51)
    for role, config in configs.items():
        typer.echo(f"{role:<14} {config.display_name:<24} {len(config.permission_set):>11}")


@roles_app.command("show")
def show_role(
    role: str = typer.Argument(..., help="Role name, case-insensitive"),
) -> None:
    """Show display metadata and permissions of a role, grouped by resource."""
    config = get_config(parse_role(role))
    if config is None:
        typer.echo(typer.style(f"Unknown role: {role}", fg=typer.colors.RED))
        raise typer.Exit(code=1)

    typer.echo(typer.style(f"{config.name}: {config.display_name}", bold=True))
    typer.echo(f"  {config.description}")
    typer.echo(f"  color: {config.color}")

    for resource, permissions in PERMISSION_GROUPS.items():
        granted = [p for p in permissions if p in config.permission_set]
        if granted:
            typer.echo(typer.style(f"\n[{resource}]", fg=typer.colors.CYAN))
            for permission in granted:
                typer.echo(f"  ✓ {permission}")


@roles_app.command("dump")
def dump_roles() -> None:
    """Dump the whole role table as JSON."""
    payload = {str(role): role_config_as_dict(config) for role, config in get_all_role_configs().items()}
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
