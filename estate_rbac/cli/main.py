"""Brokerage RBAC admin CLI — main entry point.

Usage:
    estate-rbac version
    estate-rbac config check
    estate-rbac config show
    estate-rbac roles list
    estate-rbac check SALE deal:read
    estate-rbac lint
"""

from __future__ import annotations

import typer

from estate_rbac import __version__
from estate_rbac.cli.roles import roles_app
from estate_rbac.config import Settings, get_settings
from estate_rbac.logging.structured_logger import setup_logging
from estate_rbac.rbac.guards import permission_guard
from estate_rbac.rbac.lint import lint_role_configs
from estate_rbac.rbac.session import parse_role

app = typer.Typer(
    name="estate-rbac",
    help="Brokerage dashboard access control CLI",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")
app.add_typer(roles_app, name="roles")


def _collect_config_display(settings: Settings) -> list[tuple[str, str, str]]:
    """Collect (section, key, display_value) tuples from settings."""
    rows: list[tuple[str, str, str]] = []

    for section, sub_settings in settings:
        for sub_name, sub_value in sub_settings:
            rows.append((section, sub_name, str(sub_value)))

    return rows


@app.callback()
def main() -> None:
    settings = get_settings()
    setup_logging(settings.logging.level, settings.logging.format)


@app.command()
def version() -> None:
    """Show application version."""
    typer.echo(f"Estate RBAC v{__version__}")


@app.command()
def check(
    role: str = typer.Argument(..., help="Role name as stored in the session"),
    permissions: list[str] = typer.Argument(..., help="Permissions to test"),
    require_all: bool = typer.Option(False, "--all", help="Require every permission"),
) -> None:
    """Evaluate a permission guard for a role; exit code 1 when denied."""
    parsed = parse_role(role)
    spec: str | list[str] = permissions[0] if len(permissions) == 1 else permissions
    allowed = permission_guard(parsed, spec, require_all=require_all)

    if allowed:
        typer.echo(typer.style("allowed", fg=typer.colors.GREEN))
        return

    typer.echo(typer.style("denied", fg=typer.colors.RED))
    raise typer.Exit(code=1)


@app.command()
def lint(
    strict: bool | None = typer.Option(None, "--strict/--no-strict", help="Treat warnings as errors"),
) -> None:
    """Check the role table for drift, duplicates and unknown permissions."""
    if strict is None:
        strict = get_settings().rbac.strict_lint

    result = lint_role_configs()

    for issue in result.issues:
        color = typer.colors.RED if issue.severity == "error" else typer.colors.YELLOW
        typer.echo(typer.style(f"[{issue.severity}] {issue.role}: {issue.message}", fg=color))

    if not result.passes(strict=strict):
        typer.echo(f"\n{len(result.errors)} error(s), {len(result.warnings)} warning(s).")
        raise typer.Exit(code=1)

    typer.echo(typer.style("✅ Role configuration is consistent", fg=typer.colors.GREEN))


@config_app.command("check")
def config_check() -> None:
    """Validate configuration and show status of each parameter."""
    settings = get_settings()
    result = settings.validate_required()

    if result.ok:
        typer.echo(typer.style("✅ All configuration checks passed", fg=typer.colors.GREEN))
    else:
        for err in result.errors:
            hint = f"  Hint: {err.hint}" if err.hint else ""
            typer.echo(
                typer.style(f"❌ {err.field}: {err.message}.{hint}", fg=typer.colors.RED)
            )
        typer.echo(f"\n{len(result.errors)} error(s) found.")
        raise typer.Exit(code=1)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    settings = get_settings()
    rows = _collect_config_display(settings)

    current_section = ""
    for section, key, value in rows:
        if section != current_section:
            if current_section:
                typer.echo("")
            typer.echo(typer.style(f"[{section}]", fg=typer.colors.CYAN, bold=True))
            current_section = section
        typer.echo(f"  {key} = {value}")


if __name__ == "__main__":
    app()
