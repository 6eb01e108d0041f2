"""Permission and role predicates over the static role table.

All functions are pure and total: unknown roles, unknown permissions and
malformed input evaluate to "no access" instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable

from estate_rbac.rbac.roles import get_config


def has_permission(role: object, permission: object) -> bool:
    """Check whether *role* is granted *permission*."""
    if not role:
        return False

    config = get_config(role)
    if config is None:
        return False

    if not isinstance(permission, str):
        return False
    return permission in config.permission_set


def has_any_permission(role: object, permissions: Iterable[object]) -> bool:
    """OR over *permissions*. An empty list never grants access."""
    return any(has_permission(role, p) for p in permissions)


def has_all_permissions(role: object, permissions: Iterable[object]) -> bool:
    """AND over *permissions*. An empty list imposes no restriction."""
    return all(has_permission(role, p) for p in permissions)


def has_role(role: object, role_or_roles: object) -> bool:
    """Check *role* against a single role or a collection of roles.

    Roles outside the catalog match nothing, not even themselves.
    """
    if get_config(role) is None:
        return False

    if isinstance(role_or_roles, str):
        return role == role_or_roles

    if isinstance(role_or_roles, (list, tuple, set, frozenset)):
        return any(isinstance(r, str) and r == role for r in role_or_roles)

    return False
