"""Permission catalog for the brokerage dashboard.

Permissions follow the `resource:action` convention. The catalog is closed:
role configs may only reference members of `Permission`.
"""

from __future__ import annotations

import enum


class Permission(enum.StrEnum):
    """Every capability the dashboard can gate."""

    # Projects
    PROJECT_CREATE = "project:create"
    PROJECT_READ = "project:read"
    PROJECT_UPDATE = "project:update"
    PROJECT_DELETE = "project:delete"

    # Apartments
    APARTMENT_CREATE = "apartment:create"
    APARTMENT_READ = "apartment:read"
    APARTMENT_UPDATE = "apartment:update"
    APARTMENT_DELETE = "apartment:delete"

    # Customers
    CUSTOMER_CREATE = "customer:create"
    CUSTOMER_READ = "customer:read"
    CUSTOMER_READ_PHONE = "customer:read_phone"
    CUSTOMER_UPDATE = "customer:update"
    CUSTOMER_DELETE = "customer:delete"

    # Deals
    DEAL_CREATE = "deal:create"
    DEAL_READ = "deal:read"
    DEAL_UPDATE = "deal:update"
    DEAL_DELETE = "deal:delete"
    DEAL_COMPLETE = "deal:complete"  # mark a deal as completed

    # Deal payments
    DEAL_PAYMENT_CREATE = "deal_payment:create"
    DEAL_PAYMENT_READ = "deal_payment:read"
    DEAL_PAYMENT_UPDATE = "deal_payment:update"
    DEAL_PAYMENT_DELETE = "deal_payment:delete"

    # Blog
    BLOG_CREATE = "blog:create"
    BLOG_READ = "blog:read"
    BLOG_UPDATE = "blog:update"
    BLOG_DELETE = "blog:delete"

    DASHBOARD_READ = "dashboard:read"

    PAYROLL_READ = "payroll:read"
    PAYROLL_MANAGE = "payroll:manage"

    BONUS_READ = "bonus:read"
    BONUS_MANAGE = "bonus:manage"

    # System
    USER_MANAGE = "user:manage"
    TEAM_MANAGE = "team:manage"
    SYSTEM_CONFIG = "system:config"


# ── All known permissions ────────────────────────────────────

ALL_PERMISSIONS: list[Permission] = sorted(Permission)

_KNOWN_VALUES: frozenset[str] = frozenset(p.value for p in Permission)


def permission_resource(permission: str) -> str:
    """Return the resource half of a `resource:action` token."""
    return permission.partition(":")[0]


def permission_action(permission: str) -> str:
    """Return the action half of a `resource:action` token."""
    return permission.partition(":")[2]


def is_known_permission(value: object) -> bool:
    """True if *value* names a member of the catalog. Never raises."""
    return isinstance(value, str) and value in _KNOWN_VALUES


# ── Permission groups (for UI rendering) ─────────────────────


def _group_by_resource() -> dict[str, list[Permission]]:
    groups: dict[str, list[Permission]] = {}
    for permission in Permission:
        groups.setdefault(permission_resource(permission), []).append(permission)
    return groups


PERMISSION_GROUPS: dict[str, list[Permission]] = _group_by_resource()
