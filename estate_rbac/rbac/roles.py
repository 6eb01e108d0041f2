"""Role catalog and the static role configuration table.

The table is a flat enumeration: every role lists its full permission set,
even where it overlaps another role. ADMIN and MANAGER are currently
identical; `EQUIVALENT_ROLES` records that so lint and tests catch drift.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType
from typing import Any

from estate_rbac.rbac.permissions import Permission as P

DEFAULT_ROLE_COLOR = "bg-gray-100 text-gray-800"


class Role(enum.StrEnum):
    """Job functions known to the dashboard."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    LEADER = "LEADER"
    SUPERMARKET = "SUPERMARKET"
    MARKET = "MARKET"
    SALE = "SALE"


@dataclass(frozen=True)
class RoleConfig:
    """Display metadata and granted permissions for one role."""

    name: Role
    display_name: str
    description: str
    color: str  # badge CSS classes, cosmetic only
    permissions: tuple[P, ...]

    @cached_property
    def permission_set(self) -> frozenset[P]:
        return frozenset(self.permissions)


# ── Role → configuration ─────────────────────────────────────

_ROLE_CONFIGS: dict[Role, RoleConfig] = {
    Role.ADMIN: RoleConfig(
        name=Role.ADMIN,
        display_name="Admin",
        description="Quản lý hệ thống (Dev Team)",
        color="bg-red-100 text-red-800",
        permissions=(
            P.PROJECT_CREATE, P.PROJECT_READ, P.PROJECT_UPDATE, P.PROJECT_DELETE,
            P.APARTMENT_CREATE, P.APARTMENT_READ, P.APARTMENT_UPDATE, P.APARTMENT_DELETE,
            P.CUSTOMER_CREATE, P.CUSTOMER_READ, P.CUSTOMER_READ_PHONE,
            P.CUSTOMER_UPDATE, P.CUSTOMER_DELETE,
            P.DEAL_CREATE, P.DEAL_READ, P.DEAL_UPDATE, P.DEAL_DELETE, P.DEAL_COMPLETE,
            P.DEAL_PAYMENT_CREATE, P.DEAL_PAYMENT_READ,
            P.DEAL_PAYMENT_UPDATE, P.DEAL_PAYMENT_DELETE,
            P.BLOG_CREATE, P.BLOG_READ, P.BLOG_UPDATE, P.BLOG_DELETE,
            P.USER_MANAGE, P.TEAM_MANAGE,
            P.PAYROLL_READ, P.PAYROLL_MANAGE,
            P.BONUS_READ, P.BONUS_MANAGE,
            P.SYSTEM_CONFIG,
        ),
    ),
    # Same as ADMIN for business logic
    Role.MANAGER: RoleConfig(
        name=Role.MANAGER,
        display_name="Sếp",
        description="Quản lý toàn bộ hệ thống",
        color="bg-blue-100 text-blue-800",
        permissions=(
            P.PROJECT_CREATE, P.PROJECT_READ, P.PROJECT_UPDATE, P.PROJECT_DELETE,
            P.APARTMENT_CREATE, P.APARTMENT_READ, P.APARTMENT_UPDATE, P.APARTMENT_DELETE,
            P.CUSTOMER_CREATE, P.CUSTOMER_READ, P.CUSTOMER_READ_PHONE,
            P.CUSTOMER_UPDATE, P.CUSTOMER_DELETE,
            P.DEAL_CREATE, P.DEAL_READ, P.DEAL_UPDATE, P.DEAL_DELETE, P.DEAL_COMPLETE,
            P.DEAL_PAYMENT_CREATE, P.DEAL_PAYMENT_READ,
            P.DEAL_PAYMENT_UPDATE, P.DEAL_PAYMENT_DELETE,
            P.BLOG_CREATE, P.BLOG_READ, P.BLOG_UPDATE, P.BLOG_DELETE,
            P.USER_MANAGE, P.TEAM_MANAGE,
            P.PAYROLL_READ, P.PAYROLL_MANAGE,
            P.BONUS_READ, P.BONUS_MANAGE,
            P.SYSTEM_CONFIG,
        ),
    ),
    # Team leads create and edit deals but cannot complete them
    Role.LEADER: RoleConfig(
        name=Role.LEADER,
        display_name="Đội trưởng",
        description="Quản lý nhóm của mình",
        color="bg-green-100 text-green-800",
        permissions=(
            P.CUSTOMER_CREATE, P.CUSTOMER_READ,
            P.DEAL_CREATE, P.DEAL_READ, P.DEAL_UPDATE,
            P.DEAL_PAYMENT_READ,
            P.TEAM_MANAGE,
            P.PAYROLL_READ,
        ),
    ),
    Role.SUPERMARKET: RoleConfig(
        name=Role.SUPERMARKET,
        display_name="Vợ Manager",
        description="Quản lý deal và nội dung",
        color="bg-purple-100 text-purple-800",
        permissions=(
            P.PROJECT_CREATE, P.PROJECT_READ, P.PROJECT_UPDATE, P.PROJECT_DELETE,
            P.APARTMENT_CREATE, P.APARTMENT_READ, P.APARTMENT_UPDATE, P.APARTMENT_DELETE,
            P.DEAL_READ, P.DEAL_UPDATE, P.DEAL_DELETE, P.DEAL_COMPLETE,
            P.DEAL_PAYMENT_CREATE, P.DEAL_PAYMENT_READ,
            P.DEAL_PAYMENT_UPDATE, P.DEAL_PAYMENT_DELETE,
            P.BLOG_CREATE, P.BLOG_READ, P.BLOG_UPDATE, P.BLOG_DELETE,
        ),
    ),
    Role.MARKET: RoleConfig(
        name=Role.MARKET,
        display_name="Market",
        description="Quản lý deal payment của dự án",
        color="bg-yellow-100 text-yellow-800",
        permissions=(
            P.DEAL_PAYMENT_READ, P.DEAL_PAYMENT_UPDATE,
        ),
    ),
    Role.SALE: RoleConfig(
        name=Role.SALE,
        display_name="Nhân viên kinh doanh",
        description="Tạo khách hàng và deal",
        color="bg-indigo-100 text-indigo-800",
        permissions=(
            P.DASHBOARD_READ,
            P.APARTMENT_READ,
            P.PROJECT_READ,
            P.CUSTOMER_CREATE, P.CUSTOMER_READ, P.CUSTOMER_READ_PHONE,
            P.DEAL_CREATE, P.DEAL_READ,
            P.DEAL_PAYMENT_READ,
            P.PAYROLL_READ,
            P.BONUS_READ,
        ),
    ),
}

ROLE_CONFIGS: Mapping[Role, RoleConfig] = MappingProxyType(_ROLE_CONFIGS)

# Pairs whose permission sets must stay identical
EQUIVALENT_ROLES: tuple[tuple[Role, Role], ...] = ((Role.ADMIN, Role.MANAGER),)


def get_config(role: object) -> RoleConfig | None:
    """Look up the config for *role*. Unknown or malformed roles give None."""
    if not isinstance(role, str) or not role:
        return None
    return ROLE_CONFIGS.get(role)  # type: ignore[call-overload]


# ── Introspection ────────────────────────────────────────────


def get_role_permissions(role: object) -> list[P]:
    config = get_config(role)
    return list(config.permissions) if config else []


def get_role_display_name(role: object) -> str:
    """Human-readable role name, or the raw role string when unknown."""
    config = get_config(role)
    if config:
        return config.display_name
    return role if isinstance(role, str) else ""


def get_role_description(role: object) -> str:
    config = get_config(role)
    return config.description if config else ""


def get_role_color(role: object) -> str:
    config = get_config(role)
    return config.color if config else DEFAULT_ROLE_COLOR


def get_all_roles() -> list[Role]:
    return list(ROLE_CONFIGS)


def get_all_role_configs() -> Mapping[Role, RoleConfig]:
    return ROLE_CONFIGS


def role_config_as_dict(config: RoleConfig) -> dict[str, Any]:
    """Plain JSON-ready view of a config for debug tooling."""
    return {
        "name": str(config.name),
        "display_name": config.display_name,
        "description": config.description,
        "color": config.color,
        "permissions": [str(p) for p in config.permissions],
    }
