"""Role-based access control: catalogs, role table, predicates and guards."""

from __future__ import annotations

from estate_rbac.rbac.evaluation import (
    has_all_permissions,
    has_any_permission,
    has_permission,
    has_role,
)
from estate_rbac.rbac.guards import can_access, choose, permission_guard, role_guard
from estate_rbac.rbac.permissions import ALL_PERMISSIONS, PERMISSION_GROUPS, Permission
from estate_rbac.rbac.roles import (
    EQUIVALENT_ROLES,
    ROLE_CONFIGS,
    Role,
    RoleConfig,
    get_all_role_configs,
    get_all_roles,
    get_config,
    get_role_color,
    get_role_description,
    get_role_display_name,
    get_role_permissions,
)
from estate_rbac.rbac.session import AccessContext, MultiRolePolicy, parse_role, roles_from_profile

__all__ = [
    "ALL_PERMISSIONS",
    "EQUIVALENT_ROLES",
    "PERMISSION_GROUPS",
    "ROLE_CONFIGS",
    "AccessContext",
    "MultiRolePolicy",
    "Permission",
    "Role",
    "RoleConfig",
    "can_access",
    "choose",
    "get_all_role_configs",
    "get_all_roles",
    "get_config",
    "get_role_color",
    "get_role_description",
    "get_role_display_name",
    "get_role_permissions",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
    "has_role",
    "parse_role",
    "permission_guard",
    "role_guard",
    "roles_from_profile",
]
