"""Boundary between the session/profile layer and the RBAC core.

The session supplies role names as untyped strings. They are parsed once
here into `Role` members; everything past this point works on the closed
enum. Users listing several roles are resolved by `MultiRolePolicy`.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from estate_rbac.rbac.evaluation import has_permission, has_role
from estate_rbac.rbac.guards import (
    PermissionSpec,
    RoleSpec,
    combine_guards,
    evaluate_permission_spec,
    normalize_role_spec,
)
from estate_rbac.rbac.permissions import Permission
from estate_rbac.rbac.roles import (
    DEFAULT_ROLE_COLOR,
    Role,
    get_role_color,
    get_role_description,
    get_role_display_name,
    get_role_permissions,
)

logger = logging.getLogger(__name__)

_PROFILE_ROLE_KEYS = ("roleNames", "role_names")


class MultiRolePolicy(enum.StrEnum):
    """How a profile carrying several roles is evaluated."""

    FIRST = "first"  # only the first listed role counts
    UNION = "union"  # permissions of every listed role combine


def parse_role(raw: object) -> Role | None:
    """Normalize a raw session value into a `Role`, or None if unrecognized."""
    if not isinstance(raw, str):
        return None

    value = raw.strip().upper()
    if not value:
        return None

    try:
        return Role(value)
    except ValueError:
        logger.warning("Unrecognized role %r, treating as no access", raw, extra={"role": raw})
        return None


def _raw_role_names(profile: object) -> Sequence[Any]:
    if profile is None:
        return []

    for key in _PROFILE_ROLE_KEYS:
        if isinstance(profile, Mapping):
            value = profile.get(key)
        else:
            value = getattr(profile, key, None)
        if isinstance(value, str):
            return [value]
        if isinstance(value, Sequence):
            return value
    return []


def roles_from_profile(profile: object) -> list[Role]:
    """Parse the profile's role names, dropping unknown ones, keeping order."""
    roles: list[Role] = []
    for raw in _raw_role_names(profile):
        role = parse_role(raw)
        if role is not None and role not in roles:
            roles.append(role)
    return roles


def _resolve_policy(policy: MultiRolePolicy | str | None) -> MultiRolePolicy:
    if policy is None:
        from estate_rbac.config import get_settings

        policy = get_settings().rbac.multi_role_policy
    try:
        return MultiRolePolicy(policy)
    except ValueError:
        logger.warning("Unknown multi-role policy %r, using 'first'", policy, extra={"policy": policy})
        return MultiRolePolicy.FIRST


@dataclass(frozen=True)
class AccessContext:
    """Authorization view of one session.

    Under the FIRST policy only `roles[0]` is consulted. Under UNION a
    permission is held if any role holds it and `is_role` matches any role.
    """

    roles: tuple[Role, ...] = ()
    policy: MultiRolePolicy = MultiRolePolicy.FIRST

    @classmethod
    def from_profile(
        cls, profile: object, policy: MultiRolePolicy | str | None = None
    ) -> AccessContext:
        resolved = _resolve_policy(policy)
        if resolved is MultiRolePolicy.UNION:
            return cls(roles=tuple(roles_from_profile(profile)), policy=resolved)

        # An unrecognized first role means no access, not a fall-through
        raw = _raw_role_names(profile)
        role = parse_role(raw[0]) if raw else None
        return cls(roles=(role,) if role else (), policy=resolved)

    @classmethod
    def for_role(cls, raw_role: object) -> AccessContext:
        role = parse_role(raw_role)
        return cls(roles=(role,) if role else ())

    @property
    def role(self) -> Role | None:
        return self.roles[0] if self.roles else None

    @property
    def effective_roles(self) -> tuple[Role, ...]:
        if self.policy is MultiRolePolicy.UNION:
            return self.roles
        return self.roles[:1]

    # ── Queries ──────────────────────────────────────────────

    def can(self, permission: str) -> bool:
        return any(has_permission(r, permission) for r in self.effective_roles)

    def can_any(self, permissions: Sequence[str]) -> bool:
        return any(self.can(p) for p in permissions)

    def can_all(self, permissions: Sequence[str]) -> bool:
        return all(self.can(p) for p in permissions)

    def is_role(self, roles: RoleSpec) -> bool:
        spec = normalize_role_spec(roles)
        return any(has_role(r, spec) for r in self.effective_roles)

    # ── Guards ───────────────────────────────────────────────

    def permission_guard(self, permission: PermissionSpec, *, require_all: bool = False) -> bool:
        return evaluate_permission_spec(
            permission,
            require_all=require_all,
            one=self.can,
            any_of=self.can_any,
            all_of=self.can_all,
        )

    def role_guard(self, roles: RoleSpec) -> bool:
        return self.is_role(roles)

    def can_access(
        self,
        *,
        permission: PermissionSpec | None = None,
        roles: RoleSpec | None = None,
        require_all: bool = False,
    ) -> bool:
        return combine_guards(
            permission=permission,
            roles=roles,
            require_all=require_all,
            permission_check=self.permission_guard,
            role_check=self.role_guard,
        )

    # ── Display ──────────────────────────────────────────────

    def get_permissions(self) -> list[Permission]:
        granted: list[Permission] = []
        for role in self.effective_roles:
            for permission in get_role_permissions(role):
                if permission not in granted:
                    granted.append(permission)
        return granted

    def get_role_name(self) -> str:
        return get_role_display_name(self.role) if self.role else "Unknown"

    def get_role_description(self) -> str:
        return get_role_description(self.role) if self.role else ""

    def get_role_color(self) -> str:
        return get_role_color(self.role) if self.role else DEFAULT_ROLE_COLOR
