"""Guard combinators used by UI conditionals.

Each guard returns a single "show primary content" flag. Callers pick the
branch with `choose`; guards never build or render content themselves.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from functools import partial
from typing import TypeVar

from estate_rbac.rbac.evaluation import (
    has_all_permissions,
    has_any_permission,
    has_permission,
    has_role,
)

T = TypeVar("T")
F = TypeVar("F")

PermissionSpec = str | Sequence[str]
RoleSpec = str | Sequence[str]


def normalize_role_spec(roles: object) -> str | list[str] | None:
    """A single role stays as is, a collection becomes a list, anything else None."""
    if isinstance(roles, str):
        return roles
    if isinstance(roles, Iterable):
        return list(roles)
    return None


def evaluate_permission_spec(
    permission: object,
    *,
    require_all: bool,
    one: Callable[[str], bool],
    any_of: Callable[[list[str]], bool],
    all_of: Callable[[list[str]], bool],
) -> bool:
    """Single permission bypasses *require_all*; a list uses OR or AND.

    Anything that is neither a string nor a collection denies access.
    """
    if isinstance(permission, str):
        return one(permission)
    if not isinstance(permission, Iterable):
        return False
    permissions = list(permission)
    return all_of(permissions) if require_all else any_of(permissions)


def combine_guards(
    *,
    permission: object,
    roles: object,
    require_all: bool,
    permission_check: Callable[..., bool],
    role_check: Callable[[object], bool],
) -> bool:
    """Permission step first, then the role step ANDed in.

    A failed permission step short-circuits; *role_check* is not called.
    With neither spec supplied the result is True. `None` means "not
    supplied", an empty list is a real constraint.
    """
    if permission is not None and not permission_check(permission, require_all=require_all):
        return False

    if roles is not None:
        return role_check(roles)

    return True


def permission_guard(role: object, permission: PermissionSpec, *, require_all: bool = False) -> bool:
    """Single permission, or a list with OR (default) / AND semantics."""
    return evaluate_permission_spec(
        permission,
        require_all=require_all,
        one=lambda p: has_permission(role, p),
        any_of=lambda ps: has_any_permission(role, ps),
        all_of=lambda ps: has_all_permissions(role, ps),
    )


def role_guard(role: object, roles: RoleSpec) -> bool:
    return has_role(role, normalize_role_spec(roles))


def can_access(
    role: object,
    *,
    permission: PermissionSpec | None = None,
    roles: RoleSpec | None = None,
    require_all: bool = False,
) -> bool:
    """Combined guard for a single role."""
    return combine_guards(
        permission=permission,
        roles=roles,
        require_all=require_all,
        permission_check=partial(permission_guard, role),
        role_check=partial(role_guard, role),
    )


def choose(allowed: bool, primary: T, fallback: F | None = None) -> T | F | None:
    """Return *primary* when access is allowed, otherwise *fallback*."""
    return primary if allowed else fallback
