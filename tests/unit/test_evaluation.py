"""Unit tests for the permission/role predicates."""

from __future__ import annotations

import itertools

import pytest

from estate_rbac.rbac.evaluation import (
    has_all_permissions,
    has_any_permission,
    has_permission,
    has_role,
)
from estate_rbac.rbac.permissions import Permission
from estate_rbac.rbac.roles import Role

UNKNOWN_ROLES: list[object] = [None, "", "GUEST", "admin", " SALE", 0, ["ADMIN"]]
ALL_ROLE_INPUTS: list[object] = [*Role, *UNKNOWN_ROLES]
SAMPLE_LISTS: list[list[Permission]] = [
    [],
    [Permission.DEAL_READ],
    [Permission.DEAL_PAYMENT_CREATE, Permission.DEAL_PAYMENT_UPDATE],
    [Permission.PROJECT_CREATE, Permission.PROJECT_UPDATE, Permission.SYSTEM_CONFIG],
    [Permission.DASHBOARD_READ, Permission.BONUS_READ],
]


class TestScenarios:
    """Business rules the dashboard relies on."""

    def test_sale_reads_deals(self) -> None:
        assert has_permission("SALE", "deal:read") is True

    def test_sale_cannot_delete_deals(self) -> None:
        assert has_permission("SALE", "deal:delete") is False

    def test_leader_cannot_complete_deal(self) -> None:
        assert has_permission("LEADER", "deal:complete") is False
        assert has_permission("LEADER", "deal:create") is True
        assert has_permission("LEADER", "deal:read") is True
        assert has_permission("LEADER", "deal:update") is True

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.MANAGER, Role.SUPERMARKET])
    def test_deal_complete_holders(self, role: Role) -> None:
        assert has_permission(role, Permission.DEAL_COMPLETE) is True

    def test_market_deal_payments(self) -> None:
        perms = ["deal_payment:create", "deal_payment:update"]
        assert has_any_permission("MARKET", perms) is True
        assert has_all_permissions("MARKET", perms) is False

    def test_unknown_role(self) -> None:
        assert has_permission("GUEST", "project:read") is False
        assert has_role("GUEST", "ADMIN") is False

    def test_role_lookup_is_case_sensitive(self) -> None:
        # Case folding happens at the session boundary, not here
        assert has_permission("sale", "deal:read") is False


class TestTotality:
    """Every predicate returns a bool for any input."""

    @pytest.mark.parametrize("role", ALL_ROLE_INPUTS)
    def test_has_permission_total(self, role: object) -> None:
        for p in [*Permission, "deal:archive", "", None, 7]:
            assert isinstance(has_permission(role, p), bool)

    @pytest.mark.parametrize("role", UNKNOWN_ROLES)
    def test_unknown_roles_have_nothing(self, role: object) -> None:
        assert not any(has_permission(role, p) for p in Permission)
        assert has_any_permission(role, list(Permission)) is False

    @pytest.mark.parametrize("role", ALL_ROLE_INPUTS)
    def test_has_role_total(self, role: object) -> None:
        for spec in [Role.ADMIN, [Role.SALE, Role.MARKET], [], "", None, 3, {"x": 1}]:
            assert isinstance(has_role(role, spec), bool)

    def test_unknown_permission_denied(self) -> None:
        assert has_permission(Role.ADMIN, "deal:archive") is False


class TestCombinationLaws:
    """OR/AND agree with per-permission checks."""

    @pytest.mark.parametrize(("role", "perms"), list(itertools.product(ALL_ROLE_INPUTS, SAMPLE_LISTS)))
    def test_any_is_exists(self, role: object, perms: list[Permission]) -> None:
        expected = False
        for p in perms:
            if has_permission(role, p):
                expected = True
        assert has_any_permission(role, perms) is expected

    @pytest.mark.parametrize(("role", "perms"), list(itertools.product(ALL_ROLE_INPUTS, SAMPLE_LISTS)))
    def test_all_is_forall(self, role: object, perms: list[Permission]) -> None:
        expected = True
        for p in perms:
            if not has_permission(role, p):
                expected = False
        assert has_all_permissions(role, perms) is expected

    @pytest.mark.parametrize("role", ALL_ROLE_INPUTS)
    def test_vacuous_cases(self, role: object) -> None:
        assert has_any_permission(role, []) is False
        assert has_all_permissions(role, []) is True

    def test_accepts_tuples_and_generators(self) -> None:
        assert has_all_permissions(Role.SALE, (Permission.DEAL_READ, Permission.BONUS_READ)) is True
        assert has_any_permission(Role.SALE, (p for p in [Permission.SYSTEM_CONFIG])) is False


class TestHasRole:
    """Exact and membership role checks."""

    @pytest.mark.parametrize("role", list(Role))
    def test_role_matches_itself(self, role: Role) -> None:
        assert has_role(role, role) is True
        assert has_role(str(role), role) is True

    @pytest.mark.parametrize(("role", "other"), [(a, b) for a in Role for b in Role if a != b])
    def test_role_differs(self, role: Role, other: Role) -> None:
        assert has_role(role, other) is False

    @pytest.mark.parametrize("role", list(Role))
    def test_membership(self, role: Role) -> None:
        pair = [Role.MANAGER, Role.ADMIN]
        assert has_role(role, pair) is (role in pair)

    def test_membership_accepts_tuple_and_set(self) -> None:
        assert has_role(Role.SALE, (Role.SALE,)) is True
        assert has_role(Role.SALE, {Role.LEADER, Role.SALE}) is True

    def test_empty_list_matches_nothing(self) -> None:
        assert has_role(Role.ADMIN, []) is False

    @pytest.mark.parametrize("role", [None, ""])
    def test_missing_role(self, role: object) -> None:
        assert has_role(role, Role.ADMIN) is False
        assert has_role(role, list(Role)) is False

    @pytest.mark.parametrize(
        ("role", "spec"),
        [("GUEST", "GUEST"), ("GUEST", ["GUEST", "ADMIN"]), ("sale", ["sale"]), ("sale", "sale")],
    )
    def test_unknown_role_never_matches(self, role: str, spec: object) -> None:
        assert has_role(role, spec) is False
