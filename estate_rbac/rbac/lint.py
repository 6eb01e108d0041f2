"""Consistency checks for the role configuration table.

Catches the silent failure modes of a hand-maintained flat table: roles
without a config, permissions outside the catalog, duplicated entries, and
roles declared equivalent whose lists have drifted apart.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from estate_rbac.rbac.permissions import is_known_permission
from estate_rbac.rbac.roles import EQUIVALENT_ROLES, ROLE_CONFIGS, Role, RoleConfig

logger = logging.getLogger(__name__)

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class LintIssue:
    """A single finding against one role."""

    severity: str  # "error" | "warning"
    role: str
    message: str


@dataclass
class LintResult:
    issues: list[LintIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == ERROR]

    @property
    def warnings(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def passes(self, *, strict: bool = False) -> bool:
        return not self.issues if strict else self.ok

    def add(self, severity: str, role: str, message: str) -> None:
        self.issues.append(LintIssue(severity=severity, role=role, message=message))


def lint_role_configs(
    configs: Mapping[Role, RoleConfig] = ROLE_CONFIGS,
    equivalents: Iterable[tuple[Role, Role]] = EQUIVALENT_ROLES,
) -> LintResult:
    """Run every table check and return the findings."""
    result = LintResult()

    for role in Role:
        if role not in configs:
            result.add(ERROR, role, "role has no configuration")

    for key, config in configs.items():
        if config.name != key:
            result.add(ERROR, key, f"config name {config.name!r} does not match its key")

        for permission in config.permissions:
            if not is_known_permission(permission):
                result.add(ERROR, key, f"unknown permission {permission!r}")

        for permission, count in Counter(config.permissions).items():
            if count > 1:
                result.add(WARNING, key, f"permission {permission!s} listed {count} times")

    for left, right in equivalents:
        if left not in configs or right not in configs:
            continue
        drift = configs[left].permission_set ^ configs[right].permission_set
        if drift:
            only_left = sorted(configs[left].permission_set - configs[right].permission_set)
            only_right = sorted(configs[right].permission_set - configs[left].permission_set)
            result.add(
                ERROR,
                left,
                f"must match {right}: only in {left}: {[str(p) for p in only_left]}, "
                f"only in {right}: {[str(p) for p in only_right]}",
            )

    for issue in result.issues:
        level = logging.ERROR if issue.severity == ERROR else logging.WARNING
        logger.log(level, "Role config %s: %s", issue.role, issue.message, extra={"role": issue.role})

    return result
