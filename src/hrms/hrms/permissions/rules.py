"""The one authoritative permission table.

Every (resource, action) pair lists every role it admits. There is no role
hierarchy: a role that is not listed is denied, whatever its rank.
"""

from __future__ import annotations

from typing import Mapping

from ..core.enums import Action, Resource, Role
from ..core.exceptions import ValidationError

ALL_ROLES = frozenset(Role)
PEOPLE_MANAGERS = frozenset({Role.HR, Role.ADMIN, Role.MANAGEMENT_ADMIN})
REVIEWERS = frozenset({Role.HR, Role.SENIOR_MANAGER, Role.ADMIN, Role.MANAGEMENT_ADMIN})

PermissionTable = Mapping[Resource, Mapping[Action, frozenset]]

PERMISSION_RULES: PermissionTable = {
    Resource.ATTENDANCE: {
        Action.VIEW: ALL_ROLES,
        Action.ACT: ALL_ROLES,
    },
    Resource.EMPLOYEES: {
        Action.VIEW: ALL_ROLES,
        Action.EDIT: PEOPLE_MANAGERS,
    },
    Resource.PAYROLL: {
        Action.VIEW: PEOPLE_MANAGERS,
        Action.EDIT: PEOPLE_MANAGERS,
    },
    Resource.PERFORMANCE: {
        Action.VIEW: REVIEWERS,
        Action.EDIT: REVIEWERS,
    },
    Resource.GOALS: {
        Action.VIEW: REVIEWERS,
        Action.EDIT: REVIEWERS,
    },
}

# Roles that see every subject's records of a resource; other viewers see their own.
ORGANIZATION_VIEWERS: Mapping[Resource, frozenset] = {
    Resource.ATTENDANCE: REVIEWERS,
    Resource.EMPLOYEES: ALL_ROLES,
    Resource.PAYROLL: PEOPLE_MANAGERS,
    Resource.PERFORMANCE: REVIEWERS,
    Resource.GOALS: REVIEWERS,
}


def validate_rules(rules: PermissionTable) -> None:
    """Check table invariants: a non-empty View set everywhere, Edit never broader than View."""

    for resource in Resource:
        actions = rules.get(resource)
        if not actions or not actions.get(Action.VIEW):
            raise ValidationError(f"{resource.value}: at least one role must be allowed to View")

        editors = actions.get(Action.EDIT, frozenset())
        if not set(editors) <= set(actions[Action.VIEW]):
            extra = sorted(r.value for r in set(editors) - set(actions[Action.VIEW]))
            raise ValidationError(f"{resource.value}: Edit granted beyond View to {', '.join(extra)}")
