from __future__ import annotations

import logging
import re
from typing import Mapping, Optional

from ..core.enums import Action, Decision, Resource, Role, Scope
from ..core.exceptions import AuthorizationError
from .rules import ORGANIZATION_VIEWERS, PERMISSION_RULES, PermissionTable, validate_rules

logger = logging.getLogger(__name__)

_ROLE_KEY = re.compile(r"[\s_\-]+")


def _normalize(value: str) -> str:
    return _ROLE_KEY.sub("", value).lower()


_ROLE_LOOKUP = {}
for _role in Role:
    _ROLE_LOOKUP[_normalize(_role.value)] = _role
    _ROLE_LOOKUP[_normalize(_role.name)] = _role


def parse_role(value) -> Role:
    """Map a declared role onto Role. Unknown values fall back to Employee (least privilege)."""

    if isinstance(value, Role):
        return value
    if isinstance(value, str):
        role = _ROLE_LOOKUP.get(_normalize(value))
        if role is not None:
            return role

    logger.warning("Unrecognised role %r, treating as %s", value, Role.EMPLOYEE.value)
    return Role.EMPLOYEE


class PermissionEvaluator:
    """Answers "may this role do that" from one static rule table."""

    def __init__(
        self,
        rules: Optional[PermissionTable] = None,
        *,
        organization_viewers: Optional[Mapping[Resource, frozenset]] = None,
    ):
        self._rules = rules if rules is not None else PERMISSION_RULES
        self._organization_viewers = organization_viewers if organization_viewers is not None else ORGANIZATION_VIEWERS
        validate_rules(self._rules)

    def evaluate(self, role, resource: Resource, action: Action) -> Decision:
        role = parse_role(role)
        allowed = self._rules.get(resource, {}).get(action)
        if allowed and role in allowed:
            return Decision.ALLOW
        return Decision.DENY

    def is_allowed(self, role, resource: Resource, action: Action) -> bool:
        return self.evaluate(role, resource, action) == Decision.ALLOW

    def require(self, role, resource: Resource, action: Action) -> None:
        if not self.is_allowed(role, resource, action):
            raise AuthorizationError(
                f"Role {parse_role(role).value} may not {action.value} {resource.value}"
            )

    def allowed_roles(self, resource: Resource, action: Action) -> frozenset:
        return frozenset(self._rules.get(resource, {}).get(action, frozenset()))

    def accessible_resources(self, role) -> list[Resource]:
        """Resources the role may view, in declaration order (drives navigation)."""
        return [r for r in Resource if self.is_allowed(role, r, Action.VIEW)]

    def view_scope(self, role, resource: Resource) -> Scope:
        role = parse_role(role)
        if role in self._organization_viewers.get(resource, frozenset()) and self.is_allowed(
            role, resource, Action.VIEW
        ):
            return Scope.ORGANIZATION
        return Scope.OWN
