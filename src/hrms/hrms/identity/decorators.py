from __future__ import annotations

from functools import wraps

from flask import abort, g

from ..core.enums import Action, Resource
from ..core.exceptions import AuthenticationError
from ..permissions.service import PermissionEvaluator
from .provider import IdentityProvider


def permission_required(
    evaluator: PermissionEvaluator,
    identity: IdentityProvider,
    resource: Resource,
    action: Action,
):
    """Flask view guard: 401 without a principal, 403 when the rule table denies.

    The resolved principal is exposed to the view as ``flask.g.principal``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                principal = identity.current_principal()
            except AuthenticationError:
                abort(401)

            if not evaluator.is_allowed(principal.role, resource, action):
                abort(403)

            g.principal = principal
            return view(*args, **kwargs)

        return wrapper

    return decorator
