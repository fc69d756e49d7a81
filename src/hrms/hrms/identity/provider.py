from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from flask import session

from ..core.exceptions import AuthenticationError
from ..permissions.service import parse_role
from .model import Principal


class IdentityProvider(Protocol):
    def current_principal(self) -> Principal:
        raise NotImplementedError


@dataclass(frozen=True)
class StaticIdentityProvider:
    """Always yields the same principal (scripts, tests)."""

    principal: Principal

    def current_principal(self) -> Principal:
        return self.principal


class FlaskSessionIdentityProvider:
    """Reads the principal the login view stored in the Flask session."""

    def __init__(self, *, user_key: str = "user_id", role_key: str = "role"):
        self._user_key = user_key
        self._role_key = role_key

    def current_principal(self) -> Principal:
        user_id = session.get(self._user_key)
        if user_id is None or str(user_id).strip() == "":
            raise AuthenticationError("Please sign in to continue")
        return Principal(subject_id=str(user_id), role=parse_role(session.get(self._role_key)))
