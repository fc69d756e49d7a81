from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Principal:
    """The authenticated subject making a request."""

    subject_id: str
    role: Role
