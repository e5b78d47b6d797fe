"""
task_manager.auth.models

Auth domain models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity as read from a validated token.

    `subject` is the user's email. Authorization decisions use the stored `User`
    (see `get_current_user`), so a role change applies without re-issuing tokens.
    """

    subject: str
    roles: frozenset[str]
