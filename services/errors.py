"""
Outcome taxonomy shared by controllers

- UserNotFound:     the matrícula has no user (user-correctable)
- FetchFailed:      the record store failed (retry by reloading)
- ValidationFailed: a form is incomplete; the store is never called
"""
from __future__ import annotations

from typing import Dict

from db.store import FetchFailed


class UserNotFound(Exception):
    """No user for this membership identifier."""

    def __init__(self, matricula: str):
        super().__init__(f"no user with matricula {matricula!r}")
        self.matricula = matricula


class ValidationFailed(Exception):
    """A draft failed its required-field checks."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = dict(errors)


__all__ = ["FetchFailed", "UserNotFound", "ValidationFailed"]
