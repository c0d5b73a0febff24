"""
Page state — one tagged variant per page, never a pile of booleans

    Idle → Loading → Ready
                   → Failed
                   → NotFound
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Idle:
    """Nothing requested yet."""


@dataclass(frozen=True)
class Loading:
    token: int
    matricula: str


@dataclass(frozen=True)
class Ready:
    matricula: str
    data: Any


@dataclass(frozen=True)
class Failed:
    """A read failed; the message is shown next to a retry button."""
    matricula: str
    message: str


@dataclass(frozen=True)
class NotFound:
    matricula: str


PageState = Union[Idle, Loading, Ready, Failed, NotFound]

# Terminal outcomes a fetch cycle can end in
Outcome = Union[Ready, Failed, NotFound]
