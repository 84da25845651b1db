"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BlogId and UserId wrap UUIDs — never use bare UUID in domain logic
    - Caller is immutable once resolved from the bearer token
    - Theme values are NOT validated server-side; KnownTheme only names the
      tags the frontend ships with

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

BlogId = NewType("BlogId", UUID)
UserId = NewType("UserId", UUID)


@dataclass(frozen=True)
class Caller:
    """Authenticated identity acting on a request."""
    id: UserId
    username: str


# ─── Enums ───────────────────────────────────────────────────────

class KnownTheme(str, Enum):
    """Theme tags offered by the frontend. Any other string is still accepted."""
    LIGHT = "light"
    DARK = "dark"
    VINCENT = "vincent"

