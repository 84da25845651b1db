"""Pagination — pure page/limit resolution and window math.

Invariants:
    - A raw value is read as its leading run of ASCII digits (optional sign):
      "2.5" → 2, "3abc" → 3, "1_000" → 1
    - Absent, blank, digit-less or zero raw values fall back to the default
    - page >= 1 and 1 <= limit <= max_limit after resolution
    - skip = (page - 1) * limit
    - total_pages = ceil(total / limit); 0 when total is 0

Design Decisions:
    - Raw values arrive as strings: a non-numeric page must default, not 422
    - Zero means "use the default" (mirrors the frontend sending 0 for unset)
    - page has no upper bound; the service short-circuits windows past the end
"""

import math
import re
from dataclasses import dataclass

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass(frozen=True)
class PageWindow:
    """Resolved page number and size with the derived offset."""
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit) if total > 0 else 0


def parse_int_param(raw: str | int | None, default: int) -> int:
    """Parse a query-string integer prefix, returning default when absent, invalid, or 0."""
    if raw is None:
        return default
    if isinstance(raw, int):
        return raw or default
    match = _INT_PREFIX.match(raw)
    if match is None:
        return default
    return int(match.group(1)) or default


def resolve_window(
    raw_page: str | int | None,
    raw_limit: str | int | None,
    default_limit: int,
    max_limit: int,
) -> PageWindow:
    """Resolve raw page/limit into a clamped PageWindow."""
    page = max(parse_int_param(raw_page, 1), 1)
    limit = parse_int_param(raw_limit, default_limit)
    limit = min(max(limit, 1), max_limit)
    return PageWindow(page=page, limit=limit)
