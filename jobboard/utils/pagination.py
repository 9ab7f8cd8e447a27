"""
Pagination helpers shared by job ranking, job search and company listing.

Query values arrive as raw strings; they are read with leading-integer
semantics ("3.7" -> 3, "12abc" -> 12) and fall back to the default when
missing, non-numeric or zero, then clamped.
"""

import math
import re
from typing import Any, Dict, Optional

from jobboard.core.constants import BusinessRules

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> Optional[int]:
    """Read the leading integer of a query value, or None when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def clamp_page(value: Any) -> int:
    return max(1, parse_int(value) or BusinessRules.DEFAULT_PAGE)


def clamp_limit(
    value: Any,
    default: int = BusinessRules.DEFAULT_PAGE_LIMIT,
    maximum: int = BusinessRules.MAX_PAGE_LIMIT,
) -> int:
    """Clamp into [1, maximum]; configured maximums never exceed the hard cap."""
    maximum = min(maximum, BusinessRules.MAX_PAGE_LIMIT)
    return min(maximum, max(1, parse_int(value) or default))


def calculate_pagination(
    page: int, limit: int, total: int, total_key: str = "totalJobs"
) -> Dict[str, Any]:
    """
    Calculate pagination metadata.

    Args:
        page: Current page number (already clamped)
        limit: Items per page (already clamped)
        total: Total number of items before pagination
        total_key: Name of the total-count field in the response

    Returns:
        Pagination metadata dictionary
    """
    total_pages = math.ceil(total / limit) if limit > 0 else 0
    return {
        "currentPage": page,
        "totalPages": total_pages,
        total_key: total,
        "limit": limit,
        "hasNextPage": page < total_pages,
        "hasPrevPage": page > 1,
    }
