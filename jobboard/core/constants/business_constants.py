"""
Business rules for job ranking, filtering and suggestions.
"""


class BusinessRules:
    """Core business logic constants and rules."""

    # Pagination
    DEFAULT_PAGE = 1
    DEFAULT_PAGE_LIMIT = 10
    MAX_PAGE_LIMIT = 50
    DEFAULT_SUGGESTION_LIMIT = 8
    DEFAULT_COMPANY_PAGE_LIMIT = 20
    DEFAULT_COMPANY_SEARCH_LIMIT = 10

    # Match score weights
    SKILL_MATCH_WEIGHT = 0.7
    EXPERIENCE_MATCH_POINTS = 30

    # Fallback shown when neither the company record nor the job carries a name
    UNKNOWN_COMPANY_NAME = "Unknown Company"


class JobStatus:
    """Job posting status and activity conventions."""

    APPROVED = "APPROVED"
    LEGACY_ACTIVE = "active"

    # Statuses accepted by the backward-compatible suggestion and search paths
    LISTABLE_STATUSES = [APPROVED, LEGACY_ACTIVE]

    ACTIVE_FIELD = "active"
    LEGACY_ACTIVE_FIELD = "isActive"


class JobTypes:
    """Canonical job types and the stored spellings each one tolerates."""

    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    INTERNSHIP = "internship"
    FREELANCE = "freelance"

    VARIANTS = {
        "full-time": FULL_TIME,
        "fulltime": FULL_TIME,
        "full time": FULL_TIME,
        "part-time": PART_TIME,
        "parttime": PART_TIME,
        "part time": PART_TIME,
        "contract": CONTRACT,
        "internship": INTERNSHIP,
        "freelance": FREELANCE,
    }

    @classmethod
    def normalize(cls, value):
        """Map a stored job type to its canonical form, leaving unknown values untouched."""
        if not isinstance(value, str):
            return value
        return cls.VARIANTS.get(value.strip().lower(), value)
