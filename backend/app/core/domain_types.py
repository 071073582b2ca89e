"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PortfolioId and PersonalInformationId wrap store-assigned
      integers (always > 0 once persisted)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PortfolioId = NewType("PortfolioId", int)
PersonalInformationId = NewType("PersonalInformationId", int)


# ─── Enums ───────────────────────────────────────────────────────

class OrderDirection(str, Enum):
    """Sort direction for paged listings — maps to created_at ordering."""
    ASC = "ASC"
    DESC = "DESC"


class Gender(str, Enum):
    """Personal information gender — maps to DB `gender` column."""
    MALE = "male"
    FEMALE = "female"


class GuardToken(str, Enum):
    """Fixed resource tokens for exclusive write sections.

    One token per aggregate-wide rule. Writers holding the same token are
    serialized in-process and (on PostgreSQL) across processes.
    """
    PORTFOLIO_MAIN_INVARIANT = "portfolio-main-invariant"
    PERSONAL_INFORMATION_SINGLETON = "personal-information-singleton"
