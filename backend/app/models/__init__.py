"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer identities assigned by the store

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all or alembic autogenerate runs
"""

from app.models.portfolio import Portfolio  # noqa: F401
from app.models.personal_information import PersonalInformation  # noqa: F401
from app.models.career import Career  # noqa: F401
from app.models.education import Education  # noqa: F401
