"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Place is the aggregate root for contents; UserPlace links users to places

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from app.models.place import Place  # noqa: F401
from app.models.user import User  # noqa: F401
from app.models.user_place import UserPlace  # noqa: F401
from app.models.content import Content  # noqa: F401
