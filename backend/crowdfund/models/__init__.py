"""ORM Models — SQLAlchemy declarative models for users and projects.

Invariants:
    - All models inherit from Base (db/base.py)
    - Milestones and social links are embedded in Project (JSON), never separate rows

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from crowdfund.models.user import User  # noqa: F401
from crowdfund.models.project import Project  # noqa: F401
