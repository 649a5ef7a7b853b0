"""Project ORM — persists a fundraising project with embedded milestones.

Invariants:
    - raised starts at 0 and is only ever increased by donations
    - milestones is an ordered JSON array of {title, amount, reached}
    - owner_id set once at creation (FK users.id)

Design Decisions:
    - JSON column for milestones: milestones have no identity of their own and
      are always read and written together with the project
    - owner relationship loaded with selectin: listing needs the owner name
      for every row, one extra query instead of N
    - Whole-list reassignment on update: plain JSON is not mutation-tracked
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Float, DateTime, JSON, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from crowdfund.db.base import Base


class Project(Base):
    """Fundraising project — aggregate root for its milestones."""
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    goal: Mapped[float | None] = mapped_column(Float, nullable=True)
    raised: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    milestones: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    social_links: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    owner: Mapped["User"] = relationship("User", lazy="selectin")
