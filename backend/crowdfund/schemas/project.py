"""Project Schemas — project creation and donation payloads.

Invariants:
    - DonationCreate.amount: finite and > 0 (no zero, negative, or NaN donations)
    - ProjectCreate.goal and milestone amounts: finite and >= 0
    - All amounts capped at MAX_AMOUNT (core/ledger.py)
    - socialLinks accepted under its wire name, exposed as social_links

Design Decisions:
    - Typed boundary here instead of in the ledger core: the core stays a
      plain arithmetic rule, the API refuses values that would corrupt raised
    - Numeric strings are coerced (pydantic lax mode), never concatenated
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crowdfund.core.ledger import MAX_AMOUNT


class MilestoneCreate(BaseModel):
    title: str | None = Field(None, max_length=200)
    amount: float | None = Field(None, ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    reached: bool = False


class SocialLinks(BaseModel):
    facebook: str | None = None
    twitter: str | None = None
    linkedin: str | None = None


class ProjectCreate(BaseModel):
    """Project creation — owner comes from the verified token, never the body."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(max_length=20_000)
    goal: float = Field(ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    category: str | None = Field(None, max_length=100)
    milestones: list[MilestoneCreate] = Field(default_factory=list)
    social_links: SocialLinks | None = Field(None, alias="socialLinks")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class DonationCreate(BaseModel):
    amount: float = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
