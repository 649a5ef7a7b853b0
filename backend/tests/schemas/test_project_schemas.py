"""Project & Auth Schemas — verifies the typed request boundary.

Tests cover:
    - donation amount must be finite and > 0; numeric strings coerced
    - goal and milestone amounts must be >= 0
    - goal, milestone and donation amounts are capped at MAX_AMOUNT
    - socialLinks accepted under its wire name
    - registration role limited to user/admin
"""

import pytest
from pydantic import ValidationError

from crowdfund.core.domain_types import Role
from crowdfund.core.ledger import MAX_AMOUNT
from crowdfund.schemas.auth import UserRegister
from crowdfund.schemas.project import DonationCreate, ProjectCreate


# ─── DonationCreate ─────────────────────────────────────────────

@pytest.mark.parametrize("amount", [0, -5, "abc", float("nan"), float("inf")])
def test_donation_rejects_non_positive_or_non_numeric(amount):
    with pytest.raises(ValidationError):
        DonationCreate(amount=amount)


def test_donation_coerces_numeric_string():
    assert DonationCreate(amount="50").amount == 50.0


@pytest.mark.parametrize("amount", [1e308, MAX_AMOUNT * 10])
def test_donation_rejects_amount_above_ceiling(amount):
    with pytest.raises(ValidationError):
        DonationCreate(amount=amount)


def test_donation_accepts_amount_at_ceiling():
    assert DonationCreate(amount=MAX_AMOUNT).amount == MAX_AMOUNT


# ─── ProjectCreate ──────────────────────────────────────────────

def _project(**overrides) -> dict:
    body = {"title": "Solar Kiln", "description": "Drying lumber", "goal": 1000}
    body.update(overrides)
    return body


def test_project_accepts_social_links_wire_name():
    project = ProjectCreate(**_project(socialLinks={"twitter": "@kiln"}))
    assert project.social_links.twitter == "@kiln"
    assert project.model_dump()["social_links"]["twitter"] == "@kiln"


def test_project_milestones_default_empty():
    assert ProjectCreate(**_project()).milestones == []


def test_project_milestone_reached_defaults_false():
    project = ProjectCreate(**_project(milestones=[{"title": "M1", "amount": 10}]))
    assert project.milestones[0].reached is False


def test_project_rejects_negative_goal():
    with pytest.raises(ValidationError):
        ProjectCreate(**_project(goal=-1))


def test_project_rejects_goal_above_ceiling():
    with pytest.raises(ValidationError):
        ProjectCreate(**_project(goal=1e308))


def test_project_rejects_milestone_amount_above_ceiling():
    with pytest.raises(ValidationError):
        ProjectCreate(**_project(milestones=[{"title": "Moon", "amount": 1e308}]))


def test_project_rejects_negative_milestone_amount():
    with pytest.raises(ValidationError):
        ProjectCreate(**_project(milestones=[{"title": "M1", "amount": -10}]))


def test_project_rejects_blank_title():
    with pytest.raises(ValidationError):
        ProjectCreate(**_project(title="   "))


def test_project_requires_goal():
    body = _project()
    del body["goal"]
    with pytest.raises(ValidationError):
        ProjectCreate(**body)


# ─── UserRegister ───────────────────────────────────────────────

def test_register_role_defaults_to_none():
    user = UserRegister(name="Ada", email="ada@example.com", password="pw")
    assert user.role is None


def test_register_accepts_admin_role():
    user = UserRegister(name="Ada", email="ada@example.com", password="pw", role="admin")
    assert user.role is Role.ADMIN


def test_register_rejects_unknown_role():
    with pytest.raises(ValidationError):
        UserRegister(name="Ada", email="ada@example.com", password="pw", role="root")


def test_register_rejects_invalid_email():
    with pytest.raises(ValidationError):
        UserRegister(name="Ada", email="not-an-email", password="pw")
