"""Project Ledger Core — pure donation accumulation and milestone settlement.

Invariants:
    - Every function is PURE: inputs are never mutated, new lists/dicts returned
    - raised only grows by the donated amount (no withdrawal path exists)
    - A milestone transitions pending -> reached exactly once; reached is terminal
    - Milestones settle in sequence order against the post-donation total
    - MAX_AMOUNT is the single ceiling for goals, donations, and running totals

Design Decisions:
    - Milestones as plain dicts ({title, amount, reached}): same shape as the
      JSON column, no mapping layer between core and persistence
    - No amount validation here: the request schema is the typed boundary,
      the core adds whatever number it is handed; exceeds_ledger_limit is a
      separate predicate the shell checks before saving
"""

import math

from crowdfund.core.domain_types import MilestoneState

MAX_AMOUNT: float = 1e15


def new_milestones(milestones: list[dict] | None) -> list[dict]:
    """Normalize submitted milestones for a new project, defaulting reached=False."""
    return [
        {
            "title": m.get("title"),
            "amount": m.get("amount"),
            "reached": bool(m.get("reached", False)),
        }
        for m in (milestones or [])
    ]


def milestone_state(milestone: dict) -> MilestoneState:
    if milestone.get("reached"):
        return MilestoneState.REACHED
    return MilestoneState.PENDING


def settle_milestones(raised: float, milestones: list[dict]) -> list[dict]:
    """Mark every milestone whose amount is covered by raised. Never unsets."""
    settled = []
    for m in milestones:
        target = m.get("amount")
        crossed = target is not None and raised >= target
        settled.append({**m, "reached": bool(m.get("reached")) or crossed})
    return settled


def apply_donation(
    raised: float, amount: float, milestones: list[dict],
) -> tuple[float, list[dict]]:
    """Add a donation to raised and settle milestones against the new total."""
    new_raised = (raised or 0) + amount
    return new_raised, settle_milestones(new_raised, milestones)


def exceeds_ledger_limit(raised: float) -> bool:
    """True when a running total is no longer a storable, finite amount."""
    return not math.isfinite(raised) or raised > MAX_AMOUNT


def newly_reached(before: list[dict], after: list[dict]) -> list[str]:
    """Titles of milestones that flipped to reached between two snapshots."""
    return [
        a.get("title") or ""
        for b, a in zip(before, after)
        if not b.get("reached") and a.get("reached")
    ]
