"""Services Layer — imperative shell orchestrating IO around the pure core.

Invariants:
    - Services own the async calls; core functions they use stay synchronous and pure
    - Services raise CrowdfundError subclasses, never HTTPException

Design Decisions:
    - Repositories injected as constructor args (ADR: storage technology decoupled from logic)
"""
