"""Infrastructure Layer — database, crypto, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every external failure mapped to a CrowdfundError subclass

Design Decisions:
    - Thin wrappers over third-party clients (ADR: single responsibility)
"""
