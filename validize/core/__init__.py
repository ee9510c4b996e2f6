"""Core Layer: pure validation logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, infrastructure/ or config
    - Every validator is pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
