"""Services Layer - orchestrates classifier, resolvers and per-locale providers.

Invariants:
    - Services hold no mutable state after construction
    - Errors from core propagate unchanged (API handlers map them to responses)
"""
