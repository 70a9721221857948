"""Core Layer - pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - All functions are pure and deterministic (localization reached only via Protocol)

Design Decisions:
    - Functional core separated from imperative shell: classifier and resolver
      are testable with plain fakes, no app or settings required
"""
