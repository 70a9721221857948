"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (UI requests, API responses)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core dataclasses: schemas are wire contracts, core types are values
"""
