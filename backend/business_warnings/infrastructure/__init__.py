"""Infrastructure Layer - concrete collaborators and cross-cutting concerns.

Invariants:
    - Implements core Protocols (LocalizationProvider), never core decision logic
    - Logging configured here, once, from the app lifespan
"""
