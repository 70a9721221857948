"""Business Warnings Package - compliance warning classification and dialog resolution.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
