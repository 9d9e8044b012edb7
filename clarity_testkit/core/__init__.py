"""Core Layer — notation codec and event matching, no IO.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the engine binding shell (services/)
"""
