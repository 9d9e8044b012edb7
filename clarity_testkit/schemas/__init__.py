"""Pydantic Schemas — transactions sent to, and results returned by, the engine.

Invariants:
    - Schemas validate at the engine boundary
    - Domain types from core/ used for enum fields
"""
