"""Services Layer — chain binding and test registration around an engine session.

Invariants:
    - Engines accessed only through core/engine_protocols.EngineSession
"""
