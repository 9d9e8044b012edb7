"""clarity-testkit — notation codec and event matcher for Clarity contract tests.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
      (e.g. from clarity_testkit.core.expect_values import expect_ok)
"""
