"""Error Hierarchy — typed, categorized failures for notation decoding and event matching.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the expected and actual values (or search criteria) it failed on
    - to_dict() produces a plain, JSON-serializable envelope for reporting tools
    - A failed decode aborts the whole call: there is no partial-success error

Design Decisions:
    - Single hierarchy with ClarityTestError base: callers catch one type (ADR: uniform error shape)
    - Base derives from AssertionError: pytest renders decode failures as assertion
      failures, not as crashes of the test harness
    - ErrorContext as dataclass: rich diagnostics without coupling to logging framework
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from clarity_testkit.core.format_diagnostics import expected_got


class ErrorSeverity(str, Enum):
    """Error severity for reporting tools."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    STRUCTURE = "structure"
    TOKEN = "token"
    NOT_FOUND = "not_found"
    ENCODING = "encoding"
    ENGINE = "engine"


@dataclass
class ErrorContext:
    """Rich context for failure diagnostics."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: int | None = None
    event_kind: str | None = None
    debug_info: dict[str, Any] | None = None


class ClarityTestError(AssertionError):
    """Base exception for all clarity-testkit failures."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "session_id": self.context.session_id,
                    "event_kind": self.context.event_kind,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Decode Errors ──────────────────────────────────────────────

class StructuralMismatchError(ClarityTestError):
    """Input is not framed by the delimiters the decode operation requires."""
    def __init__(self, expected: str, actual: str, context: ErrorContext | None = None):
        super().__init__(
            expected_got(expected, actual),
            "STRUCTURAL_MISMATCH", ErrorCategory.STRUCTURE,
            ErrorSeverity.ERROR, context,
        )
        self.expected = expected
        self.actual = actual


class TokenMismatchError(ClarityTestError):
    """Expected scalar token not found at the expected position."""
    def __init__(self, expected: str, actual: str, context: ErrorContext | None = None):
        super().__init__(
            expected_got(expected, actual),
            "TOKEN_MISMATCH", ErrorCategory.TOKEN,
            ErrorSeverity.ERROR, context,
        )
        self.expected = expected
        self.actual = actual


class EventNotFoundError(ClarityTestError):
    """No record in an event log satisfied every expectation for a kind."""
    def __init__(
        self,
        kind: str,
        expected: dict[str, Any],
        scanned: int,
        context: ErrorContext | None = None,
    ):
        criteria = ", ".join(f"{k}={v}" for k, v in expected.items())
        ctx = replace(context, event_kind=kind) if context else ErrorContext(event_kind=kind)
        super().__init__(
            f"Unable to retrieve expected {kind}({criteria}) "
            f"in {scanned} event(s)",
            "EVENT_NOT_FOUND", ErrorCategory.NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.kind = kind
        self.expected = expected
        self.scanned = scanned


# ─── Encode / Engine Errors ─────────────────────────────────────

class UnsupportedValueError(ClarityTestError):
    """Value cannot be rendered in notation (wrong type or unsupported shape)."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "UNSUPPORTED_VALUE", ErrorCategory.ENCODING,
            ErrorSeverity.ERROR, context,
        )
        self.field = field


class EngineCallError(ClarityTestError):
    """Simulation engine returned a payload the binding cannot interpret."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Engine {operation} failed: {message}",
            "ENGINE_CALL_FAILED", ErrorCategory.ENGINE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
