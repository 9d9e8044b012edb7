"""Diagnostic Formatting — ANSI coloring for expected/actual values in failure messages.

Invariants:
    - Expected values render green (SGR 32), actual values render red (SGR 31)
    - Coloring is a no-op when Settings.no_color is true
    - Nested close codes inside the text are re-opened so the color spans the whole value

Design Decisions:
    - Settings read per call (get_settings is cached): tests can flip NO_COLOR via
      get_settings.cache_clear() without reloading the module
"""

import re
from typing import NamedTuple

from clarity_testkit.config import get_settings


class _Code(NamedTuple):
    open: str
    close: str
    regexp: re.Pattern


def _code(open_: list[int], close: int) -> _Code:
    return _Code(
        open=f"\x1b[{';'.join(str(n) for n in open_)}m",
        close=f"\x1b[{close}m",
        regexp=re.compile(rf"\x1b\[{close}m"),
    )


_GREEN = _code([32], 39)
_RED = _code([31], 39)


def _run(text: str, code: _Code) -> str:
    if get_settings().no_color:
        return text
    return f"{code.open}{code.regexp.sub(code.open, text)}{code.close}"


def green(text: str) -> str:
    return _run(text, _GREEN)


def red(text: str) -> str:
    return _run(text, _RED)


def expected_got(expected: str, actual: str) -> str:
    """Render the standard 'Expected X, got Y' diagnostic line."""
    return f"Expected {green(str(expected))}, got {red(str(actual))}"
