"""Notation Encoder — renders typed Python values as notation fragments for the engine.

Invariants:
    - All functions are PURE: no IO, no side effects beyond building the output string
    - buff renders every byte as exactly two lowercase hex digits after a single "0x"
    - _BYTE_TO_HEX is built once at import and never mutated (tuple, 256 entries)
    - list_ emits the parenthesized, space-separated "(list ...)" form; decoding
      reads the bracketed "[a, b]" form instead (see split_structure.expect_list)
    - tuple_ refuses sequence-valued fields rather than dropping them

Design Decisions:
    - Wrapper functions take already-encoded fragments: ok(uint(1)) composes
      without a value tree (ADR: fragments are plain strings end to end)
    - Trailing underscore on bool_/int_/list_/tuple_: no shadowing of builtins
"""

from collections.abc import Iterable, Mapping, Sequence

from clarity_testkit.core.domain_types import NotationString
from clarity_testkit.core.errors import UnsupportedValueError


_BYTE_TO_HEX: tuple[str, ...] = tuple(f"{n:02x}" for n in range(0x100))


# ─── Wrappers ────────────────────────────────────────────────────

def ok(val: str) -> NotationString:
    return NotationString(f"(ok {val})")


def err(val: str) -> NotationString:
    return NotationString(f"(err {val})")


def some(val: str) -> NotationString:
    return NotationString(f"(some {val})")


def none() -> NotationString:
    return NotationString("none")


# ─── Scalars ─────────────────────────────────────────────────────

def bool_(val: bool) -> NotationString:
    if not isinstance(val, bool):
        raise UnsupportedValueError(f"bool expects a bool, got {type(val).__name__}")
    return NotationString("true" if val else "false")


def int_(val: int) -> NotationString:
    if isinstance(val, bool) or not isinstance(val, int):
        raise UnsupportedValueError(f"int expects an int, got {type(val).__name__}")
    return NotationString(f"{val}")


def uint(val: int) -> NotationString:
    if isinstance(val, bool) or not isinstance(val, int):
        raise UnsupportedValueError(f"uint expects an int, got {type(val).__name__}")
    if val < 0:
        raise UnsupportedValueError(f"uint expects a non-negative value, got {val}")
    return NotationString(f"u{val}")


def ascii(val: str) -> NotationString:
    return NotationString(f'"{val}"')


def utf8(val: str) -> NotationString:
    return NotationString(f'u"{val}"')


def buff(val: bytes | bytearray | memoryview | Iterable[int]) -> NotationString:
    """Render a byte buffer as 0x-prefixed lowercase hex. Empty buffer -> "0x"."""
    try:
        data = bytes(val)
    except (TypeError, ValueError) as e:
        raise UnsupportedValueError(f"buff expects bytes or ints in 0..255: {e}") from e
    return NotationString("0x" + "".join(_BYTE_TO_HEX[b] for b in data))


def principal(val: str) -> NotationString:
    return NotationString(f"'{val}")


# ─── Composites ──────────────────────────────────────────────────

def list_(val: Iterable[str]) -> NotationString:
    return NotationString(f"(list {' '.join(str(v) for v in val)})")


def _serialize_tuple(fields: Mapping) -> str:
    items: list[str] = []
    for key, value in fields.items():
        if isinstance(value, Mapping):
            items.append(f"{key}: {{ {_serialize_tuple(value)} }}")
        elif isinstance(value, Sequence) and not isinstance(value, str):
            raise UnsupportedValueError(
                f"tuple field '{key}' holds a sequence; encode it with list_() or buff() first",
                field=str(key),
            )
        elif isinstance(value, bool):
            items.append(f"{key}: {bool_(value)}")
        elif value is None:
            raise UnsupportedValueError(
                f"tuple field '{key}' is None; use none() or some()", field=str(key),
            )
        else:
            items.append(f"{key}: {value}")
    return ", ".join(items)


def tuple_(val: Mapping) -> NotationString:
    """Render a mapping as "{ k: v, k: v }". Nested mappings recurse."""
    return NotationString(f"{{ {_serialize_tuple(val)} }}")
