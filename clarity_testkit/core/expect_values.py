"""Scoped Decoder — strips an expected wrapper or token from a notation string.

Invariants:
    - All functions are PURE: no IO, no mutation of inputs
    - Wrapped mode (ok/err/some): input length >= len(token) + 2, one leading and one
      trailing character removed, then the interior must start with the token
    - Unwrapped mode (none, scalars, principals): token compared from position 0
    - Only the leading len(token) characters are compared; the remainder after the
      token and at most one separating space is returned to the caller
    - Every mismatch raises TokenMismatchError carrying expected token and actual input
    - expect_buff is exact: the re-encoded expected bytes must equal the whole input
    - expect_buff rejects values that are not bytes with UnsupportedValueError

Design Decisions:
    - Free functions with the string as explicit first argument: no patching of str
    - Scalar expectations return the EXPECTED value on success, so a test can write
      amount = expect_uint(result, 100) and keep the typed value
"""

from collections.abc import Iterable

from clarity_testkit.core.encode_values import buff
from clarity_testkit.core.errors import TokenMismatchError, UnsupportedValueError


def consume(src: str, token: str, wrapped: bool) -> str:
    """Match token at the start of src (inside one delimiter pair when wrapped).

    Returns the remainder after the token and an optional single space.
    """
    size = len(token) + 2 if wrapped else len(token)
    if len(src) < size:
        raise TokenMismatchError(token, src)

    dst = src[1:-1] if wrapped else src
    if dst[:len(token)] != token:
        raise TokenMismatchError(token, src)

    left_pad = 1 if dst[len(token):len(token) + 1] == " " else 0
    return dst[len(token) + left_pad:]


# ─── Wrapped ─────────────────────────────────────────────────────

def expect_ok(src: str) -> str:
    """'(ok u1)' -> 'u1'."""
    return consume(src, "ok", True)


def expect_err(src: str) -> str:
    return consume(src, "err", True)


def expect_some(src: str) -> str:
    return consume(src, "some", True)


# ─── Unwrapped ───────────────────────────────────────────────────

def expect_none(src: str) -> None:
    consume(src, "none", False)


def expect_bool(src: str, value: bool) -> bool:
    consume(src, "true" if value else "false", False)
    return value


def expect_uint(src: str, value: int) -> int:
    consume(src, f"u{value}", False)
    return value


def expect_int(src: str, value: int) -> int:
    consume(src, f"{value}", False)
    return value


def expect_ascii(src: str, value: str) -> str:
    consume(src, f'"{value}"', False)
    return value


def expect_utf8(src: str, value: str) -> str:
    consume(src, f'u"{value}"', False)
    return value


def expect_principal(src: str, value: str) -> str:
    consume(src, f"{value}", False)
    return value


def expect_buff(src: str, value: bytes | bytearray | Iterable[int]) -> bytes:
    """Exact match against the 0x-hex rendering of value."""
    try:
        data = bytes(value)
    except (TypeError, ValueError) as e:
        raise UnsupportedValueError(f"expect_buff expects bytes or ints in 0..255: {e}") from e
    expected = buff(data)
    if src != expected:
        raise TokenMismatchError(expected, src)
    return data
