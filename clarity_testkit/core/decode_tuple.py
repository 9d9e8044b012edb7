"""Tuple Decoder — maps top-level tuple fields to their raw, still-encoded values.

Invariants:
    - Input framing is "{ ... }"; anything else raises StructuralMismatchError
    - Each element splits on its FIRST ":"; the key is the exact text before it,
      the value starts two characters after it (the ": " convention)
    - Keys are exactly the field names at depth 1; nested tuples stay raw strings
    - Elements with no ":" contribute no field

Design Decisions:
    - No recursive decoding: callers decode a field on demand with the matching
      expect_* function, e.g. expect_uint(expect_tuple(src)["balance"], 10)
"""

from clarity_testkit.core.split_structure import split_top_level


def expect_tuple(src: str) -> dict[str, str]:
    """'{ a: u1, b: true }' -> {'a': 'u1', 'b': 'true'}."""
    fields: dict[str, str] = {}
    for element in split_top_level(src, "{", "}", "(tuple ...)"):
        sep = element.find(":")
        if sep == -1:
            continue
        fields[element[:sep]] = element[sep + 2:]
    return fields
