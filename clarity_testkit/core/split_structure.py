"""Structural Splitter — depth-aware top-level comma splitting of bracketed notation.

Invariants:
    - Input must start with open_char and end with close_char, else StructuralMismatchError
    - A close character pops only when the top of the stack is its own opener
    - A comma splits only while the stack holds exactly the record's own opener
    - Scanning resumes two characters past a separating comma (the ", " convention)
    - Elements are returned raw, in source order, never recursively decoded
    - Padding just inside the outer delimiters ("{ a: u1 }") is not part of any element

Design Decisions:
    - One splitter shared by expect_list and expect_tuple: identical depth rules
      for both framings (ADR: single source of truth for nesting)
    - Decoding reads "[a, b]" while encode_values.list_ writes "(list a b)": the
      two grammars are kept distinct, matching what the engine actually returns
"""

from clarity_testkit.core.errors import StructuralMismatchError


_OPENERS = frozenset("([{")
_CLOSER_TO_OPENER = {")": "(", "]": "[", "}": "{"}


def split_top_level(src: str, open_char: str, close_char: str, label: str) -> list[str]:
    """Split src into its top-level elements. label names the shape in failures."""
    if len(src) < 2 or src[0] != open_char or src[-1] != close_char:
        raise StructuralMismatchError(label, src)

    stack: list[str] = []
    elements: list[str] = []
    start = 1
    for i, ch in enumerate(src):
        if ch == "," and len(stack) == 1:
            elements.append(src[start:i].strip())
            start = i + 2
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSER_TO_OPENER and stack and stack[-1] == _CLOSER_TO_OPENER[ch]:
            stack.pop()

    remainder = src[start:len(src) - 1].strip()
    if remainder:
        elements.append(remainder)
    return elements


def expect_list(src: str) -> list[str]:
    """'[u1, u2, u3]' -> ['u1', 'u2', 'u3']."""
    return split_top_level(src, "[", "]", "(list ...)")
