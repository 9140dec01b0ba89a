"""Placeholder tokens built from free-text label fragments."""

from __future__ import annotations

from typing import List, Optional

PART_JOIN = "_"


def placeholder(*parts: Optional[str], collapse_leading_digit: bool = False) -> str:
    """Build a brace-delimited, identifier-safe token from label parts.

    Blank parts are skipped and the rest are joined with ``_``. Characters
    other than letters, digits and ``.`` become ``_``. A part starting with
    an ASCII digit gets a ``_`` in front of that digit, so
    ``placeholder("9abc")`` is ``"{_9abc}"``. With
    ``collapse_leading_digit=True`` the digit is replaced instead and the
    result is ``"{_abc}"``.

    Args:
        *parts: Label fragments, e.g. a section name and a key name.
        collapse_leading_digit: Replace a leading digit rather than
            prefixing it.

    Returns:
        The token, always starting with ``{`` and ending with ``}``.
    """
    out: List[str] = ["{"]
    emitted = 0
    for part in parts:
        if part is None or not part.strip():
            continue
        if emitted:
            out.append(PART_JOIN)
        for pos, char in enumerate(part):
            if pos == 0 and "0" <= char <= "9":
                out.append("_")
                if collapse_leading_digit:
                    continue
            if char.isalpha() or char.isdecimal() or char == ".":
                out.append(char)
            else:
                out.append("_")
        emitted += 1
    out.append("}")
    return "".join(out)
