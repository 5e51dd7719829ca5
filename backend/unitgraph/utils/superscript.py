"""Conversion between ASCII exponents and Unicode superscript digits."""

from __future__ import annotations

SUPERSCRIPT_MINUS = "⁻"
SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"

_TO_SUPER = str.maketrans("-0123456789", SUPERSCRIPT_MINUS + SUPERSCRIPT_DIGITS)
_FROM_SUPER = str.maketrans(SUPERSCRIPT_MINUS + SUPERSCRIPT_DIGITS, "-0123456789")


def to_superscript(value: int | str) -> str:
    """Render an integer (or a string of digits and '-') as superscript characters."""
    return str(value).translate(_TO_SUPER)


def from_superscript(text: str) -> str:
    """Replace superscript digits and minus with their ASCII forms."""
    return text.translate(_FROM_SUPER)


def is_superscript(ch: str) -> bool:
    return ch != "" and ch in SUPERSCRIPT_MINUS + SUPERSCRIPT_DIGITS
