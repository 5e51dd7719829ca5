"""Dimension codes: exponent vectors over a fixed set of physical axes.

A dimension code lists axis letters in priority order, each followed by an
optional single-digit exponent, e.g. ``MLT-2`` for force. ``1`` is the code of
dimensionless quantities.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from unitgraph.core.errors import DomainError


@dataclass(frozen=True)
class Axis:
    letter: str
    name: str
    si_base: str         # unprefixed SI base unit symbol
    si_prefix: str = ""  # prefix applied to si_base to get the SI unit (kg)

    @property
    def si_symbol(self) -> str:
        return self.si_prefix + self.si_base


# Priority order of the axes in a canonical code.
AXES: dict[str, Axis] = {
    axis.letter: axis
    for axis in (
        Axis("M", "mass", "g", "k"),
        Axis("L", "length", "m"),
        Axis("A", "angle", "rad"),
        Axis("D", "data", "B"),
        Axis("C", "currency", "XAU"),
        Axis("T", "time", "s"),
        Axis("I", "electric current", "A"),
        Axis("H", "temperature", "K"),
        Axis("N", "amount of substance", "mol"),
        Axis("J", "luminous intensity", "cd"),
    )
}

DIMENSIONLESS = "1"
MAX_EXPONENT = 9

_AXIS_LETTERS = "".join(AXES)
_CODE_RE = re.compile(rf"(?:[{_AXIS_LETTERS}](?:-?\d)?)+")
_TERM_RE = re.compile(rf"([{_AXIS_LETTERS}])(-?\d)?")


def is_valid(code: str) -> bool:
    """True if ``code`` is ``"1"`` or a run of axis letters with optional single-digit exponents."""
    return code == DIMENSIONLESS or _CODE_RE.fullmatch(code) is not None


def decompose(code: str) -> dict[str, int]:
    """Split a code into ``{axis: exponent}``. Repeated axes accumulate."""
    if not is_valid(code):
        raise DomainError(f"Invalid dimension code '{code}'.")
    vector: dict[str, int] = {}
    if code == DIMENSIONLESS:
        return vector
    for letter, exp in _TERM_RE.findall(code):
        vector[letter] = vector.get(letter, 0) + (int(exp) if exp else 1)
    return vector


def compose(vector: dict[str, int], keep_zeros: bool = False) -> str:
    """Build the canonical code for an exponent vector."""
    parts: list[str] = []
    for letter in sorted(vector, key=letter_to_int):
        exp = vector[letter]
        if abs(exp) > MAX_EXPONENT:
            raise DomainError(
                f"Exponent {exp} for dimension '{letter}' is outside the range "
                f"[-{MAX_EXPONENT}, {MAX_EXPONENT}]."
            )
        if exp == 0 and not keep_zeros:
            continue
        parts.append(letter if exp == 1 else f"{letter}{exp}")
    return "".join(parts) or DIMENSIONLESS


def normalize(code: str) -> str:
    return compose(decompose(code))


def apply_exponent(code: str, n: int) -> str:
    """Raise a dimension to the power ``n``.

    ``n == 0`` keeps the axes with explicit zero exponents (``L`` -> ``L0``).
    """
    vector = {letter: exp * n for letter, exp in decompose(code).items()}
    return compose(vector, keep_zeros=n == 0)


def multiply(a: str, b: str) -> str:
    """Code of the product of two dimensions."""
    vector = decompose(a)
    for letter, exp in decompose(b).items():
        vector[letter] = vector.get(letter, 0) + exp
    return compose(vector)


def divide(a: str, b: str) -> str:
    return multiply(a, apply_exponent(b, -1))


def letter_to_int(letter: str) -> int:
    """Priority index of an axis letter."""
    if len(letter) != 1 or letter not in AXES:
        raise DomainError(f"Invalid dimension letter '{letter}'.")
    return _AXIS_LETTERS.index(letter)


def axis_name(letter: str) -> str:
    letter_to_int(letter)
    return AXES[letter].name


def is_base(code: str) -> bool:
    """True for a single axis with exponent 1, e.g. ``L`` but not ``L2`` or ``ML``."""
    vector = decompose(code)
    return len(vector) == 1 and next(iter(vector.values())) == 1


def get_si_base_unit_symbol(letter: str) -> str:
    """SI base unit symbol for one axis, with its prefix (``kg`` for mass)."""
    letter_to_int(letter)
    return AXES[letter].si_symbol
