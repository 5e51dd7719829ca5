"""Tokenizer for compound unit symbols such as ``kg*m/s2`` or ``J/(mol·K)``."""

from __future__ import annotations

import re
from enum import Enum, auto
from dataclasses import dataclass

from unitgraph.core.errors import FormatError
from unitgraph.utils.superscript import SUPERSCRIPT_DIGITS, SUPERSCRIPT_MINUS, from_superscript, is_superscript


class TokenType(Enum):
    SYMBOL = auto()    # m, kg, °C, US gal
    EXPONENT = auto()  # 2, -1, ², ⁻¹
    MUL = auto()       # * . · ⋅
    DIV = auto()       # /
    LPAREN = auto()
    RPAREN = auto()
    EOF = auto()


MUL_OPS = "*.·⋅"

# Non-letter characters that may appear in a unit symbol.
SYMBOL_SPECIAL_CHARS = "!#$%&'\"?@`°′″‰"

_ASCII_EXP_RE = re.compile(r"\^?(-?\d+)")
_SUPER_EXP_RE = re.compile(rf"{SUPERSCRIPT_MINUS}?[{SUPERSCRIPT_DIGITS}]+")
# Multi-word ASCII symbols ("US fl oz") continue across single spaces.
_WORD_CONTINUATION_RE = re.compile(r" [A-Za-z]+")
_MAX_WORDS = 3


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    pos: int


def _is_symbol_char(ch: str) -> bool:
    return ch.isalpha() or ch in SYMBOL_SPECIAL_CHARS


def tokenize(source: str) -> list[Token]:
    """Convert a unit expression into a list of tokens."""
    tokens: list[Token] = []
    pos = 0

    while pos < len(source):
        ch = source[pos]

        if ch.isspace():
            pos += 1
            continue

        if ch in MUL_OPS:
            tokens.append(Token(TokenType.MUL, ch, pos))
            pos += 1
            continue

        if ch == "/":
            tokens.append(Token(TokenType.DIV, ch, pos))
            pos += 1
            continue

        if ch == "(":
            tokens.append(Token(TokenType.LPAREN, ch, pos))
            pos += 1
            continue

        if ch == ")":
            tokens.append(Token(TokenType.RPAREN, ch, pos))
            pos += 1
            continue

        if _is_symbol_char(ch):
            start = pos
            while pos < len(source) and _is_symbol_char(source[pos]):
                pos += 1
            # "US gal", "imp fl oz": only a plain ASCII first word may continue.
            first_word = source[start:pos]
            words = 1
            while words < _MAX_WORDS and first_word.isascii() and first_word.isalpha():
                m = _WORD_CONTINUATION_RE.match(source, pos)
                if not m:
                    break
                pos = m.end()
                words += 1
            tokens.append(Token(TokenType.SYMBOL, source[start:pos], start))
            pos = _read_exponent(source, pos, tokens)
            continue

        if ch in "^-" or ch.isdigit() or is_superscript(ch):
            raise FormatError("Exponent must follow a unit symbol", source, pos)

        raise FormatError(f"Unexpected character '{ch}'", source, pos)

    tokens.append(Token(TokenType.EOF, "", len(source)))
    return tokens


def _read_exponent(source: str, pos: int, tokens: list[Token]) -> int:
    """Consume an optional exponent directly after a symbol. Returns the new position."""
    m = _ASCII_EXP_RE.match(source, pos)
    notation = "ascii"
    if not m:
        m = _SUPER_EXP_RE.match(source, pos)
        notation = "superscript"
    if not m:
        if pos < len(source) and source[pos] in "^-" + SUPERSCRIPT_MINUS:
            raise FormatError("Malformed exponent", source, pos)
        return pos

    end = m.end()
    if end < len(source) and (source[end].isdigit() or is_superscript(source[end])):
        raise FormatError("Cannot mix ASCII and superscript digits in an exponent", source, pos)

    digits = m.group(1) if notation == "ascii" else from_superscript(m.group(0))
    if len(digits.lstrip("-")) > 1:
        raise FormatError("Exponent must be a single digit", source, pos)
    tokens.append(Token(TokenType.EXPONENT, digits, pos))
    return end
