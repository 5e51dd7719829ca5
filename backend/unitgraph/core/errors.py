"""Error types raised by the unit parser, registries and converters."""

from __future__ import annotations


class FormatError(ValueError):
    """Raised when a unit or dimension literal is syntactically malformed."""

    def __init__(self, message: str, text: str = "", position: int | None = None) -> None:
        self.text = text
        self.position = position
        if position is not None:
            message = f"{message} (in '{text}' at position {position})"
        super().__init__(message)


class DomainError(ValueError):
    """Raised for well-formed input that makes no sense: unknown units, bad exponents, mismatched dimensions."""


class NoConversionPathError(LookupError):
    """Raised by convert() when the conversion graph cannot connect two units."""

    def __init__(self, src: str, dest: str) -> None:
        self.src = src
        self.dest = dest
        super().__init__(f"No conversion path found between '{src}' and '{dest}'.")
