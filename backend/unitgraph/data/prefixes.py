"""Metric and binary prefix table."""

from __future__ import annotations

from unitgraph.core.units.prefix import Prefix, PrefixGroup

_S = PrefixGroup.SMALL_METRIC
_SE = PrefixGroup.SMALL_METRIC | PrefixGroup.SMALL_ENGINEERING
_L = PrefixGroup.LARGE_METRIC
_LE = PrefixGroup.LARGE_METRIC | PrefixGroup.LARGE_ENGINEERING
_B = PrefixGroup.BINARY

# (name, ascii symbol, multiplier, group, unicode symbol)
PREFIX_DEFINITIONS: list[tuple[str, str, float, PrefixGroup, str]] = [
    # Small metric
    ("quecto", "q", 1e-30, _SE, ""),
    ("ronto", "r", 1e-27, _SE, ""),
    ("yocto", "y", 1e-24, _SE, ""),
    ("zepto", "z", 1e-21, _SE, ""),
    ("atto", "a", 1e-18, _SE, ""),
    ("femto", "f", 1e-15, _SE, ""),
    ("pico", "p", 1e-12, _SE, ""),
    ("nano", "n", 1e-9, _SE, ""),
    ("micro", "u", 1e-6, _SE, "μ"),
    ("milli", "m", 1e-3, _SE, ""),
    ("centi", "c", 1e-2, _S, ""),
    ("deci", "d", 1e-1, _S, ""),
    # Large metric
    ("deca", "da", 1e1, _L, ""),
    ("hecto", "h", 1e2, _L, ""),
    ("kilo", "k", 1e3, _LE, ""),
    ("mega", "M", 1e6, _LE, ""),
    ("giga", "G", 1e9, _LE, ""),
    ("tera", "T", 1e12, _LE, ""),
    ("peta", "P", 1e15, _LE, ""),
    ("exa", "E", 1e18, _LE, ""),
    ("zetta", "Z", 1e21, _LE, ""),
    ("yotta", "Y", 1e24, _LE, ""),
    ("ronna", "R", 1e27, _LE, ""),
    ("quetta", "Q", 1e30, _LE, ""),
    # Binary
    ("kibi", "Ki", 2 ** 10, _B, ""),
    ("mebi", "Mi", 2 ** 20, _B, ""),
    ("gibi", "Gi", 2 ** 30, _B, ""),
    ("tebi", "Ti", 2 ** 40, _B, ""),
    ("pebi", "Pi", 2 ** 50, _B, ""),
    ("exbi", "Ei", 2 ** 60, _B, ""),
    ("zebi", "Zi", 2 ** 70, _B, ""),
    ("yobi", "Yi", 2 ** 80, _B, ""),
]


def build_prefixes() -> list[Prefix]:
    return [
        Prefix(name=name, ascii_symbol=symbol, multiplier=multiplier, group=group, unicode_symbol=unicode)
        for name, symbol, multiplier, group, unicode in PREFIX_DEFINITIONS
    ]
