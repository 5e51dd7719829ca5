"""Quantity types with their units and conversion factors, grouped by dimension.

Conversions are ``(src, dest, factor)`` meaning ``1 src = factor dest``. Either
side may carry prefixes or be a compound symbol; the registry reduces every
edge to unprefixed symbols when it is loaded.
"""

from __future__ import annotations

import math

from unitgraph.core.units.prefix import PrefixGroup
from unitgraph.core.units.unit import System

_METRIC = PrefixGroup.METRIC
_LARGE = PrefixGroup.LARGE

QUANTITY_TYPES: list[dict] = [
    # ── Dimensionless ───────────────────────────────────────────────────
    {
        "name": "dimensionless",
        "dimension": "1",
        "units": [
            {"name": "scalar", "ascii_symbol": "", "systems": [System.COMMON]},
            {"name": "percentage", "ascii_symbol": "%", "systems": [System.COMMON]},
            {"name": "parts per thousand", "ascii_symbol": "ppt", "unicode_symbol": "‰",
             "systems": [System.COMMON]},
            {"name": "parts per million", "ascii_symbol": "ppm", "systems": [System.COMMON]},
            {"name": "parts per billion", "ascii_symbol": "ppb", "systems": [System.COMMON]},
        ],
        "conversions": [
            ("", "%", 100),
            ("%", "ppt", 10),
            ("ppt", "ppm", 1000),
            ("ppm", "ppb", 1000),
        ],
    },
    # ── Base quantities ─────────────────────────────────────────────────
    {
        "name": "mass",
        "dimension": "M",
        "units": [
            {"name": "gram", "ascii_symbol": "g", "prefix_group": _METRIC, "systems": [System.SI]},
            {"name": "tonne", "ascii_symbol": "t", "systems": [System.SI_ACCEPTED]},
            {"name": "grain", "ascii_symbol": "gr", "systems": [System.IMPERIAL, System.US]},
            {"name": "ounce", "ascii_symbol": "oz", "systems": [System.IMPERIAL, System.US]},
            {"name": "pound", "ascii_symbol": "lb", "systems": [System.IMPERIAL, System.US]},
            {"name": "stone", "ascii_symbol": "st", "systems": [System.IMPERIAL]},
            {"name": "short ton", "ascii_symbol": "ton", "systems": [System.US]},
        ],
        "conversions": [
            ("t", "kg", 1000),
            ("lb", "kg", 0.45359237),
            ("gr", "mg", 64.79891),
            ("lb", "oz", 16),
            ("st", "lb", 14),
            ("ton", "lb", 2000),
        ],
    },
    {
        "name": "length",
        "dimension": "L",
        "units": [
            {"name": "metre", "ascii_symbol": "m", "prefix_group": _METRIC, "systems": [System.SI]},
            {"name": "astronomical unit", "ascii_symbol": "au",
             "systems": [System.SI_ACCEPTED, System.ASTRONOMICAL]},
            {"name": "light year", "ascii_symbol": "ly", "systems": [System.ASTRONOMICAL]},
            {"name": "parsec", "ascii_symbol": "pc",
             "prefix_group": PrefixGroup.LARGE_ENGINEERING, "systems": [System.ASTRONOMICAL]},
            {"name": "pixel", "ascii_symbol": "px", "systems": [System.TYPOGRAPHY]},
            {"name": "point", "ascii_symbol": "p", "systems": [System.TYPOGRAPHY]},
            {"name": "pica", "ascii_symbol": "P", "systems": [System.TYPOGRAPHY]},
            {"name": "inch", "ascii_symbol": "in", "systems": [System.IMPERIAL, System.US]},
            {"name": "foot", "ascii_symbol": "ft", "systems": [System.IMPERIAL, System.US]},
            {"name": "yard", "ascii_symbol": "yd", "systems": [System.IMPERIAL, System.US]},
            {"name": "mile", "ascii_symbol": "mi", "systems": [System.IMPERIAL, System.US]},
            {"name": "league", "ascii_symbol": "le", "systems": [System.IMPERIAL, System.US]},
            {"name": "fathom", "ascii_symbol": "ftm", "systems": [System.NAUTICAL]},
            {"name": "nautical mile", "ascii_symbol": "nmi", "systems": [System.NAUTICAL]},
        ],
        "conversions": [
            ("yd", "m", 0.9144),
            ("ft", "m", 0.3048),
            ("in", "mm", 25.4),
            ("in", "px", 96),
            ("in", "p", 72),
            ("in", "P", 6),
            ("ft", "in", 12),
            ("yd", "ft", 3),
            ("mi", "yd", 1760),
            ("le", "mi", 3),
            ("au", "m", 149597870700),
            ("ly", "m", 9460730472580800),
            ("pc", "au", 648000 / math.pi),
            ("ftm", "yd", 2),
            ("nmi", "m", 1852),
        ],
    },
    {
        "name": "angle",
        "dimension": "A",
        "units": [
            {"name": "radian", "ascii_symbol": "rad", "prefix_group": _METRIC, "systems": [System.SI]},
            {"name": "degree", "ascii_symbol": "deg", "unicode_symbol": "°",
             "systems": [System.SI_ACCEPTED]},
            {"name": "arcminute", "ascii_symbol": "arcmin", "unicode_symbol": "′",
             "alternate_symbol": "'", "systems": [System.SI_ACCEPTED]},
            {"name": "arcsecond", "ascii_symbol": "arcsec", "unicode_symbol": "″",
             "alternate_symbol": '"', "prefix_group": PrefixGroup.SMALL_ENGINEERING,
             "systems": [System.SI_ACCEPTED]},
            {"name": "gradian", "ascii_symbol": "grad", "systems": [System.COMMON]},
            {"name": "turn", "ascii_symbol": "turn", "systems": [System.COMMON]},
        ],
        "conversions": [
            ("turn", "rad", math.tau),
            ("turn", "deg", 360),
            ("deg", "arcmin", 60),
            ("arcmin", "arcsec", 60),
            ("turn", "grad", 400),
        ],
    },
    {
        "name": "data",
        "dimension": "D",
        "units": [
            {"name": "bit", "ascii_symbol": "b", "prefix_group": _LARGE, "systems": [System.COMMON]},
            {"name": "byte", "ascii_symbol": "B", "prefix_group": _LARGE, "systems": [System.COMMON]},
        ],
        "conversions": [
            ("B", "b", 8),
        ],
    },
    {
        "name": "currency",
        "dimension": "C",
        "units": [
            {"name": "troy ounce of gold", "ascii_symbol": "XAU", "systems": [System.COMMON]},
        ],
        "conversions": [],
    },
    {
        "name": "time",
        "dimension": "T",
        "units": [
            {"name": "second", "ascii_symbol": "s", "prefix_group": _METRIC, "systems": [System.SI]},
            {"name": "minute", "ascii_symbol": "min", "systems": [System.SI_ACCEPTED]},
            {"name": "hour", "ascii_symbol": "h", "systems": [System.SI_ACCEPTED]},
            {"name": "day", "ascii_symbol": "d", "systems": [System.SI_ACCEPTED]},
            {"name": "week", "ascii_symbol": "w", "systems": [System.COMMON]},
            {"name": "month", "ascii_symbol": "mo", "systems": [System.COMMON]},
            {"name": "year", "ascii_symbol": "y", "systems": [System.COMMON]},
        ],
        "conversions": [
            ("min", "s", 60),
            ("h", "min", 60),
            ("d", "h", 24),
            ("w", "d", 7),
            ("y", "mo", 12),
            ("y", "d", 365.2425),
        ],
    },
    {
        "name": "electric current",
        "dimension": "I",
        "units": [
            {"name": "ampere", "ascii_symbol": "A", "prefix_group": _METRIC, "systems": [System.SI]},
        ],
        "conversions": [],
    },
    {
        "name": "temperature",
        "dimension": "H",
        "units": [
            {"name": "kelvin", "ascii_symbol": "K", "prefix_group": _METRIC, "systems": [System.SI]},
            {"name": "celsius", "ascii_symbol": "degC", "unicode_symbol": "°C",
             "systems": [System.SI_ACCEPTED]},
            {"name": "fahrenheit", "ascii_symbol": "degF", "unicode_symbol": "°F",
             "systems": [System.US, System.IMPERIAL]},
            {"name": "rankine", "ascii_symbol": "degR", "unicode_symbol": "°R",
             "systems": [System.IMPERIAL]},
        ],
        # Multiplicative only: these relate temperature differences, not absolute readings.
        "conversions": [
            ("degC", "K", 1),
            ("degF", "degR", 1),
            ("K", "degR", 1.8),
        ],
    },
    {
        "name": "amount of substance",
        "dimension": "N",
        "units": [
            {"name": "mole", "ascii_symbol": "mol", "prefix_group": _METRIC, "systems": [System.SI]},
        ],
        "conversions": [],
    },
    {
        "name": "luminous intensity",
        "dimension": "J",
        "units": [
            {"name": "candela", "ascii_symbol": "cd", "prefix_group": _METRIC, "systems": [System.SI]},
        ],
        "conversions": [],
    },
    # ── Derived quantities ──────────────────────────────────────────────
    {
        "name": "area",
        "dimension": "L2",
        "units": [
            {"name": "hectare", "ascii_symbol": "ha", "systems": [System.SI_ACCEPTED]},
            {"name": "acre", "ascii_symbol": "ac", "systems": [System.IMPERIAL, System.US]},
        ],
        "conversions": [
            ("ha", "m2", 10000),
            ("ac", "m2", 4046.8564224),
            ("ac", "yd2", 4840),
        ],
    },
    {
        "name": "volume",
        "dimension": "L3",
        "units": [
            {"name": "litre", "ascii_symbol": "L", "prefix_group": _METRIC,
             "systems": [System.SI_ACCEPTED]},
            {"name": "US fluid ounce", "ascii_symbol": "US fl oz", "systems": [System.US]},
            {"name": "US pint", "ascii_symbol": "US pt", "systems": [System.US]},
            {"name": "US quart", "ascii_symbol": "US qt", "systems": [System.US]},
            {"name": "US gallon", "ascii_symbol": "US gal", "systems": [System.US]},
            {"name": "imperial fluid ounce", "ascii_symbol": "imp fl oz", "systems": [System.IMPERIAL]},
            {"name": "imperial pint", "ascii_symbol": "imp pt", "systems": [System.IMPERIAL]},
            {"name": "imperial quart", "ascii_symbol": "imp qt", "systems": [System.IMPERIAL]},
            {"name": "imperial gallon", "ascii_symbol": "imp gal", "systems": [System.IMPERIAL]},
        ],
        "conversions": [
            ("m3", "L", 1000),
            ("US gal", "in3", 231),
            ("US gal", "US qt", 4),
            ("US qt", "US pt", 2),
            ("US pt", "US fl oz", 16),
            ("imp gal", "L", 4.54609),
            ("imp gal", "imp qt", 4),
            ("imp qt", "imp pt", 2),
            ("imp pt", "imp fl oz", 20),
        ],
    },
    {"name": "velocity", "dimension": "LT-1", "units": [
        {"name": "knot", "ascii_symbol": "kn", "expansion_symbol": "nmi*h-1",
         "systems": [System.NAUTICAL]},
    ], "conversions": []},
    {"name": "acceleration", "dimension": "LT-2", "units": [], "conversions": []},
    {"name": "density", "dimension": "ML-3", "units": [], "conversions": []},
    {
        "name": "force",
        "dimension": "MLT-2",
        "units": [
            {"name": "newton", "ascii_symbol": "N", "prefix_group": _METRIC,
             "expansion_symbol": "kg*m*s-2", "systems": [System.SI]},
            {"name": "pound force", "ascii_symbol": "lbf", "systems": [System.IMPERIAL, System.US]},
        ],
        "conversions": [
            ("lbf", "N", 4.4482216152605),
        ],
    },
    {
        "name": "energy",
        "dimension": "ML2T-2",
        "units": [
            {"name": "joule", "ascii_symbol": "J", "prefix_group": _METRIC,
             "expansion_symbol": "kg*m2*s-2", "systems": [System.SI]},
            {"name": "electronvolt", "ascii_symbol": "eV", "prefix_group": _METRIC,
             "systems": [System.SCIENTIFIC]},
            {"name": "calorie", "ascii_symbol": "cal", "prefix_group": _METRIC,
             "systems": [System.COMMON]},
        ],
        "conversions": [
            ("eV", "J", 1.602176634e-19),
            ("cal", "J", 4.184),
        ],
    },
    {
        "name": "pressure",
        "dimension": "ML-1T-2",
        "units": [
            {"name": "pascal", "ascii_symbol": "Pa", "prefix_group": _METRIC,
             "expansion_symbol": "kg*m-1*s-2", "systems": [System.SI]},
            {"name": "atmosphere", "ascii_symbol": "atm", "systems": [System.SCIENTIFIC]},
            {"name": "millimetre of mercury", "ascii_symbol": "mmHg", "systems": [System.SCIENTIFIC]},
            {"name": "inch of mercury", "ascii_symbol": "inHg", "systems": [System.US]},
        ],
        "conversions": [
            ("mmHg", "Pa", 133.322387415),
            ("atm", "Pa", 101325),
            ("inHg", "mmHg", 25.4),
        ],
    },
    {"name": "power", "dimension": "ML2T-3", "units": [
        {"name": "watt", "ascii_symbol": "W", "prefix_group": _METRIC,
         "expansion_symbol": "kg*m2*s-3", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "frequency", "dimension": "T-1", "units": [
        {"name": "hertz", "ascii_symbol": "Hz", "prefix_group": _METRIC,
         "expansion_symbol": "s-1", "systems": [System.SI]},
        {"name": "becquerel", "ascii_symbol": "Bq", "prefix_group": _METRIC,
         "expansion_symbol": "s-1", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "electric charge", "dimension": "TI", "units": [
        {"name": "coulomb", "ascii_symbol": "C", "prefix_group": _METRIC,
         "expansion_symbol": "s*A", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "voltage", "dimension": "ML2T-3I-1", "units": [
        {"name": "volt", "ascii_symbol": "V", "prefix_group": _METRIC,
         "expansion_symbol": "kg*m2*s-3*A-1", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "resistance", "dimension": "ML2T-3I-2", "units": [
        {"name": "ohm", "ascii_symbol": "ohm", "unicode_symbol": "Ω", "prefix_group": _METRIC,
         "systems": [System.SI]},
    ], "conversions": [
        ("ohm", "kg*m2*s-3*A-2", 1),
    ]},
    {"name": "conductance", "dimension": "M-1L-2T3I2", "units": [
        {"name": "siemens", "ascii_symbol": "S", "prefix_group": _METRIC,
         "expansion_symbol": "kg-1*m-2*s3*A2", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "capacitance", "dimension": "M-1L-2T4I2", "units": [
        {"name": "farad", "ascii_symbol": "F", "prefix_group": _METRIC,
         "expansion_symbol": "kg-1*m-2*s4*A2", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "inductance", "dimension": "ML2T-2I-2", "units": [
        {"name": "henry", "ascii_symbol": "H", "prefix_group": _METRIC,
         "expansion_symbol": "kg*m2*s-2*A-2", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "magnetic flux", "dimension": "ML2T-2I-1", "units": [
        {"name": "weber", "ascii_symbol": "Wb", "prefix_group": _METRIC, "systems": [System.SI]},
    ], "conversions": [
        ("Wb", "kg*m2*s-2*A-1", 1),
    ]},
    {"name": "magnetic flux density", "dimension": "MT-2I-1", "units": [
        {"name": "tesla", "ascii_symbol": "T", "prefix_group": _METRIC,
         "expansion_symbol": "kg*s-2*A-1", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "solid angle", "dimension": "A2", "units": [
        {"name": "steradian", "ascii_symbol": "sr", "prefix_group": PrefixGroup.SMALL_ENGINEERING,
         "expansion_symbol": "rad2", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "luminous flux", "dimension": "A2J", "units": [
        {"name": "lumen", "ascii_symbol": "lm", "prefix_group": _METRIC,
         "expansion_symbol": "cd*rad2", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "illuminance", "dimension": "L-2A2J", "units": [
        {"name": "lux", "ascii_symbol": "lx", "prefix_group": _METRIC,
         "expansion_symbol": "cd*rad2*m-2", "systems": [System.SI]},
    ], "conversions": []},
    {"name": "radiation dose", "dimension": "L2T-2", "units": [
        {"name": "gray", "ascii_symbol": "Gy", "prefix_group": _METRIC, "systems": [System.SI]},
        {"name": "sievert", "ascii_symbol": "Sv", "prefix_group": _METRIC, "systems": [System.SI]},
    ], "conversions": [
        ("Gy", "m2*s-2", 1),
        ("Sv", "m2*s-2", 1),
    ]},
    {"name": "catalytic activity", "dimension": "T-1N", "units": [
        {"name": "katal", "ascii_symbol": "kat", "prefix_group": _METRIC,
         "expansion_symbol": "mol*s-1", "systems": [System.SI]},
    ], "conversions": []},
]
