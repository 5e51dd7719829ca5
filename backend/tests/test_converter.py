"""Tests for graph-based conversion between units of one dimension."""

import pytest

from unitgraph.core.context import UnitContext, convert, default_context
from unitgraph.core.conversion.converter import Converter
from unitgraph.core.conversion.value import ConversionValue
from unitgraph.core.errors import DomainError, FormatError, NoConversionPathError
from unitgraph.core.registry import conversions as conversions_module
from unitgraph.core.units.unit import System, Unit
from unitgraph.data.quantity_types import QUANTITY_TYPES


def _currency(context, *symbols):
    for symbol in symbols:
        context.add_unit(Unit(name=symbol.lower(), ascii_symbol=symbol, dimension="C"))


class TestBaseQuantities:
    def test_metre_to_foot(self, context):
        assert context.converter("L").convert(1.0, "m", "ft") == pytest.approx(3.28084, rel=1e-6)

    def test_prefix_to_prefix(self, context):
        assert context.convert(1, "km", "mm") == pytest.approx(1e6)

    def test_identity(self, context):
        conversion = context.get_conversion("ft", "ft")
        assert conversion.value == 1
        assert conversion.factor.is_exact

    def test_reverse_edge(self, context):
        assert context.convert(1, "m", "yd") == pytest.approx(1 / 0.9144)

    def test_two_hop_chain(self, context):
        conversion = context.get_conversion("h", "s")
        assert conversion.value == 3600
        assert conversion.factor.is_exact

    def test_multi_hop(self, context):
        assert context.convert(1, "le", "m") == pytest.approx(4828.032)

    def test_mass(self, context):
        assert context.convert(1, "kg", "lb") == pytest.approx(2.20462262, rel=1e-8)
        assert context.convert(1, "st", "kg") == pytest.approx(6.35029318)

    def test_temperature_differences(self, context):
        assert context.convert(1, "K", "degF") == pytest.approx(1.8)
        assert context.convert(1, "°C", "K") == pytest.approx(1)

    def test_angle(self, context):
        assert context.convert(180, "deg", "rad") == pytest.approx(3.14159265358979)
        assert context.convert(1, "deg", "arcsec") == pytest.approx(3600)

    def test_data_binary_prefix(self, context):
        assert context.convert(1, "KiB", "b") == 8192

    def test_dimensionless(self, context):
        assert context.convert(50, "%", "") == pytest.approx(0.5)
        assert context.convert(1, "ft/m", "") == pytest.approx(0.3048)


class TestDerivedQuantities:
    def test_force(self, context):
        assert context.convert(1, "N", "lbf") == pytest.approx(0.224808943, rel=1e-8)

    def test_newton_to_base_units(self, context):
        assert context.convert(1, "kN", "kg*m/s2") == pytest.approx(1000)

    def test_momentum_without_quantity_type(self, context):
        assert context.convert(1, "N*s", "kg*m/s") == pytest.approx(1)

    def test_energy(self, context):
        assert context.convert(1, "J", "kg*m2/s2") == pytest.approx(1)
        assert context.convert(1, "kW*h", "MJ") == pytest.approx(3.6)
        assert context.convert(1, "kcal", "kJ") == pytest.approx(4.184)

    def test_area_through_base_units(self, context):
        assert context.convert(1, "m2", "ft2") == pytest.approx(10.7639104)
        assert context.convert(1, "ha", "ac") == pytest.approx(2.4710538)

    def test_volume_bridges(self, context):
        assert context.convert(1, "m3", "L") == pytest.approx(1000)
        assert context.convert(1, "US gal", "L") == pytest.approx(3.785411784)
        assert context.convert(1, "imp gal", "US gal") == pytest.approx(1.20094993)

    def test_multi_word_volume_units(self, context):
        assert context.convert(1, "imp gal", "L") == pytest.approx(4.54609)
        assert context.convert(1, "US fl oz", "mL") == pytest.approx(29.5735295625)
        assert context.convert(1, "imp pt", "imp fl oz") == pytest.approx(20)

    def test_velocity(self, context):
        assert context.convert(1, "m/s", "km/h") == pytest.approx(3.6)
        assert context.convert(1, "kn", "km/h") == pytest.approx(1.852)

    def test_pressure(self, context):
        assert context.convert(1, "atm", "kPa") == pytest.approx(101.325)
        assert context.convert(1, "inHg", "Pa") == pytest.approx(3386.38864)

    def test_frequency(self, context):
        assert context.convert(1, "kHz", "s-1") == pytest.approx(1000)


class TestValidation:
    def test_wrong_quantity_type(self, context):
        with pytest.raises(DomainError, match="The unit 's' is invalid for length quantities."):
            context.converter("L").validate_unit("s")

    def test_dimension_without_quantity_type(self, context):
        with pytest.raises(DomainError, match="does not match the converter dimension 'MLT-1'"):
            context.converter("MLT-1").validate_unit("m")

    def test_mismatched_dimensions(self, context):
        with pytest.raises(DomainError):
            context.convert(1, "m", "s")

    def test_unknown_unit(self, context):
        with pytest.raises(DomainError, match="Unknown unit"):
            context.convert(1, "m", "furlongs")


class TestGraph:
    def test_divergent(self, context):
        _currency(context, "USD", "EUR")
        context.add_conversion("XAU", "USD", 2000)
        context.add_conversion("XAU", "EUR", 1000)
        assert context.get_conversion_factor("USD", "EUR") == 0.5

    def test_opposite_keeps_exact_factor(self, context):
        _currency(context, "USD", "EUR", "GBP")
        context.add_conversion("EUR", "USD", 2)
        context.add_conversion("GBP", "EUR", ConversionValue(0.5, 0))
        conversion = context.get_conversion("USD", "GBP")
        assert conversion.value == 1.0
        assert conversion.relative_error == 0

    def test_exact_candidate_preferred(self, context):
        _currency(context, "USD", "EUR", "GBP", "CHF")
        context.add_conversion("USD", "EUR", 0.9)
        context.add_conversion("EUR", "CHF", 1.1)
        context.add_conversion("USD", "GBP", 2)
        context.add_conversion("GBP", "CHF", 4)
        conversion = context.get_conversion("USD", "CHF")
        assert conversion.value == 8
        assert conversion.factor.is_exact

    def test_errors_accumulate(self, context):
        _currency(context, "USD", "EUR")
        context.add_conversion("XAU", "USD", ConversionValue(2000, 0.01))
        context.add_conversion("XAU", "EUR", ConversionValue(1000, 0.02))
        assert context.get_conversion("USD", "EUR").relative_error == pytest.approx(0.03)

    def test_no_path(self, context):
        context.add_unit(Unit(name="wu", ascii_symbol="Wu", dimension="L"))
        assert context.get_conversion("m", "Wu") is None
        with pytest.raises(NoConversionPathError, match="between 'm' and 'Wu'"):
            context.convert(1, "m", "Wu")

    def test_nodes(self, context):
        nodes = context.converter("L").nodes
        assert nodes[0] == "m"
        assert "le" in nodes

    def test_prefixed_edge_is_stored_unprefixed(self, context):
        edge = context.conversions.get("L", "in", "m")
        assert edge.value == pytest.approx(0.0254)

    def test_edge_dimension_mismatch(self, context):
        with pytest.raises(DomainError, match="Cannot convert between"):
            context.add_conversion("m", "s", 2)

    def test_edge_factor_must_be_positive(self, context):
        with pytest.raises(DomainError, match="must be positive"):
            context.add_conversion("ft", "m", -1)

    def test_remove_conversion(self, context):
        removed = context.remove_conversion("ft", "m")
        assert removed.value == pytest.approx(0.3048)
        assert context.conversions.get("L", "ft", "m") is None
        # Still reachable through inches.
        assert context.convert(1, "ft", "m") == pytest.approx(0.3048)

    def test_restricted_systems(self):
        context = UnitContext.from_system_names(["SI"])
        assert context.convert(1, "km", "m") == 1000
        with pytest.raises(DomainError, match="Unknown unit 'ft'"):
            context.convert(1, "m", "ft")


class TestRegistryChanges:
    def test_malformed_row_is_raised_on_every_access(self, context, monkeypatch):
        table = [{"name": "length", "dimension": "L", "units": [], "conversions": [
            ("ft", "m", 0.3048),
            ("m//s", "m", 1),
        ]}]
        monkeypatch.setattr(conversions_module, "QUANTITY_TYPES", table)
        for _ in range(2):
            with pytest.raises(FormatError):
                context.conversions.get("L", "ft", "m")

        table[0]["conversions"].pop()
        assert context.conversions.get("L", "ft", "m").value == pytest.approx(0.3048)

    def test_row_with_unknown_unit_is_skipped(self, context, monkeypatch):
        table = [{"name": "length", "dimension": "L", "units": [], "conversions": [
            ("furlong", "m", 201.168),
            ("ft", "m", 0.3048),
        ]}]
        monkeypatch.setattr(conversions_module, "QUANTITY_TYPES", table)
        edges = context.conversions.get_by_dimension("L")
        assert [(c.src, c.dest) for c in edges] == [("ft", "m")]

    def test_restricted_context_skips_other_systems(self):
        context = UnitContext.from_system_names(["SI"])
        assert context.conversions.get("L", "ft", "m") is None
        assert context.conversions.get("T", "min", "s") is None
        assert [c.src for c in context.conversions.get_by_dimension("ML2T-3I-2")] == ["ohm"]

    def test_removed_edge_stays_removed_after_reload(self, context):
        context.remove_conversion("ft", "m")
        context.add_unit(Unit(name="wu", ascii_symbol="Wu", dimension="L"))
        assert context.conversions.get("L", "ft", "m") is None

    def test_added_edge_survives_reload(self, context):
        _currency(context, "USD")
        context.add_conversion("XAU", "USD", 2000)
        _currency(context, "EUR")
        assert context.get_conversion_factor("XAU", "USD") == 2000

    def test_readding_removed_edge(self, context):
        context.remove_conversion("ft", "m")
        context.add_conversion("ft", "m", 0.3048)
        context.load_system(System.SI)
        assert context.conversions.get("L", "ft", "m").value == pytest.approx(0.3048)

    def test_remove_unit_drops_its_edges(self, context):
        context.add_unit(Unit(name="wu", ascii_symbol="Wu", dimension="L"))
        context.add_conversion("Wu", "m", 2)
        assert context.convert(1, "Wu", "ft") == pytest.approx(2 / 0.3048)

        context.remove_unit("Wu")
        assert "Wu" not in context.converter("L").nodes
        assert context.conversions.get("L", "Wu", "m") is None

    def test_removed_unit_comes_back_with_its_edges(self, context):
        wu = Unit(name="wu", ascii_symbol="Wu", dimension="L")
        context.add_unit(wu)
        context.add_conversion("Wu", "m", 2)
        context.remove_unit("Wu")
        context.add_unit(wu)
        assert context.get_conversion_factor("Wu", "m") == 2

    def test_remove_tabled_unit(self, context):
        context.remove_unit("yd")
        assert "yd" not in context.converter("L").nodes
        assert context.conversions.get("L", "mi", "yd") is None
        # Miles only reached metres through yards.
        assert context.get_conversion("mi", "m") is None


class TestCaching:
    def test_converter_is_shared(self, context):
        assert context.converter("L") is context.converter("L")
        assert context.get_by_dimension("T-2LM") is context.converter("MLT-2")

    def test_invalid_dimension(self, context):
        with pytest.raises(DomainError, match="Invalid dimension code"):
            context.converter("Q2")

    def test_results_are_memoized(self, context):
        converter = context.converter("L")
        assert converter.get_conversion("m", "ft") is converter.get_conversion("m", "ft")

    def test_mutation_invalidates(self, context):
        _currency(context, "USD")
        converter = context.converter("C")
        assert converter.get_conversion("XAU", "USD") is None
        context.add_conversion("XAU", "USD", 2000)
        assert context.converter("C") is not converter
        assert context.get_conversion_factor("XAU", "USD") == 2000

    def test_clear(self, context):
        converter = context.converter("L")
        context.clear()
        assert context.converter("L") is not converter


class TestDefaultContext:
    def test_module_convert(self):
        assert convert(2, "h", "min") == 120

    def test_converter_classmethods(self):
        converter = Converter.get_by_dimension("L")
        assert converter is default_context().converter("L")
        Converter.clear()
        assert Converter.get_by_dimension("L") is not converter

    def test_default_loads_every_system(self):
        assert default_context().units.loaded_systems == frozenset(System)


RECIPROCAL_PAIRS = [
    ("m", "ft"),
    ("kg", "lb"),
    ("h", "s"),
    ("mo", "w"),
    ("N", "lbf"),
    ("US gal", "L"),
    ("imp fl oz", "US fl oz"),
    ("atm", "inHg"),
    ("eV", "kcal"),
    ("KiB", "kb"),
    ("grad", "arcsec"),
    ("degF", "°C"),
    ("ppb", "%"),
    ("km/h", "kn"),
    ("J/(mol*K)", "cal/(mol*degF)"),
]


class TestProperties:
    @pytest.mark.parametrize("a,b", RECIPROCAL_PAIRS)
    def test_factors_are_reciprocal(self, context, a, b):
        forward = context.get_conversion_factor(a, b)
        backward = context.get_conversion_factor(b, a)
        assert forward * backward == pytest.approx(1)

    @pytest.mark.parametrize("a,b", [("m", "Wu"), ("Wu", "ft"), ("Wu2", "m2")])
    def test_no_path_factor_is_none(self, context, a, b):
        context.add_unit(Unit(name="wu", ascii_symbol="Wu", dimension="L"))
        assert context.get_conversion_factor(a, b) is None

    def test_prefix_only_conversion(self, context):
        assert context.get_conversion_factor("km", "mm") == pytest.approx(1e6, rel=1e-10)

    def test_square_of_linear_factor(self, context):
        linear = context.get_conversion_factor("m", "ft")
        assert context.get_conversion_factor("m2", "ft2") == pytest.approx(linear ** 2, rel=1e-12)

    @pytest.mark.parametrize("quantity_type", QUANTITY_TYPES, ids=lambda q: q["name"])
    def test_every_unit_of_a_quantity_type(self, context, quantity_type):
        units = context.units.get_by_dimension(quantity_type["dimension"])
        for unit in units:
            assert context.parse_unit(unit.ascii_symbol).ascii_symbol == unit.ascii_symbol
            assert context.parse_unit(unit.unicode_symbol).ascii_symbol == unit.ascii_symbol

        for a in units:
            for b in units:
                forward = context.get_conversion_factor(a.ascii_symbol, b.ascii_symbol)
                backward = context.get_conversion_factor(b.ascii_symbol, a.ascii_symbol)
                assert forward is not None, f"no conversion from {a} to {b}"
                assert forward * backward == pytest.approx(1)
