"""Tests for ConversionValue error propagation and Conversion composition."""

import math

import pytest

from unitgraph.core.conversion.conversion import Conversion
from unitgraph.core.conversion.value import ConversionValue, estimate_relative_error
from unitgraph.core.errors import DomainError


class TestConversionValue:
    def test_integers_are_exact(self):
        assert ConversionValue(1000).is_exact
        assert ConversionValue(2.0).relative_error == 0
        assert ConversionValue(1000).significant_digits() is None

    def test_fraction_gets_half_ulp(self):
        value = ConversionValue(0.3048)
        assert value.relative_error == pytest.approx(math.ulp(0.3048) / 2 / 0.3048)
        assert value.significant_digits() >= 15

    def test_explicit_error(self):
        value = ConversionValue(0.5, 0.01)
        assert value.relative_error == 0.01
        assert value.absolute_error == pytest.approx(0.005)
        assert value.significant_digits() == 2

    def test_negative_error_rejected(self):
        with pytest.raises(ValueError):
            ConversionValue(1.5, -0.1)

    def test_multiplication_adds_errors(self):
        result = ConversionValue(2, 0.01) * ConversionValue(3, 0.02)
        assert result.value == 6
        assert result.relative_error == pytest.approx(0.03)

    def test_division_adds_errors(self):
        result = ConversionValue(6, 0.01) / ConversionValue(3, 0.02)
        assert result.value == 2
        assert result.relative_error == pytest.approx(0.03)

    def test_plain_numbers_are_exact(self):
        value = ConversionValue(0.5, 0.01)
        assert (value * 3).relative_error == 0.01
        assert (3 * value).value == 1.5
        assert (1 / value).value == 2
        assert (1 / value).relative_error == 0.01

    def test_inverse_keeps_error(self):
        value = ConversionValue(4, 0.01).inv()
        assert value.value == 0.25
        assert value.relative_error == 0.01

    def test_power_scales_error(self):
        value = ConversionValue(2, 0.01) ** -3
        assert value.value == 0.125
        assert value.relative_error == pytest.approx(0.03)
        assert (ConversionValue(2, 0.01) ** 0).is_exact

    def test_zero_division(self):
        with pytest.raises(ZeroDivisionError):
            ConversionValue(1) / 0
        with pytest.raises(ZeroDivisionError):
            ConversionValue(0).inv()

    def test_estimate_relative_error(self):
        assert estimate_relative_error(0) == 0
        assert estimate_relative_error(float("inf")) == 0
        assert estimate_relative_error(-12.0) == 0
        assert estimate_relative_error(0.1) > 0

    def test_str(self):
        assert str(ConversionValue(2, 0.01)) == "2 ± 2.00e-02"


class TestConversionCombine:
    def _edge(self, src, dest, factor, error=0.0):
        return Conversion("L", src, dest, ConversionValue(factor, error))

    def test_sequential(self):
        result = self._edge("A", "M", 2).combine_sequential(self._edge("M", "B", 3))
        assert (result.src, result.dest, result.value) == ("A", "B", 6)

    def test_divergent(self):
        # M->A = 2, M->B = 4, so 1 A = 2 B.
        result = self._edge("M", "A", 2).combine_divergent(self._edge("M", "B", 4))
        assert (result.src, result.dest, result.value) == ("A", "B", 2)

    def test_convergent(self):
        # A->M = 6, B->M = 3, so 1 A = 2 B.
        result = self._edge("A", "M", 6).combine_convergent(self._edge("B", "M", 3))
        assert (result.src, result.dest, result.value) == ("A", "B", 2)

    def test_opposite(self):
        # M->A = 2, B->M = 0.5, so 1 A = 1 B.
        result = self._edge("M", "A", 2).combine_opposite(self._edge("B", "M", 0.5))
        assert (result.src, result.dest, result.value) == ("A", "B", 1)
        assert result.factor.is_exact

    def test_errors_propagate(self):
        result = self._edge("A", "M", 2, 0.01).combine_sequential(self._edge("M", "B", 3, 0.02))
        assert result.relative_error == pytest.approx(0.03)

    def test_unshared_unit(self):
        with pytest.raises(DomainError, match="do not share a unit"):
            self._edge("A", "M", 2).combine_sequential(self._edge("N", "B", 3))

    def test_invert(self):
        edge = self._edge("ft", "m", 0.3048, 0.001).invert()
        assert (edge.src, edge.dest) == ("m", "ft")
        assert edge.value == pytest.approx(3.280839895)
        assert edge.relative_error == 0.001

    def test_str(self):
        assert str(self._edge("ft", "in", 12)) == "1 ft = 12 ± 0.00e+00 in"
