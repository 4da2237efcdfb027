"""Tests for exact decimal seconds."""

from __future__ import annotations

from decimal import Decimal

import pytest

from leapstamp._internal import seconds as _seconds
from leapstamp.errors import ParseError, ValidationError


class TestToSeconds:
    """Tests for to_seconds() coercion."""

    def test_decimal_passes_through(self) -> None:
        """A Decimal keeps its value and exponent."""
        result = _seconds.to_seconds(Decimal("5.10"))
        assert str(result) == "5.10"

    def test_int(self) -> None:
        """Integers become Decimals."""
        assert _seconds.to_seconds(7) == Decimal(7)

    def test_string(self) -> None:
        """Decimal strings are parsed exactly."""
        assert _seconds.to_seconds("59.125") == Decimal("59.125")

    def test_float_rejected(self) -> None:
        """Binary floats are never accepted."""
        with pytest.raises(TypeError, match="got float"):
            _seconds.to_seconds(1.5)  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        """bool is rejected even though it is an int."""
        with pytest.raises(TypeError, match="got bool"):
            _seconds.to_seconds(True)

    def test_bad_string(self) -> None:
        """A string that is not a number raises ParseError."""
        with pytest.raises(ParseError, match="not a decimal number"):
            _seconds.to_seconds("twelve")

    @pytest.mark.parametrize("value", ["NaN", "Infinity", Decimal("-Infinity")])
    def test_non_finite_rejected(self, value) -> None:
        """NaN and infinities are rejected."""
        with pytest.raises(ValidationError, match="must be finite"):
            _seconds.to_seconds(value)

    def test_negative_zero_normalized(self) -> None:
        """-0 becomes +0."""
        assert not _seconds.to_seconds("-0.0").is_signed()

    def test_field_name_in_message(self) -> None:
        """The caller's field name appears in errors."""
        with pytest.raises(TypeError, match="second must be"):
            _seconds.to_seconds(None, "second")  # type: ignore[arg-type]


class TestExactArithmetic:
    """Arithmetic is exact and keeps exponents."""

    def test_add_preserves_exponent(self) -> None:
        """5.10 + 60 stays at two fractional digits."""
        assert str(_seconds.add(Decimal("5.10"), 60)) == "65.10"

    def test_subtract(self) -> None:
        """Subtraction is exact."""
        assert _seconds.subtract(Decimal("86400.25"), 1) == Decimal("86399.25")

    def test_precision_beyond_default_context(self) -> None:
        """Results wider than 28 digits are not rounded."""
        fraction = "1" * 40
        result = _seconds.add(Decimal("0." + fraction), 86400 * 10**6)
        assert str(result) == "86400000000." + fraction


class TestHelpers:
    """Tests for quantum and format_seconds."""

    def test_quantum(self) -> None:
        """The quantum is one unit in the last fractional place."""
        assert _seconds.quantum(Decimal("86400.250")) == Decimal("0.001")
        assert _seconds.quantum(Decimal("86400")) == Decimal(1)

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("5.10"), "05.10"),
            (Decimal("0"), "00"),
            (Decimal("60.5"), "60.5"),
            (Decimal("59.000000001"), "59.000000001"),
        ],
    )
    def test_format_seconds(self, value: Decimal, expected: str) -> None:
        """Two integer digits, exact fraction."""
        assert _seconds.format_seconds(value) == expected
