"""Tests for formatting/simple.py and the parameter helpers in formatting/base.py."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from icuformatengine.formatting import DefaultMessageFormatter, IcuMessageFormatter
from icuformatengine.formatting.base import (
    MISSING,
    MessageFormatter,
    coerce_count,
    is_parameter_value,
    lookup_parameter,
    stringify,
)


class TestDefaultMessageFormatter:
    """Plain placeholder substitution."""

    def test_named_and_positional(self) -> None:
        """Both placeholder kinds are replaced."""
        formatter = DefaultMessageFormatter()
        result = formatter.format("{0} says {greeting}", {0: "Ann", "greeting": "hi"})
        assert result == "Ann says hi"

    def test_missing_left_verbatim(self) -> None:
        """Unknown placeholders stay."""
        assert DefaultMessageFormatter().format("Hi {name}", {"other": 1}) == "Hi {name}"

    def test_no_parameters_returns_message(self) -> None:
        """Empty or absent parameters short-circuit."""
        formatter = DefaultMessageFormatter()
        assert formatter.format("Hi {name}") == "Hi {name}"
        assert formatter.format("Hi {name}", {}) == "Hi {name}"

    def test_names_not_trimmed(self) -> None:
        """Names match exactly as written."""
        assert DefaultMessageFormatter().format("Hi { name }", {"name": "A"}) == "Hi { name }"

    def test_none_and_bool(self) -> None:
        """None is empty; booleans are lowercase words."""
        result = DefaultMessageFormatter().format("[{a}|{b}]", {"a": None, "b": True})
        assert result == "[|true]"

    def test_clauses_untouched(self) -> None:
        """Plural clauses are not evaluated."""
        message = "{n, plural, other{#}}"
        assert DefaultMessageFormatter().format(message, {"n": 1}) == message

    def test_locale_key_reserved(self) -> None:
        """The locale key is never interpolated."""
        formatter = DefaultMessageFormatter(locale_key="lang")
        assert formatter.format("{lang}", {"lang": "en"}) == "{lang}"

    def test_satisfies_protocol(self) -> None:
        """Both formatters are interchangeable MessageFormatters."""
        formatters: list[MessageFormatter] = [DefaultMessageFormatter(), IcuMessageFormatter()]
        for formatter in formatters:
            assert formatter.format("Hi {x}", {"x": 1}) == "Hi 1"

    @given(text=st.text(), value=st.text())
    def test_text_without_placeholder_unchanged(self, text: str, value: str) -> None:
        """Braceless text survives any parameters."""
        text = text.replace("{", "").replace("}", "")
        assert DefaultMessageFormatter().format(text, {"x": value}) == text


class TestLookupParameter:
    """lookup_parameter() name resolution."""

    def test_string_key(self) -> None:
        """Direct hit."""
        assert lookup_parameter({"a": 1}, "a") == 1

    def test_digit_name_matches_int_key(self) -> None:
        """'0' resolves integer key 0."""
        assert lookup_parameter({0: "zero"}, "0") == "zero"

    def test_string_digit_key_preferred(self) -> None:
        """A string key wins over the integer key."""
        assert lookup_parameter({"0": "s", 0: "i"}, "0") == "s"

    @pytest.mark.parametrize(
        ("params", "name", "reserved"),
        [
            ({"a": 1}, "b", None),
            ({"": 1}, "", None),
            ({"_locale": "en"}, "_locale", "_locale"),
            ({"a": object()}, "a", None),
            ({"a": [1]}, "a", None),
        ],
    )
    def test_missing(self, params: dict, name: str, reserved: str | None) -> None:
        """Absent, empty, reserved and non-scalar names are MISSING."""
        assert lookup_parameter(params, name, reserved=reserved) is MISSING

    def test_none_is_a_value(self) -> None:
        """None is present, not missing."""
        assert lookup_parameter({"a": None}, "a") is None

    def test_missing_repr(self) -> None:
        """Sentinel repr."""
        assert repr(MISSING) == "MISSING"


class TestScalarHelpers:
    """stringify(), is_parameter_value(), coerce_count()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, ""), (True, "true"), (False, "false"), (3, "3"), (2.0, "2.0"),
         (Decimal("1.50"), "1.50"), ("x", "x")],
    )
    def test_stringify(self, value: object, expected: str) -> None:
        """Scalar rendering."""
        assert stringify(value) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [None, "s", 1, 1.5, Decimal(1), True])
    def test_scalars_accepted(self, value: object) -> None:
        """Scalars are parameter values."""
        assert is_parameter_value(value)

    @pytest.mark.parametrize("value", [[], {}, object(), b"bytes"])
    def test_non_scalars_rejected(self, value: object) -> None:
        """Containers and arbitrary objects are not."""
        assert not is_parameter_value(value)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, 1),
            (False, 0),
            (7, 7),
            (-3, -3),
            (3.9, 3),
            (-3.9, -3),
            (Decimal("21.5"), 21),
            ("42", 42),
            (" 3.7 ", 3),
            ("1e2", 100),
        ],
    )
    def test_coerce_numeric(self, value: object, expected: int) -> None:
        """Numeric values truncate toward zero."""
        assert coerce_count(value) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value", ["abc", "", None, float("nan"), float("inf"), Decimal("NaN"), "Infinity"]
    )
    def test_coerce_non_numeric_is_zero(
        self, value: object, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Non-numeric counts are 0 and logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="icuformatengine.formatting.base"):
            assert coerce_count(value) == 0  # type: ignore[arg-type]
        assert "treated as 0" in caplog.text

    @pytest.mark.parametrize(
        "value", [10**18, -(10**18), 1e18, Decimal("1e18"), "1e5000", "9" * 5000, "1e999999999"]
    )
    def test_coerce_out_of_range_is_zero(
        self, value: object, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Magnitudes of 10**18 and above are 0 and logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="icuformatengine.formatting.base"):
            assert coerce_count(value) == 0  # type: ignore[arg-type]
        assert "treated as 0" in caplog.text

    def test_unprintable_int_rejected(self) -> None:
        """Ints beyond the int-to-str digit limit are not parameter values."""
        assert is_parameter_value(10**100)
        assert not is_parameter_value(10**5000)

    @given(n=st.integers(min_value=-(10**18) + 1, max_value=10**18 - 1))
    def test_coerce_integer_identity(self, n: int) -> None:
        """Integers pass through, also as strings."""
        assert coerce_count(n) == n
        assert coerce_count(str(n)) == n
