"""Tests for builder/ - programmatic ICU template construction.

Round-trip tests feed built templates back through IcuMessageFormatter.
"""

from __future__ import annotations

from datetime import date

import pytest
from hypothesis import given
from hypothesis import strategies as st

from icuformatengine.builder import (
    IcuMessage,
    IcuMessageBuilder,
    NestedMessageBuilder,
    PluralBuilder,
    SelectBuilder,
)
from icuformatengine.diagnostics import (
    DepthLimitExceededError,
    DiagnosticCode,
    InvalidBuilderCallbackError,
)
from icuformatengine.enums import PluralCategory
from icuformatengine.formatting import IcuMessageFormatter
from icuformatengine.plural import CldrPluralRuleProvider, PluralRule, get_default_provider

CASE_TEXT = st.text(alphabet="abc xyz#.!", max_size=20)

RU_CATEGORIES = [PluralCategory.ONE, PluralCategory.FEW, PluralCategory.MANY]


class TestPluralBuilder:
    """PluralBuilder rendering."""

    def test_build(self) -> None:
        """Cases render in insertion order."""
        template = (
            PluralBuilder("count", "en").when("one", "# item").otherwise("# items").build()
        )
        assert template == "{count, plural, one{# item} other{# items}}"

    def test_enum_and_exact_labels(self) -> None:
        """Categories may be enums; exact labels are plain strings."""
        template = (
            PluralBuilder("n", "en")
            .when("=0", "none")
            .when(PluralCategory.ONE, "one")
            .otherwise("many")
            .build()
        )
        assert template == "{n, plural, =0{none} one{one} other{many}}"

    def test_when_replaces_existing(self) -> None:
        """Setting a category twice keeps the last text."""
        builder = PluralBuilder("n", "en").when("one", "a").when("one", "b")
        assert dict(builder.cases) == {"one": "b"}

    def test_cases_read_only(self) -> None:
        """cases is a read-only view."""
        builder = PluralBuilder("n", "en").otherwise("x")
        with pytest.raises(TypeError):
            builder.cases["one"] = "y"  # type: ignore[index]

    def test_repr_and_variable(self) -> None:
        """Introspection helpers."""
        builder = PluralBuilder("n", "en").otherwise("x")
        assert builder.variable == "n"
        assert repr(builder) == "PluralBuilder('n', 'en', cases={'other': 'x'})"

    def test_build_repeatable(self) -> None:
        """build() does not consume the builder."""
        builder = PluralBuilder("n", "en").otherwise("x")
        assert builder.build() == builder.build()

    def test_round_trip_english(self) -> None:
        """Built template formats like a hand-written one."""
        template = PluralBuilder("count", "en").when("one", "# item").otherwise("# items").build()
        formatter = IcuMessageFormatter()
        assert formatter.format(template, {"count": 1}) == "1 item"
        assert formatter.format(template, {"count": 5}) == "5 items"

    @given(
        texts=st.fixed_dictionaries({
            PluralCategory.ONE: CASE_TEXT,
            PluralCategory.FEW: CASE_TEXT,
            PluralCategory.MANY: CASE_TEXT,
            PluralCategory.OTHER: CASE_TEXT,
        }),
        count=st.integers(min_value=0, max_value=10**6),
    )
    def test_round_trip_russian(self, texts: dict[PluralCategory, str], count: int) -> None:
        """Each category's text comes back with # replaced by the count."""
        builder = PluralBuilder("n", "ru")
        for category, text in texts.items():
            builder.when(category, text)

        result = IcuMessageFormatter().format(builder.build(), {"n": count, "_locale": "ru"})

        category = PluralRule.russian().get_category(count)
        assert result == texts[category].replace("#", str(count))


class TestWithInflections:
    """PluralBuilder.with_inflections() category discovery."""

    def test_russian(self) -> None:
        """Russian probes discover one/few/many; other copies the first case."""
        template = PluralBuilder("n", "ru").with_inflections("# товар", {"few": "а"}).build()
        assert template == "{n, plural, one{1 товар} few{2 товара} many{5 товар} other{1 товар}}"

    def test_english(self) -> None:
        """English probes discover one and other."""
        builder = PluralBuilder("n", "en").with_inflections("# item", {"other": "s"})
        assert dict(builder.cases) == {"one": "1 item", "other": "0 items"}

    def test_arabic_has_all_categories(self) -> None:
        """Arabic needs every category."""
        builder = PluralBuilder("n", "ar").with_inflections("#")
        assert set(builder.cases) == {str(c) for c in PluralCategory}

    def test_explicit_cases_kept(self) -> None:
        """Cases set with when() are never replaced."""
        builder = PluralBuilder("n", "en").when("one", "single").with_inflections("# things")
        assert dict(builder.cases) == {"one": "single", "other": "0 things"}

    def test_unknown_locale_fills_other_only(self) -> None:
        """Without a rule, only other is generated (count 0)."""
        builder = PluralBuilder("n", "xx").with_inflections("# x", {"other": "s"})
        assert dict(builder.cases) == {"other": "0 xs"}

    def test_custom_provider(self) -> None:
        """The provider decides which categories exist."""
        provider = CldrPluralRuleProvider({"xx": PluralRule.russian()})
        builder = PluralBuilder("n", "xx", provider).with_inflections("#")
        assert set(builder.cases) == {"one", "few", "many", "other"}

    def test_round_trip(self) -> None:
        """Inflected templates format for every count."""
        template = (
            PluralBuilder("n", "ru")
            .with_inflections("# товар", {"few": "а", "many": "ов"})
            .build()
        )
        formatter = IcuMessageFormatter()
        assert formatter.format(template, {"n": 21, "_locale": "ru"}) == "21 товар"
        assert formatter.format(template, {"n": 3, "_locale": "ru"}) == "3 товара"
        assert formatter.format(template, {"n": 11, "_locale": "ru"}) == "11 товаров"


class TestSelectBuilder:
    """SelectBuilder rendering and callbacks."""

    def test_build(self) -> None:
        """Plain text cases."""
        template = SelectBuilder("g").when("male", "He").otherwise("They").build()
        assert template == "{g, select, male{He} other{They}}"

    def test_callback_returning_string(self) -> None:
        """A callback may return plain text."""
        template = SelectBuilder("g").when("x", lambda nested: "text").build()
        assert template == "{g, select, x{text}}"

    def test_callback_returning_plural(self) -> None:
        """Builders returned by callbacks are built in place."""
        template = (
            SelectBuilder("gender")
            .when(
                "female",
                lambda nested: nested.plural("count", "en")
                .when("one", "She has # item")
                .otherwise("She has # items"),
            )
            .otherwise("They")
            .build()
        )
        assert template == (
            "{gender, select, female{{count, plural, one{She has # item} "
            "other{She has # items}}} other{They}}"
        )
        formatter = IcuMessageFormatter()
        assert formatter.format(template, {"gender": "female", "count": 5}) == "She has 5 items"
        assert formatter.format(template, {"gender": "male", "count": 5}) == "They"

    def test_callback_returning_select(self) -> None:
        """Nested select builders."""
        template = (
            SelectBuilder("a")
            .when("x", lambda nested: nested.select("b").when("y", "XY").otherwise("X?"))
            .build()
        )
        assert template == "{a, select, x{{b, select, y{XY} other{X?}}}}"

    def test_nested_depth(self) -> None:
        """Each callback level increments the shared depth."""
        template = (
            SelectBuilder("a")
            .when(
                "x",
                lambda outer: outer.select("b").when("y", lambda inner: str(inner.depth)),
            )
            .build()
        )
        assert template == "{a, select, x{{b, select, y{2}}}}"

    @pytest.mark.parametrize("result", [42, None, ["list"], object()])
    def test_invalid_callback(self, result: object) -> None:
        """Callbacks must return a string or a builder."""
        with pytest.raises(InvalidBuilderCallbackError) as exc_info:
            SelectBuilder("g").when("x", lambda nested: result)  # type: ignore[arg-type,return-value]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_BUILDER_CALLBACK

    def test_invalid_callback_is_type_error(self) -> None:
        """Callers may catch TypeError."""
        with pytest.raises(TypeError):
            SelectBuilder("g").when("x", lambda nested: 1)  # type: ignore[arg-type,return-value]

    def test_builder_instance_as_case(self) -> None:
        """Builders passed directly are built in place."""
        plural = PluralBuilder("n", "en").when("one", "# item").otherwise("# items")
        inner = SelectBuilder("b").when("y", "XY")
        template = SelectBuilder("a").when("x", plural).when("z", inner).build()
        assert template == (
            "{a, select, x{{n, plural, one{# item} other{# items}}} z{{b, select, y{XY}}}}"
        )

    @pytest.mark.parametrize("text", [42, None, ["list"], object()])
    def test_invalid_case_text(self, text: object) -> None:
        """Non-callable case text raises a diagnostic instead of a bare TypeError."""
        with pytest.raises(InvalidBuilderCallbackError) as exc_info:
            SelectBuilder("g").when("x", text)  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.INVALID_SELECT_CASE
        assert type(text).__name__ in str(exc_info.value)

    def test_runaway_nesting_raises(self) -> None:
        """Unbounded callback recursion hits the depth limit."""

        def recurse(nested: NestedMessageBuilder) -> SelectBuilder:
            return nested.select("v").when("x", recurse)

        with pytest.raises(DepthLimitExceededError):
            SelectBuilder("v").when("x", recurse)

    def test_guard_released_after_error(self) -> None:
        """A failed callback leaves the builder usable."""
        builder = SelectBuilder("g")
        with pytest.raises(InvalidBuilderCallbackError):
            builder.when("x", lambda nested: 1)  # type: ignore[arg-type,return-value]
        builder.when("y", lambda nested: str(nested.depth))
        assert builder.build() == "{g, select, y{1}}"


class TestIcuMessage:
    """IcuMessage facade and IcuMessageBuilder."""

    def test_gender(self) -> None:
        """male/female/other select."""
        assert IcuMessage.gender("gender", "He", "She", "They") == (
            "{gender, select, male{He} female{She} other{They}}"
        )

    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (("price",), "{price, number}"),
            (("price", "percent"), "{price, number, percent}"),
            (("price", "currency", "EUR"), "{price, number, currency, EUR}"),
            (("price", None, "EUR"), "{price, number}"),
        ],
    )
    def test_number(self, args: tuple, expected: str) -> None:
        """Options only follow a style."""
        assert IcuMessage.number(*args) == expected

    def test_date_and_time(self) -> None:
        """Date/time default to medium."""
        assert IcuMessage.date("d") == "{d, date, medium}"
        assert IcuMessage.date("d", "short") == "{d, date, short}"
        assert IcuMessage.time("t") == "{t, time, medium}"

    def test_plural_and_select(self) -> None:
        """Facade factories return fresh builders."""
        assert isinstance(IcuMessage.plural("n", "en"), PluralBuilder)
        assert isinstance(IcuMessage.select("g"), SelectBuilder)

    def test_for_locale(self) -> None:
        """Locale-bound builder factory."""
        builder = IcuMessage.for_locale("ru")
        assert isinstance(builder, IcuMessageBuilder)
        assert builder.locale == "ru"
        template = builder.plural("n").with_inflections("#").build()
        assert template.startswith("{n, plural, one{1} few{2} many{5}")
        assert builder.select("g").otherwise("x").build() == "{g, select, other{x}}"
        assert builder.message("Hi {name}") == "Hi {name}"

    def test_for_locale_default_provider(self) -> None:
        """Without a provider the shared one is used."""
        builder = IcuMessageBuilder("en")
        assert builder.plural("n").with_inflections("#").cases["one"] == "1"
        assert get_default_provider().is_frozen

    def test_date_round_trip(self) -> None:
        """Facade clauses are understood by the formatter."""
        template = IcuMessage.date("d", "yyyy-MM-dd")
        assert IcuMessageFormatter().format(template, {"d": date(2024, 1, 15)}) == "2024-01-15"
