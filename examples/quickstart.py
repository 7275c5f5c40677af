"""Quickstart example for icuformatengine.

This example demonstrates formatting ICU plural/select templates, building
them programmatically and translating keys with locale fallback.

Note: Examples use the shared built-in plural rules. Locales outside the
built-in table need cldr_fallback=True or a registered rule.
"""

from datetime import date

from icuformatengine import (
    CldrPluralRuleProvider,
    DictMessageSource,
    IcuMessage,
    IcuMessageFormatter,
    RuleNotFoundError,
    Translator,
)

formatter = IcuMessageFormatter()

# Example 1: Simple message
print("=" * 50)
print("Example 1: Variable Interpolation")
print("=" * 50)

print(formatter.format("Hello, {name}!", {"name": "Alice"}))
# Output: Hello, Alice!

print(formatter.format("Hello, {name}!", {}))
# Output: Hello, {name}!

# Example 2: Plurals (English and Russian)
print("\n" + "=" * 50)
print("Example 2: Plural Forms")
print("=" * 50)

emails = "You have {count, plural, =0{no emails} one{one email} other{# emails}}."
for count in (0, 1, 5):
    print(formatter.format(emails, {"count": count, "_locale": "en"}))
# Output: You have no emails. / You have one email. / You have 5 emails.

goods = "{count, plural, one{# товар} few{# товара} many{# товаров}}"
for count in (1, 3, 5, 21):
    print(formatter.format(goods, {"count": count, "_locale": "ru"}))
# Output: 1 товар / 3 товара / 5 товаров / 21 товар

# Example 3: Nested select + plural
print("\n" + "=" * 50)
print("Example 3: Nested Select")
print("=" * 50)

template = (
    IcuMessage.select("gender")
    .when("female", lambda nested: nested.plural("count", "en")
          .when("one", "She has # item")
          .otherwise("She has # items"))
    .otherwise("They have items")
    .build()
)
print(template)
print(formatter.format(template, {"gender": "female", "count": 5}))
# Output: She has 5 items

# Example 4: Inflections from a base message
print("\n" + "=" * 50)
print("Example 4: with_inflections()")
print("=" * 50)

template = (
    IcuMessage.plural("n", "ru")
    .with_inflections("# товар", {"few": "а", "many": "ов"})
    .build()
)
print(template)
# Output: {n, plural, one{1 товар} few{2 товара} many{5 товаров} other{1 товар}}

# Example 5: Babel-backed number and date clauses
print("\n" + "=" * 50)
print("Example 5: Number and Date Clauses")
print("=" * 50)

print(formatter.format(
    "Total: {amount, number, currency, EUR} on {day, date, long}",
    {"amount": 1234.5, "day": date(2024, 1, 15), "_locale": "de_DE"},
))
# Output: Total: 1.234,50 € on 15. Januar 2024

# Example 6: Locales outside the built-in table
print("\n" + "=" * 50)
print("Example 6: CLDR Fallback")
print("=" * 50)

try:
    formatter.format(goods, {"count": 3, "_locale": "uk"})
except RuleNotFoundError as e:
    print(f"Error: {e}")

cldr = IcuMessageFormatter(CldrPluralRuleProvider(cldr_fallback=True).freeze())
print(cldr.format(goods, {"count": 3, "_locale": "uk"}))
# Output: 3 товара

# Example 7: Translator with locale fallback
print("\n" + "=" * 50)
print("Example 7: Translator")
print("=" * 50)

source = DictMessageSource({
    "en": {"messages": {"cart": {"items": "{count, plural, one{# item} other{# items}}"}}},
    "ru": {"messages": {"hello": "Привет, {name}!"}},
})
translator = Translator("ru", "en", source)
print(translator.t("hello", {"name": "Ivan"}))
# Output: Привет, Ivan!
print(translator.tp("cart.items", 3))
# Output: 3 items (English fallback)
print(translator.t("cart.unknown"))
# Output: unknown
