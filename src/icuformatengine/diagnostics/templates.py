"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def plural_rule_not_found(locale: str) -> Diagnostic:
        """No plural rule for the normalized language code.

        Args:
            locale: The locale code as passed by the caller

        Returns:
            Diagnostic for PLURAL_RULE_NOT_FOUND
        """
        msg = f"No plural rule found for '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_RULE_NOT_FOUND,
            message=msg,
            hint="Register a rule with CldrPluralRuleProvider.register_rule() "
            "or enable cldr_fallback",
        )

    @staticmethod
    def rule_table_frozen(language: str) -> Diagnostic:
        """Registration attempted after the rule table was frozen.

        Args:
            language: Language code that was being registered

        Returns:
            Diagnostic for RULE_TABLE_FROZEN
        """
        msg = f"Cannot register plural rule for '{language}': rule table is frozen"
        return Diagnostic(
            code=DiagnosticCode.RULE_TABLE_FROZEN,
            message=msg,
            hint="Register all rules during setup, before calling freeze()",
        )

    @staticmethod
    def translation_not_found(key: str, locale: str, domain: str) -> Diagnostic:
        """Translation key not found.

        Args:
            key: Translation key
            locale: Locale searched
            domain: Domain searched

        Returns:
            Diagnostic for TRANSLATION_NOT_FOUND
        """
        msg = f"Translation not found for key '{key}' in locale '{locale}' and domain '{domain}'"
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_NOT_FOUND,
            message=msg,
            hint="Check that the message source provides this key",
        )

    @staticmethod
    def invalid_builder_callback(received: object) -> Diagnostic:
        """Select builder callback returned an unsupported value.

        Args:
            received: The value returned by the callback

        Returns:
            Diagnostic for INVALID_BUILDER_CALLBACK
        """
        msg = (
            "Callback for SelectBuilder.when() must return a string or a builder "
            f"instance, got {type(received).__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_BUILDER_CALLBACK,
            message=msg,
            hint="Return nested.plural(...), nested.select(...) or a plain string",
        )

    @staticmethod
    def invalid_select_case(received: object) -> Diagnostic:
        """SelectBuilder.when() given something it cannot turn into case text.

        Args:
            received: The value passed as the case text

        Returns:
            Diagnostic for INVALID_SELECT_CASE
        """
        msg = (
            "SelectBuilder.when() expects a string, a builder instance or a callback, "
            f"got {type(received).__name__}"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_SELECT_CASE,
            message=msg,
            hint="Convert the value with str() or wrap it in a callback",
        )

    @staticmethod
    def clause_not_delegated(clause_type: str) -> Diagnostic:
        """Clause type has no Babel formatter.

        Returns:
            Diagnostic for CLAUSE_NOT_DELEGATED
        """
        msg = f"Clause type '{clause_type}' is not delegated"
        return Diagnostic(code=DiagnosticCode.CLAUSE_NOT_DELEGATED, message=msg)

    @staticmethod
    def invalid_clause_value(clause_type: str, expected: str, received: object) -> Diagnostic:
        """Parameter value unusable for a number/date/time clause.

        Args:
            clause_type: Clause type being formatted
            expected: Description of accepted values
            received: The offending value

        Returns:
            Diagnostic for INVALID_CLAUSE_VALUE
        """
        msg = f"{clause_type} clause expected {expected}, got {type(received).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CLAUSE_VALUE,
            message=msg,
            hint="Pass a number for number clauses and a date, time or timestamp otherwise",
        )

    @staticmethod
    def currency_code_missing(locale: str) -> Diagnostic:
        """Currency style without a code for a locale lacking a territory.

        Args:
            locale: Active locale code

        Returns:
            Diagnostic for CURRENCY_CODE_MISSING
        """
        msg = (
            "currency style requires a currency code or a locale with a territory, "
            f"got '{locale}'"
        )
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_MISSING,
            message=msg,
            hint="Write {amount, number, currency, EUR} or use a locale such as 'de_DE'",
        )

    @staticmethod
    def clause_format_failed(clause_type: str, locale: str, error: Exception) -> Diagnostic:
        """Babel rejected a value, style or locale.

        Args:
            clause_type: Clause type being formatted
            locale: Active locale code
            error: Exception raised while formatting

        Returns:
            Diagnostic for CLAUSE_FORMAT_FAILED
        """
        msg = f"Cannot format {clause_type} clause for locale '{locale}': {error}"
        return Diagnostic(code=DiagnosticCode.CLAUSE_FORMAT_FAILED, message=msg)

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum nesting depth exceeded.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten nested plural/select clauses",
        )
