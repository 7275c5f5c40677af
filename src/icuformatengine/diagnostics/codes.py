"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (plural rules, translations)
        2000-2999: Nesting errors (formatter and builder recursion)
        3000-3999: Builder errors (template authoring)
        4000-4999: Formatting errors (delegated number/date/time clauses)
    """

    # Lookup errors (1000-1999)
    PLURAL_RULE_NOT_FOUND = 1001
    TRANSLATION_NOT_FOUND = 1002
    RULE_TABLE_FROZEN = 1003

    # Nesting errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001

    # Builder errors (3000-3999)
    INVALID_BUILDER_CALLBACK = 3001
    INVALID_SELECT_CASE = 3002

    # Formatting errors (4000-4999)
    CLAUSE_NOT_DELEGATED = 4001
    INVALID_CLAUSE_VALUE = 4002
    CURRENCY_CODE_MISSING = 4003
    CLAUSE_FORMAT_FAILED = 4004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[PLURAL_RULE_NOT_FOUND]: No plural rule found for 'xx'
              = help: Register a rule with CldrPluralRuleProvider.register_rule()

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
