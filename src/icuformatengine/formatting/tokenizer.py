"""Brace-depth scanner for ICU message templates.

Grammar (informal):
    template     := (text | expression)*
    expression   := '{' name (',' clause_type (',' clause_body)?)? '}'
    clause_body  := (label '{' template '}')+

The scanner only tracks brace depth; it never fails. An expression whose
closing brace never arrives is emitted as trailing text, and a stray '}'
outside any expression is literal text.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from icuformatengine.enums import TokenKind

__all__ = [
    "ExpressionParts",
    "Token",
    "parse_cases",
    "split_expression",
    "tokenize",
]


@dataclass(frozen=True, slots=True)
class Token:
    """Template token.

    Attributes:
        kind: TEXT or EXPRESSION
        value: Literal text, or the expression including its outer braces
    """

    kind: TokenKind
    value: str


@dataclass(frozen=True, slots=True)
class ExpressionParts:
    """Expression content split on its first two top-level commas.

    Attributes:
        name: Parameter name (stripped)
        clause_type: Clause type, or None for a bare ``{name}`` reference
        body: Clause body (stripped), empty when absent
    """

    name: str
    clause_type: str | None = None
    body: str = ""


def tokenize(template: str) -> Iterator[Token]:
    """Split a template into text and top-level expression tokens.

    Tokens are produced lazily and in source order. The iterator is
    single-use; tokenize the template again to restart.

    Args:
        template: ICU message template

    Yields:
        Token objects whose values concatenate back to ``template``

    Example:
        >>> [t.value for t in tokenize("Hi {name}, {n, plural, other{#}}!")]
        ['Hi ', '{name}', ', ', '{n, plural, other{#}}', '!']
    """
    depth = 0
    start = 0

    for index, char in enumerate(template):
        if char == "{":
            if depth == 0 and index > start:
                yield Token(TokenKind.TEXT, template[start:index])
                start = index
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                yield Token(TokenKind.EXPRESSION, template[start : index + 1])
                start = index + 1

    if start < len(template):
        yield Token(TokenKind.TEXT, template[start:])


def _top_level_commas(content: str, limit: int) -> list[int]:
    positions: list[int] = []
    depth = 0
    for index, char in enumerate(content):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == "," and depth == 0:
            positions.append(index)
            if len(positions) == limit:
                break
    return positions


def split_expression(expression: str) -> ExpressionParts:
    """Split ``{name, type, body}`` into its parts.

    Args:
        expression: Expression token value including outer braces

    Returns:
        ExpressionParts; clause_type is None when there is no top-level comma

    Example:
        >>> split_expression("{n, plural, one{# item} other{# items}}")
        ExpressionParts(name='n', clause_type='plural', body='one{# item} other{# items}')
    """
    content = expression[1:-1]
    commas = _top_level_commas(content, 2)

    match commas:
        case []:
            return ExpressionParts(content.strip())
        case [first]:
            return ExpressionParts(content[:first].strip(), content[first + 1 :].strip())
        case [first, second]:
            return ExpressionParts(
                content[:first].strip(),
                content[first + 1 : second].strip(),
                content[second + 1 :].strip(),
            )
        case _:
            # _top_level_commas never returns more than `limit` positions
            raise AssertionError(commas)


def parse_cases(body: str) -> dict[str, str]:
    """Parse ``label{text} label{text} ...`` into a mapping.

    Labels are runs of non-brace, non-whitespace characters. Case text is
    brace-balanced and kept raw (nested expressions are not evaluated). A
    case whose closing brace is missing is dropped. Later duplicates win.

    Args:
        body: Clause body

    Returns:
        Mapping of label to raw case text, in source order

    Example:
        >>> parse_cases("one{# item} other{# items}")
        {'one': '# item', 'other': '# items'}
    """
    cases: dict[str, str] = {}
    label: list[str] = []
    depth = 0
    text_start = 0

    for index, char in enumerate(body):
        if depth == 0:
            if char == "{":
                depth = 1
                text_start = index + 1
            elif char != "}" and not char.isspace():
                label.append(char)
            continue

        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                cases["".join(label)] = body[text_start:index]
                label.clear()

    return cases
