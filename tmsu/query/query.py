"""Parsing of queries and extraction of the names they mention."""

from __future__ import annotations

from collections.abc import Iterable

from tmsu.query.parser import (
    AndExpression,
    ComparisonExpression,
    EmptyExpression,
    Expression,
    NotExpression,
    OrExpression,
    Parser,
    TagExpression,
)
from tmsu.query.scanner import QueryError, Scanner

_EXACT_OPERATORS = {"=", "==", "!="}
_RANGE_OPERATORS = {"<", ">", "<=", ">="}


def parse(text: str) -> Expression:
    """Parse query ``text`` into an expression tree."""
    return Parser(Scanner(text)).parse()


def has_all(tag_names: Iterable[str]) -> Expression:
    """An expression requiring every one of ``tag_names``."""
    names = list(tag_names)
    if not names:
        return EmptyExpression()

    expression: Expression = TagExpression(names[0])
    for name in names[1:]:
        expression = AndExpression(expression, TagExpression(name))
    return expression


def _tag_names(expression: Expression, names: list[str]) -> None:
    if isinstance(expression, EmptyExpression):
        return
    if isinstance(expression, TagExpression):
        names.append(expression.name)
    elif isinstance(expression, NotExpression):
        _tag_names(expression.operand, names)
    elif isinstance(expression, (AndExpression, OrExpression)):
        _tag_names(expression.left_operand, names)
        _tag_names(expression.right_operand, names)
    elif isinstance(expression, ComparisonExpression):
        names.append(expression.tag.name)
    else:
        raise QueryError(f"unsupported token type '{type(expression).__name__}'")


def _exact_value_names(expression: Expression, names: list[str]) -> None:
    if isinstance(expression, (EmptyExpression, TagExpression)):
        return
    if isinstance(expression, NotExpression):
        _exact_value_names(expression.operand, names)
    elif isinstance(expression, (AndExpression, OrExpression)):
        _exact_value_names(expression.left_operand, names)
        _exact_value_names(expression.right_operand, names)
    elif isinstance(expression, ComparisonExpression):
        if expression.operator in _EXACT_OPERATORS:
            names.append(expression.value.name)
        elif expression.operator not in _RANGE_OPERATORS:
            raise QueryError(f"unsupported operator '{expression.operator}'")
    else:
        raise QueryError(f"unsupported token type '{type(expression).__name__}'")


def tag_names(expression: Expression) -> list[str]:
    """The tag names mentioned in ``expression``, in order of appearance."""
    names: list[str] = []
    _tag_names(expression, names)
    return names


def exact_value_names(expression: Expression) -> list[str]:
    """The value names that ``expression`` matches exactly."""
    names: list[str] = []
    _exact_value_names(expression, names)
    return names