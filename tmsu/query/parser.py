"""Recursive-descent parser for the tag query language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from tmsu.query.scanner import (
    AndOperatorToken,
    CloseParenToken,
    ComparisonOperatorToken,
    EndToken,
    NotOperatorToken,
    OpenParenToken,
    OrOperatorToken,
    QueryError,
    Scanner,
    SymbolToken,
    token_type,
)


@dataclass(frozen=True)
class EmptyExpression:
    """A query with no terms."""


@dataclass(frozen=True)
class TagExpression:
    """The presence of a tag."""

    name: str


@dataclass(frozen=True)
class ValueExpression:
    """A value in a comparison."""

    name: str


@dataclass(frozen=True)
class OrExpression:
    """Either operand holds."""

    left_operand: "Expression"
    right_operand: "Expression"


@dataclass(frozen=True)
class AndExpression:
    """Both operands hold."""

    left_operand: "Expression"
    right_operand: "Expression"


@dataclass(frozen=True)
class ComparisonExpression:
    """A tag's value compared with a given value."""

    tag: TagExpression
    operator: str
    value: ValueExpression


@dataclass(frozen=True)
class NotExpression:
    """The operand does not hold."""

    operand: "Expression"


Expression = Union[
    EmptyExpression,
    TagExpression,
    OrExpression,
    AndExpression,
    ComparisonExpression,
    NotExpression,
]


def _unexpected(token) -> QueryError:
    return QueryError(f"unexpected token: {token_type(token)}.")


class Parser:
    """Builds an expression tree from the tokens of a scanner."""

    def __init__(self, scanner: Scanner) -> None:
        self._scanner = scanner

    def parse(self) -> Expression:
        """Parse the whole query."""
        if isinstance(self._scanner.look_ahead(), EndToken):
            return EmptyExpression()

        expression = self._or()

        token = self._scanner.look_ahead()
        if not isinstance(token, EndToken):
            raise _unexpected(token)
        return expression

    def _or(self) -> Expression:
        left = self._and()
        while True:
            token = self._scanner.look_ahead()
            if isinstance(token, OrOperatorToken):
                self._scanner.next()
                left = OrExpression(left, self._and())
            elif isinstance(token, (EndToken, CloseParenToken)):
                return left
            else:
                raise _unexpected(token)

    def _and(self) -> Expression:
        left = self._not()
        while True:
            token = self._scanner.look_ahead()
            if isinstance(token, AndOperatorToken):
                self._scanner.next()
                left = AndExpression(left, self._not())
            elif isinstance(token, (OrOperatorToken, CloseParenToken, EndToken)):
                return left
            elif isinstance(token, (NotOperatorToken, SymbolToken, OpenParenToken)):
                left = AndExpression(left, self._not())
            else:
                raise _unexpected(token)

    def _not(self) -> Expression:
        token = self._scanner.look_ahead()

        if isinstance(token, NotOperatorToken):
            self._scanner.next()
            return NotExpression(self._not())

        if isinstance(token, OpenParenToken):
            self._scanner.next()
            operand = self._or()
            closing = self._scanner.next()
            if not isinstance(closing, CloseParenToken):
                raise QueryError(f"unexpected token: {token_type(closing)}")
            return operand

        if isinstance(token, SymbolToken):
            return self._comparison()

        raise _unexpected(token)

    def _comparison(self) -> Expression:
        tag = self._tag()
        token = self._scanner.look_ahead()
        if isinstance(token, ComparisonOperatorToken):
            self._scanner.next()
            return ComparisonExpression(tag, token.operator, self._value())
        return tag

    def _tag(self) -> TagExpression:
        token = self._scanner.next()
        if isinstance(token, SymbolToken):
            return TagExpression(token.name)
        raise _unexpected(token)

    def _value(self) -> ValueExpression:
        token = self._scanner.next()
        if isinstance(token, SymbolToken):
            return ValueExpression(token.name)
        raise QueryError(f"unexpected token: {token_type(token)}")