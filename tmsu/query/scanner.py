"""Tokenisation of the tag query language."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Union

_WHITE_SPACE = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)

_OPERATOR_CHARS = frozenset("!=<>")
_TERMINATORS = frozenset("()=!<>")

_KEYWORDS: dict[str, "Token"] = {}


class QueryError(ValueError):
    """Raised when a query cannot be scanned or parsed."""


@dataclass(frozen=True)
class EndToken:
    """The end of the query text."""


@dataclass(frozen=True)
class OpenParenToken:
    """An opening parenthesis."""


@dataclass(frozen=True)
class CloseParenToken:
    """A closing parenthesis."""


@dataclass(frozen=True)
class SymbolToken:
    """A tag or value name."""

    name: str


@dataclass(frozen=True)
class NotOperatorToken:
    """The 'not' operator."""


@dataclass(frozen=True)
class AndOperatorToken:
    """The 'and' operator."""


@dataclass(frozen=True)
class OrOperatorToken:
    """The 'or' operator."""


@dataclass(frozen=True)
class ComparisonOperatorToken:
    """A comparison operator such as '=' or '<='."""

    operator: str


Token = Union[
    EndToken,
    OpenParenToken,
    CloseParenToken,
    SymbolToken,
    NotOperatorToken,
    AndOperatorToken,
    OrOperatorToken,
    ComparisonOperatorToken,
]

_KEYWORDS.update(
    {
        "not": NotOperatorToken(),
        "NOT": NotOperatorToken(),
        "and": AndOperatorToken(),
        "AND": AndOperatorToken(),
        "or": OrOperatorToken(),
        "OR": OrOperatorToken(),
        "eq": ComparisonOperatorToken("="),
        "EQ": ComparisonOperatorToken("="),
        "ne": ComparisonOperatorToken("!="),
        "NE": ComparisonOperatorToken("!="),
        "lt": ComparisonOperatorToken("<"),
        "LT": ComparisonOperatorToken("<"),
        "gt": ComparisonOperatorToken(">"),
        "GT": ComparisonOperatorToken(">"),
        "le": ComparisonOperatorToken("<="),
        "LE": ComparisonOperatorToken("<="),
        "ge": ComparisonOperatorToken(">="),
        "GE": ComparisonOperatorToken(">="),
    }
)


def token_type(token: Token | None) -> str:
    """A short description of the kind of ``token``."""
    if token is None:
        return "nil"
    if isinstance(token, SymbolToken):
        return "symbol"
    if isinstance(token, OpenParenToken):
        return "'('"
    if isinstance(token, CloseParenToken):
        return "')'"
    if isinstance(token, NotOperatorToken):
        return "'not'"
    if isinstance(token, AndOperatorToken):
        return "'and'"
    if isinstance(token, OrOperatorToken):
        return "'or'"
    if isinstance(token, ComparisonOperatorToken):
        return token.operator
    if isinstance(token, EndToken):
        return "EOF"
    return "unknown"


def _is_space(char: str) -> bool:
    return char in _WHITE_SPACE


def _is_symbol_char(char: str) -> bool:
    return unicodedata.category(char)[0] in "LNPS"


class Scanner:
    """Reads query tokens one at a time with a single token of look-ahead."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._look_ahead: Token | None = None

    def look_ahead(self) -> Token:
        """The next token, without consuming it."""
        if self._look_ahead is None:
            try:
                self._look_ahead = self._read_token()
            except QueryError as error:
                raise QueryError(f"could not look ahead: {error}") from error
        return self._look_ahead

    def next(self) -> Token:
        """Consume and return the next token."""
        token = self.look_ahead()
        try:
            self._look_ahead = self._read_token()
        except QueryError as error:
            raise QueryError(f"could not read next token: {error}") from error
        return token

    def _read_char(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char

    def _unread(self) -> None:
        self._pos -= 1

    def _read_token(self) -> Token:
        char = self._read_char()
        while char is not None and _is_space(char):
            char = self._read_char()

        if char is None:
            return EndToken()
        if char == "(":
            return OpenParenToken()
        if char == ")":
            return CloseParenToken()
        if char in _OPERATOR_CHARS:
            return self._read_comparison_operator(char)
        if _is_symbol_char(char) or char == "\\":
            self._unread()
            return self._read_text_token()
        raise QueryError(f"unexpected character '{char}'")

    def _read_text_token(self) -> Token:
        text = self._read_string()
        return _KEYWORDS.get(text, SymbolToken(text))

    def _read_comparison_operator(self, char: str) -> Token:
        following = self._read_char()
        if following is None:
            raise QueryError(f"unexpected end of query after '{char}'")
        if following == "=":
            return ComparisonOperatorToken(char + "=")
        self._unread()
        return ComparisonOperatorToken(char)

    def _read_string(self) -> str:
        text: list[str] = []
        escaped = False

        while True:
            char = self._read_char()
            if char is None:
                return "".join(text)

            if escaped:
                text.append(char)
                escaped = False
                continue

            if char == "\\":
                escaped = True
                continue

            if _is_space(char) or char in _TERMINATORS:
                self._unread()
                return "".join(text)
            if _is_symbol_char(char):
                text.append(char)
            else:
                raise QueryError(f"unexpected character '{char}'")