"""Shell-like splitting of text into words."""

from __future__ import annotations

_ESCAPABLE_UNQUOTED = {'"', "'", "\\", " ", "\t"}


def tokenize(text: str) -> list[str]:
    """Split ``text`` into words, honouring quotes and backslash escapes."""
    tokens: list[str] = []
    token: list[str] = []
    quote = ""
    escape = False

    for char in text:
        if escape:
            if quote:
                # only the current quote character and backslash can be escaped inside a quote
                if char in (quote, "\\"):
                    token.append(char)
                else:
                    token.extend(("\\", char))
            elif char in _ESCAPABLE_UNQUOTED:
                token.append(char)
            else:
                token.extend(("\\", char))
            escape = False
        elif char == "\\":
            escape = True
        elif quote:
            if char == quote:
                tokens.append("".join(token))
                token = []
                quote = ""
            else:
                token.append(char)
        elif char in ('"', "'"):
            quote = char
        elif char in (" ", "\t"):
            if token:
                tokens.append("".join(token))
                token = []
        else:
            token.append(char)

    if token:
        tokens.append("".join(token))

    return tokens