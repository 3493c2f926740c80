"""Tag query language: scanner, parser and expression helpers."""

__all__ = ["scanner", "parser", "query"]