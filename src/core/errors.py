"""Parse failures, one class per kind of failure."""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for everything the parser can reject.

    ``position`` is the offset into ``text`` where the problem was detected.
    """

    def __init__(self, message: str, text: str = "", position: int = 0):
        super().__init__(message)
        self.message = message
        self.text = text
        self.position = position

    def __str__(self) -> str:
        return self.message


class ExpressionSyntaxError(ParseError):
    """Unrecognized character or unknown identifier where a term was expected."""

    def __init__(self, text: str = "", position: int = 0):
        super().__init__("syntax error", text, position)


class UnexpectedEndOfInput(ParseError):
    def __init__(self, text: str = "", position: int = 0):
        super().__init__("unexpected end of input", text, position)


class UnclosedParenthesis(ParseError):
    def __init__(self, text: str = "", position: int = 0):
        super().__init__("expected closing parenthesis", text, position)


class TrailingInput(ParseError):
    """A complete expression was parsed but characters remain."""

    def __init__(self, text: str = "", position: int = 0):
        super().__init__("expected end of input", text, position)


class NumericConversionError(ParseError):
    """A run of digits and dots that is not a valid number, e.g. ``1.2.3``."""

    def __init__(self, literal: str, text: str = "", position: int = 0):
        super().__init__(f"invalid numeric literal {literal!r}", text, position)
        self.literal = literal


class NestingTooDeep(ParseError):
    def __init__(self, limit: int, text: str = "", position: int = 0):
        super().__init__(f"expression nested deeper than {limit} levels", text, position)
        self.limit = limit
