"""Recursive descent parser for single-variable expressions.

Grammar (all binary operators left-associative):

    addition       := multiplication (('+' | '-') multiplication)*
    multiplication := unary (('*' | '/') unary)*
    unary          := '(' addition ')'
                    | '+' unary
                    | '-' unary
                    | IDENT [unary]       -- x, or sin/cos/tan/exp/log applied to a unary
                    | NUMBER              -- digits and dots

Only the space character is skipped, and only right before the parser looks
at or consumes the next character.
"""

from __future__ import annotations

import logging
import math
import string

from src.core.errors import (
    ExpressionSyntaxError,
    NestingTooDeep,
    NumericConversionError,
    TrailingInput,
    UnclosedParenthesis,
    UnexpectedEndOfInput,
)
from src.core.expression import (
    FUNCTIONS,
    Addition,
    Const,
    Division,
    Expr,
    Multiplication,
    Negation,
    Subtraction,
    Variable,
    height,
)

log = logging.getLogger(__name__)

# Bounds both input nesting and tree height, so a flat sum of more than this
# many terms is rejected too. The derivative of a tree is up to three times as
# tall, and printing it must stay under the interpreter recursion limit.
DEFAULT_MAX_DEPTH = 128

_LETTERS = frozenset(string.ascii_letters)
_NUMBER_CHARS = frozenset(string.digits + ".")


class Parser:
    """Single-use parser over one line of text.

    Usage:
        tree = Parser("x * sin x").parse()
    """

    def __init__(self, text: str, max_depth: int = DEFAULT_MAX_DEPTH):
        self.text = text
        self.max_depth = max_depth
        self.pos = 0
        self._depth = 0

    def parse(self) -> Expr:
        result = self._parse_addition()
        if not self._eof():
            raise TrailingInput(self.text, self.pos)
        if height(result) > self.max_depth:
            raise NestingTooDeep(self.max_depth, self.text, self.pos)
        return result

    # --- Grammar rules ---

    def _parse_addition(self) -> Expr:
        lhs = self._parse_multiplication()
        while not self._eof():
            c = self._peek()
            if c == "+":
                self._advance()
                lhs = Addition(lhs, self._parse_multiplication())
            elif c == "-":
                self._advance()
                lhs = Subtraction(lhs, self._parse_multiplication())
            else:
                break
        return lhs

    def _parse_multiplication(self) -> Expr:
        lhs = self._parse_unary()
        while not self._eof():
            c = self._peek()
            if c == "*":
                self._advance()
                lhs = Multiplication(lhs, self._parse_unary())
            elif c == "/":
                self._advance()
                lhs = Division(lhs, self._parse_unary())
            else:
                break
        return lhs

    def _parse_unary(self) -> Expr:
        if self._eof():
            raise UnexpectedEndOfInput(self.text, self.pos)

        self._depth += 1
        if self._depth > self.max_depth:
            raise NestingTooDeep(self.max_depth, self.text, self.pos)
        try:
            return self._parse_term()
        finally:
            self._depth -= 1

    def _parse_term(self) -> Expr:
        c = self._peek()
        if c == "(":
            return self._parse_parenthesis()
        if c == "+":
            self._advance()
            return self._parse_unary()
        if c == "-":
            self._advance()
            return Negation(self._parse_unary())
        if c in _LETTERS:
            start = self.pos
            ident = self._parse_identifier()
            if ident == "x":
                return Variable()
            func = FUNCTIONS.get(ident)
            if func is None:
                raise ExpressionSyntaxError(self.text, start)
            return func(self._parse_unary())
        if c in _NUMBER_CHARS:
            return self._parse_literal()
        raise ExpressionSyntaxError(self.text, self.pos)

    def _parse_parenthesis(self) -> Expr:
        self._advance()  # consume '('
        inner = self._parse_addition()
        if self._eof() or self._peek() != ")":
            raise UnclosedParenthesis(self.text, self.pos)
        self._advance()  # consume ')'
        return inner

    # --- Lexical helpers ---

    def _parse_identifier(self) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _LETTERS:
            self.pos += 1
        return self.text[start:self.pos]

    def _parse_literal(self) -> Expr:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _NUMBER_CHARS:
            self.pos += 1
        literal = self.text[start:self.pos]
        try:
            value = float(literal)
        except ValueError:
            raise NumericConversionError(literal, self.text, start) from None
        if math.isinf(value):
            raise NumericConversionError(literal, self.text, start)
        return Const(value)

    def _skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] == " ":
            self.pos += 1

    def _eof(self) -> bool:
        self._skip_ws()
        return self.pos >= len(self.text)

    def _peek(self) -> str:
        self._skip_ws()
        return self.text[self.pos]

    def _advance(self) -> None:
        self._skip_ws()
        self.pos += 1


def parse(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse one expression, raising a ``ParseError`` subclass on bad input."""
    tree = Parser(text, max_depth).parse()
    log.debug("parsed %r as %s", text, tree)
    return tree
