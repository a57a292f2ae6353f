"""Expression tree for single-variable arithmetic.

Every node is an immutable dataclass. Each variant knows how to print itself,
report its precedence class, copy itself (``identity``), differentiate itself
with respect to ``x`` and apply the local zero/one simplification rules.
All of these return fresh trees; no node is ever shared between two parents.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class Precedence(IntEnum):
    """Binding strength used to decide where parentheses are needed."""

    ADDITION = 0
    MULTIPLICATION = 1
    UNARY = 2


class Expr:
    """Base class for expression tree nodes."""

    def precedence(self) -> Precedence:
        raise NotImplementedError

    def identity(self) -> Expr:
        raise NotImplementedError

    def derivative(self) -> Expr:
        raise NotImplementedError

    def simplify(self) -> Expr:
        return self.identity()

    def children(self) -> tuple[Expr, ...]:
        return ()


def is_zero(expr: Expr) -> bool:
    return isinstance(expr, Const) and expr.value == 0.0


def is_one(expr: Expr) -> bool:
    return isinstance(expr, Const) and expr.value == 1.0


def _format_lhs(expr: Expr, parent: Precedence) -> str:
    if expr.precedence() < parent:
        return f"({expr})"
    return str(expr)


def _format_rhs(expr: Expr, parent: Precedence) -> str:
    # Subtraction and division are not associative on the right: a - (b - c)
    if expr.precedence() <= parent:
        return f"({expr})"
    return str(expr)


# --- Leaves ---


@dataclass(frozen=True)
class Const(Expr):
    """A floating point literal."""

    value: float

    def precedence(self) -> Precedence:
        return Precedence.UNARY

    def identity(self) -> Expr:
        return Const(self.value)

    def derivative(self) -> Expr:
        return Const(0.0)

    def __str__(self) -> str:
        return "%g" % self.value


@dataclass(frozen=True)
class Variable(Expr):
    """The variable x."""

    def precedence(self) -> Precedence:
        return Precedence.UNARY

    def identity(self) -> Expr:
        return Variable()

    def derivative(self) -> Expr:
        return Const(1.0)

    def __str__(self) -> str:
        return "x"


# --- Negation ---


@dataclass(frozen=True)
class Negation(Expr):
    """Unary minus."""

    arg: Expr

    def precedence(self) -> Precedence:
        return Precedence.UNARY

    def children(self) -> tuple[Expr, ...]:
        return (self.arg,)

    def identity(self) -> Expr:
        return Negation(self.arg.identity())

    def derivative(self) -> Expr:
        return Negation(self.arg.derivative())

    def simplify(self) -> Expr:
        s_arg = self.arg.simplify()
        if is_zero(s_arg):
            return Const(0.0)
        return Negation(s_arg)

    def __str__(self) -> str:
        return "-" + _format_lhs(self.arg, self.precedence())


# --- Binary operators ---


@dataclass(frozen=True)
class BinaryOp(Expr):
    """Shared structure of the four arithmetic operators."""

    lhs: Expr
    rhs: Expr

    symbol: ClassVar[str] = "?"
    level: ClassVar[Precedence] = Precedence.ADDITION

    def precedence(self) -> Precedence:
        return self.level

    def children(self) -> tuple[Expr, ...]:
        return (self.lhs, self.rhs)

    def identity(self) -> Expr:
        return type(self)(self.lhs.identity(), self.rhs.identity())

    def __str__(self) -> str:
        return (
            f"{_format_lhs(self.lhs, self.level)} {self.symbol} "
            f"{_format_rhs(self.rhs, self.level)}"
        )


@dataclass(frozen=True)
class Addition(BinaryOp):
    symbol: ClassVar[str] = "+"
    level: ClassVar[Precedence] = Precedence.ADDITION

    def derivative(self) -> Expr:
        return Addition(self.lhs.derivative(), self.rhs.derivative())

    def simplify(self) -> Expr:
        s_lhs = self.lhs.simplify()
        s_rhs = self.rhs.simplify()
        if is_zero(s_lhs):
            return s_rhs
        if is_zero(s_rhs):
            return s_lhs
        return Addition(s_lhs, s_rhs)


@dataclass(frozen=True)
class Subtraction(BinaryOp):
    symbol: ClassVar[str] = "-"
    level: ClassVar[Precedence] = Precedence.ADDITION

    def derivative(self) -> Expr:
        return Subtraction(self.lhs.derivative(), self.rhs.derivative())

    def simplify(self) -> Expr:
        s_lhs = self.lhs.simplify()
        s_rhs = self.rhs.simplify()
        if is_zero(s_lhs):
            return Negation(s_rhs).simplify()
        if is_zero(s_rhs):
            return s_lhs
        return Subtraction(s_lhs, s_rhs)


@dataclass(frozen=True)
class Multiplication(BinaryOp):
    symbol: ClassVar[str] = "*"
    level: ClassVar[Precedence] = Precedence.MULTIPLICATION

    def derivative(self) -> Expr:
        """Product rule: (ab)' = a'b + ab'."""
        return Addition(
            Multiplication(self.lhs.derivative(), self.rhs.identity()),
            Multiplication(self.lhs.identity(), self.rhs.derivative()),
        )

    def simplify(self) -> Expr:
        s_lhs = self.lhs.simplify()
        s_rhs = self.rhs.simplify()
        if is_zero(s_lhs):
            return Const(0.0)
        if is_one(s_lhs):
            return s_rhs
        if is_zero(s_rhs):
            return Const(0.0)
        if is_one(s_rhs):
            return s_lhs
        return Multiplication(s_lhs, s_rhs)


@dataclass(frozen=True)
class Division(BinaryOp):
    symbol: ClassVar[str] = "/"
    level: ClassVar[Precedence] = Precedence.MULTIPLICATION

    def derivative(self) -> Expr:
        """Quotient rule: (a/b)' = (a'b - b'a) / (b*b)."""
        return Division(
            Subtraction(
                Multiplication(self.lhs.derivative(), self.rhs.identity()),
                Multiplication(self.rhs.derivative(), self.lhs.identity()),
            ),
            Multiplication(self.rhs.identity(), self.rhs.identity()),
        )

    def simplify(self) -> Expr:
        s_lhs = self.lhs.simplify()
        s_rhs = self.rhs.simplify()
        if is_zero(s_lhs):
            return Const(0.0)
        # x / 0 is left alone
        if is_one(s_rhs):
            return s_lhs
        return Division(s_lhs, s_rhs)


# --- Named functions ---


@dataclass(frozen=True)
class Function(Expr):
    """A named function of one argument, printed as ``name operand``.

    Only ``Exponentiation`` simplifies its operand; the other functions
    return an exact copy of themselves from ``simplify``.
    """

    arg: Expr

    name: ClassVar[str] = "?"

    def precedence(self) -> Precedence:
        return Precedence.UNARY

    def children(self) -> tuple[Expr, ...]:
        return (self.arg,)

    def identity(self) -> Expr:
        return type(self)(self.arg.identity())

    def __str__(self) -> str:
        return f"{self.name} {_format_lhs(self.arg, self.precedence())}"


@dataclass(frozen=True)
class Sine(Function):
    name: ClassVar[str] = "sin"

    def derivative(self) -> Expr:
        return Multiplication(Cosine(self.arg.identity()), self.arg.derivative())


@dataclass(frozen=True)
class Cosine(Function):
    name: ClassVar[str] = "cos"

    def derivative(self) -> Expr:
        return Multiplication(
            Negation(Sine(self.arg.identity())), self.arg.derivative()
        )


@dataclass(frozen=True)
class Tangent(Function):
    name: ClassVar[str] = "tan"

    def derivative(self) -> Expr:
        return Multiplication(
            Division(
                Const(1.0),
                Multiplication(self.arg.identity(), self.arg.identity()),
            ),
            self.arg.derivative(),
        )


@dataclass(frozen=True)
class Exponentiation(Function):
    """e raised to the operand."""

    name: ClassVar[str] = "exp"

    def derivative(self) -> Expr:
        return Multiplication(
            Exponentiation(self.arg.identity()), self.arg.derivative()
        )

    def simplify(self) -> Expr:
        s_arg = self.arg.simplify()
        if is_zero(s_arg):
            return Const(1.0)
        return Exponentiation(s_arg)


@dataclass(frozen=True)
class Logarithm(Function):
    """Natural logarithm."""

    name: ClassVar[str] = "log"

    def derivative(self) -> Expr:
        return Multiplication(
            Division(Const(1.0), self.arg.identity()), self.arg.derivative()
        )


FUNCTIONS: dict[str, type[Function]] = {
    cls.name: cls for cls in (Sine, Cosine, Tangent, Exponentiation, Logarithm)
}


def height(expr: Expr) -> int:
    """Number of nodes on the longest root-to-leaf path, computed without recursion."""
    best = 0
    stack = [(expr, 1)]
    while stack:
        node, level = stack.pop()
        best = max(best, level)
        stack.extend((child, level + 1) for child in node.children())
    return best
