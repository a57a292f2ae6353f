"""Parse → differentiate → simplify, packaged as one call."""

from __future__ import annotations

from dataclasses import dataclass

from src.core.expression import Expr
from src.core.parser import DEFAULT_MAX_DEPTH, parse

# Expressions evaluated by the `samples` command and `repl --samples`.
SAMPLE_EXPRESSIONS: tuple[str, ...] = (
    "x",
    "5.",
    "x + 5",
    "x + x * 2",
    "(x)",
    "(x + 2) * x",
    "(x + 2) / (x - 1)",
    "-(x*x)",
    "sin(x*x)",
    "cos(x*x)",
    "tan(x*x)",
    "exp(x*x)",
    "log(x*x)",
    "exp x",
    "1-------5",
    "1++++x",
)

DEFAULT_PREFIX = "  : "


@dataclass(frozen=True)
class DerivativeResult:
    """An input line together with its tree, raw derivative and simplified derivative."""

    source: str
    expression: Expr
    derivative: Expr
    simplified: Expr

    def lines(self, prefix: str = DEFAULT_PREFIX) -> list[str]:
        return [
            str(self.expression),
            f"{prefix}{self.derivative}",
            f"{prefix}{self.simplified}",
        ]

    def to_dict(self) -> dict[str, str]:
        return {
            "source": self.source,
            "expression": str(self.expression),
            "derivative": str(self.derivative),
            "simplified": str(self.simplified),
        }


def differentiate(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> DerivativeResult:
    """Run the whole pipeline on one line. Only parsing can fail."""
    expression = parse(text, max_depth)
    derivative = expression.derivative()
    return DerivativeResult(
        source=text,
        expression=expression,
        derivative=derivative,
        simplified=derivative.simplify(),
    )
