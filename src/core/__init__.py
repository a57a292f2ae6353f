from src.core.errors import (
    ExpressionSyntaxError, NestingTooDeep, NumericConversionError, ParseError,
    TrailingInput, UnclosedParenthesis, UnexpectedEndOfInput,
)
from src.core.expression import (
    Addition, BinaryOp, Const, Cosine, Division, Exponentiation, Expr, Function,
    Logarithm, Multiplication, Negation, Precedence, Sine, Subtraction, Tangent,
    Variable, is_one, is_zero,
)
from src.core.parser import DEFAULT_MAX_DEPTH, Parser, parse
from src.core.pipeline import SAMPLE_EXPRESSIONS, DerivativeResult, differentiate

__all__ = [
    "Expr", "Const", "Variable", "Negation", "BinaryOp", "Addition", "Subtraction",
    "Multiplication", "Division", "Function", "Sine", "Cosine", "Tangent",
    "Exponentiation", "Logarithm", "Precedence", "is_zero", "is_one",
    "ParseError", "ExpressionSyntaxError", "UnexpectedEndOfInput",
    "UnclosedParenthesis", "TrailingInput", "NumericConversionError", "NestingTooDeep",
    "Parser", "parse", "DEFAULT_MAX_DEPTH",
    "DerivativeResult", "differentiate", "SAMPLE_EXPRESSIONS",
]
