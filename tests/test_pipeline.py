"""End-to-end tests: text in, printed expression and derivatives out."""

import pytest
from src.core.errors import ParseError
from src.core.expression import Const, Variable
from src.core.pipeline import SAMPLE_EXPRESSIONS, DerivativeResult, differentiate


# (input, printed expression, derivative, simplified derivative)
SAMPLE_OUTPUTS = [
    ("x", "x", "1", "1"),
    ("5.", "5", "0", "0"),
    ("x + 5", "x + 5", "1 + 0", "1"),
    ("x + x * 2", "x + x * 2", "1 + (1 * 2 + x * 0)", "1 + 2"),
    ("(x)", "x", "1", "1"),
    ("(x + 2) * x", "(x + 2) * x", "(1 + 0) * x + (x + 2) * 1", "x + (x + 2)"),
    (
        "(x + 2) / (x - 1)",
        "(x + 2) / (x - 1)",
        "((1 + 0) * (x - 1) - (1 - 0) * (x + 2)) / ((x - 1) * (x - 1))",
        "(x - 1 - (x + 2)) / ((x - 1) * (x - 1))",
    ),
    ("-(x*x)", "-(x * x)", "-(1 * x + x * 1)", "-(x + x)"),
    ("sin(x*x)", "sin (x * x)", "cos (x * x) * (1 * x + x * 1)", "cos (x * x) * (x + x)"),
    ("cos(x*x)", "cos (x * x)", "-sin (x * x) * (1 * x + x * 1)", "-sin (x * x) * (x + x)"),
    (
        "tan(x*x)",
        "tan (x * x)",
        "1 / (x * x * (x * x)) * (1 * x + x * 1)",
        "1 / (x * x * (x * x)) * (x + x)",
    ),
    ("exp(x*x)", "exp (x * x)", "exp (x * x) * (1 * x + x * 1)", "exp (x * x) * (x + x)"),
    ("log(x*x)", "log (x * x)", "1 / (x * x) * (1 * x + x * 1)", "1 / (x * x) * (x + x)"),
    ("exp x", "exp x", "exp x * 1", "exp x"),
    ("1-------5", "1 - ------5", "0 - ------0", "0"),
    ("1++++x", "1 + x", "0 + 1", "1"),
]


class TestSamples:
    @pytest.mark.parametrize("text, printed, derivative, simplified", SAMPLE_OUTPUTS)
    def test_sample_output(self, text, printed, derivative, simplified):
        result = differentiate(text)
        assert str(result.expression) == printed
        assert str(result.derivative) == derivative
        assert str(result.simplified) == simplified

    def test_every_sample_is_covered(self):
        assert [row[0] for row in SAMPLE_OUTPUTS] == list(SAMPLE_EXPRESSIONS)


class TestDerivativeResult:
    def test_fields(self):
        result = differentiate("x")
        assert isinstance(result, DerivativeResult)
        assert result.source == "x"
        assert result.expression == Variable()
        assert result.derivative == Const(1.0)
        assert result.simplified == Const(1.0)

    def test_lines_default_prefix(self):
        assert differentiate("x + 5").lines() == ["x + 5", "  : 1 + 0", "  : 1"]

    def test_lines_custom_prefix(self):
        assert differentiate("x").lines("> ") == ["x", "> 1", "> 1"]

    def test_to_dict(self):
        assert differentiate("x + x * 2").to_dict() == {
            "source": "x + x * 2",
            "expression": "x + x * 2",
            "derivative": "1 + (1 * 2 + x * 0)",
            "simplified": "1 + 2",
        }

    def test_parenthesized_matches_bare(self):
        bare = differentiate("x")
        wrapped = differentiate("(x)")
        assert wrapped.derivative == bare.derivative
        assert wrapped.simplified == bare.simplified


class TestFailures:
    def test_only_parsing_fails(self):
        with pytest.raises(ParseError):
            differentiate("x +")

    def test_max_depth_is_forwarded(self):
        with pytest.raises(ParseError):
            differentiate("---x", max_depth=2)
        assert str(differentiate("---x", max_depth=4).simplified) == "---1"
