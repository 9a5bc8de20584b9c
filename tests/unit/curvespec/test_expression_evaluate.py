"""Tests for expression evaluation."""

import dataclasses
import math
import struct

import numpy as np
import pytest

from curvespec.expression import parse, evaluate, evaluate_many, Expression
from curvespec.ast import ExpressionEvaluationError, VariableNode


TREFOIL_X = "sin(t) + 2*sin(2*t)"


class TestEvaluateBasics:
    """Tests for ordinary evaluation."""

    @pytest.mark.parametrize("t0", [0.0, 1.2345, -7.5, 1e-300, -1e300, math.pi])
    def test_variable_round_trip(self, t0):
        assert evaluate(parse("t"), t0) == t0

    def test_pi(self):
        assert evaluate(parse("pi"), 123.0) == pytest.approx(3.141592653589793)

    def test_e(self):
        assert evaluate(parse("e"), 0.0) == pytest.approx(2.718281828459045)

    def test_returns_python_float(self):
        assert type(evaluate(parse("sin(t)"), 1.0)) is float

    def test_integer_parameter(self):
        assert evaluate(parse("t * 2"), 3) == 6.0

    def test_numpy_parameter(self):
        assert evaluate(parse("t + 1"), np.float64(1.5)) == 2.5

    def test_call_shorthand(self):
        expr = parse("t^2")
        assert expr(3.0) == 9.0

    def test_trefoil_at_zero(self):
        assert evaluate(parse(TREFOIL_X), 0.0) == 0.0
        assert evaluate(parse("cos(t) - 2*cos(2*t)"), 0.0) == -1.0

    @pytest.mark.parametrize("source, t, expected", [
        ("sin(t)", math.pi / 2, 1.0),
        ("cos(t)", 0.0, 1.0),
        ("tan(t)", math.pi / 4, 1.0),
        ("asin(t)", 1.0, math.pi / 2),
        ("acos(t)", 1.0, 0.0),
        ("atan(t)", 1.0, math.pi / 4),
        ("sinh(t)", 0.0, 0.0),
        ("cosh(t)", 0.0, 1.0),
        ("tanh(t)", 0.0, 0.0),
        ("sqrt(t)", 9.0, 3.0),
        ("pow(t, 3)", 2.0, 8.0),
        ("abs(t)", -2.5, 2.5),
        ("floor(t)", -1.5, -2.0),
        ("ceil(t)", -1.5, -1.0),
        ("exp(t)", 0.0, 1.0),
        ("log(t)", math.e, 1.0),
        ("log10(t)", 1000.0, 3.0),
    ])
    def test_functions(self, source, t, expected):
        assert evaluate(parse(source), t) == pytest.approx(expected)

    @pytest.mark.parametrize("t, expected", [
        (2.5, 3.0),
        (-2.5, -2.0),
        (0.4, 0.0),
        (-0.6, -1.0),
    ])
    def test_round_half_up(self, t, expected):
        assert evaluate(parse("round(t)"), t) == expected

    @pytest.mark.parametrize("t, expected", [
        (0.49999999999999994, 0.0),
        (-0.5, 0.0),
        (4503599627370497.0, 4503599627370497.0),
    ])
    def test_round_float_edges(self, t, expected):
        assert evaluate(parse("round(t)"), t) == expected

    def test_round_non_finite(self):
        assert math.isnan(evaluate(parse("round(t)"), math.nan))
        assert evaluate(parse("round(t)"), math.inf) == math.inf


class TestNonFiniteResults:
    """Domain violations produce nan/inf instead of raising."""

    @pytest.mark.parametrize("source, t", [
        ("sqrt(t)", -1.0),
        ("log(t)", -1.0),
        ("asin(t)", 2.0),
        ("acos(t)", -1.5),
        ("t / t", 0.0),
        ("pow(t, 1/3)", -8.0),
        ("t^0.5", -4.0),
    ])
    def test_nan(self, source, t):
        assert math.isnan(evaluate(parse(source), t))

    @pytest.mark.parametrize("source, t, expected", [
        ("1 / t", 0.0, math.inf),
        ("-1 / t", 0.0, -math.inf),
        ("log(t)", 0.0, -math.inf),
        ("exp(t)", 1000.0, math.inf),
        ("10 ^ t", 400.0, math.inf),
        ("pow(t, -1)", 0.0, math.inf),
    ])
    def test_infinite(self, source, t, expected):
        assert evaluate(parse(source), t) == expected

    def test_no_warning_emitted(self, recwarn):
        evaluate(parse("1 / t + sqrt(t - 5)"), 0.0)
        assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]


class TestDeterminism:
    """Repeated evaluation is bit-identical."""

    @pytest.mark.parametrize("t", [0.0, 0.1, 1.0, 2.5, 5.9])
    def test_bit_identical(self, t):
        expr = parse("(2 + cos(2*t)) * cos(3*t) + exp(sin(t)) / 3")
        first = struct.pack("<d", evaluate(expr, t))
        for _ in range(5):
            assert struct.pack("<d", evaluate(expr, t)) == first

    def test_parse_twice_same_result(self):
        a = evaluate(parse(TREFOIL_X), 1.3)
        b = evaluate(parse(TREFOIL_X), 1.3)
        assert a == b


class TestContract:
    """Evaluation only accepts parsed expressions and real parameters."""

    def test_string_rejected(self):
        with pytest.raises(ExpressionEvaluationError):
            evaluate("t", 1.0)

    def test_foreign_object_rejected(self):
        with pytest.raises(ExpressionEvaluationError):
            evaluate(VariableNode(), 1.0)

    @pytest.mark.parametrize("t", ["1", None, True, [1.0]])
    def test_bad_parameter_rejected(self, t):
        with pytest.raises(ExpressionEvaluationError):
            evaluate(parse("t"), t)

    def test_integer_beyond_float_range_rejected(self):
        with pytest.raises(ExpressionEvaluationError, match="float range"):
            evaluate(parse("t"), 10 ** 400)

    def test_evaluation_error_is_type_error(self):
        assert issubclass(ExpressionEvaluationError, TypeError)

    def test_expression_is_immutable(self):
        expr = parse("t")
        with pytest.raises(dataclasses.FrozenInstanceError):
            expr.source = "t + 1"

    def test_equal_sources_compare_equal(self):
        assert parse("t + 1") == parse("t + 1")
        assert parse("t + 1") != parse("t + 2")


class TestEvaluateMany:
    """Tests for array evaluation."""

    def test_matches_scalar(self):
        expr = parse(TREFOIL_X)
        ts = np.linspace(0, 2 * np.pi, 17)
        values = evaluate_many(expr, ts)
        assert values.shape == (17,)
        expected = [evaluate(expr, float(t)) for t in ts]
        np.testing.assert_allclose(values, expected, rtol=1e-12, atol=1e-12)

    def test_constant_broadcasts(self):
        values = evaluate_many(parse("1"), np.zeros(5))
        assert values.shape == (5,)
        assert np.all(values == 1.0)

    def test_non_finite_entries_kept(self):
        values = evaluate_many(parse("sqrt(t)"), [-1.0, 0.0, 4.0])
        assert math.isnan(values[0])
        assert values[1] == 0.0
        assert values[2] == 2.0

    def test_contract(self):
        with pytest.raises(ExpressionEvaluationError):
            evaluate_many("t", [1.0])


class TestExpressionIntrospection:
    """Tests for AST export and function listing."""

    def test_to_dict(self):
        assert parse("-t").to_dict() == {
            "format": "knot_ast_v1",
            "root": {"type": "unop", "op": "neg", "arg": {"type": "var", "name": "t"}},
        }

    def test_to_dict_call(self):
        d = parse("pow(t, 2)").to_dict()["root"]
        assert d["type"] == "call"
        assert d["name"] == "pow"
        assert d["args"][1] == {"type": "number", "value": 2.0}

    def test_functions_in_first_use_order(self):
        assert parse("sin(t) + cos(t) * sin(t)").functions() == ["sin", "cos"]

    def test_functions_empty(self):
        assert parse("t * pi").functions() == []

    def test_is_expression(self):
        assert isinstance(parse("t"), Expression)
