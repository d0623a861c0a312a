import math
import operator

import pytest

from dsakit.expressions import (
    ExpressionError,
    evaluate_postfix,
    infix_to_postfix,
    infix_to_prefix,
    simple_infix_to_postfix,
)

_OPS = {"+": operator.add, "-": operator.sub, "*": operator.mul, "^": operator.pow}


def _eval_prefix(prefix):
    stack = []
    for ch in reversed(prefix):
        if ch.isdigit():
            stack.append(int(ch))
        else:
            left = stack.pop()
            right = stack.pop()
            stack.append(_OPS[ch](left, right))
    assert len(stack) == 1
    return stack[0]


def test_simple_worked_example():
    assert simple_infix_to_postfix("x+y*z-k") == "xyz*+k-"


@pytest.mark.parametrize("expr", ["a+b", "a*b-c/d", "x+y*z-k", "a-b-c", "p/q*r+s"])
def test_simple_matches_full_converter_without_parentheses(expr):
    assert simple_infix_to_postfix(expr) == infix_to_postfix(expr)


def test_simple_copies_parentheses_as_operands():
    result = simple_infix_to_postfix("(a+b)")
    assert sorted(result) == sorted("(a+b)")
    assert result.endswith("+")


def test_postfix_worked_example():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+^*+i-"


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("2+3*4", 2 + 3 * 4),
        ("(2+3)*4", (2 + 3) * 4),
        ("9-5-2", 9 - 5 - 2),
        ("2^3^2", (2**3) ** 2),
        ("8/2/2", 8 // 2 // 2),
    ],
)
def test_postfix_evaluates_like_infix(expr, expected):
    assert evaluate_postfix(infix_to_postfix(expr)) == expected


def test_postfix_drops_only_parentheses():
    expr = "(a+b)*(c-d)^e"
    result = infix_to_postfix(expr)
    assert sorted(result) == sorted(ch for ch in expr if ch not in "()")


@pytest.mark.parametrize("expr", ["(a+b", "a+b)", "a + b", "a&b"])
def test_postfix_rejects_bad_input(expr):
    with pytest.raises(ExpressionError):
        infix_to_postfix(expr)


def test_prefix_worked_example():
    assert infix_to_prefix("x+y*z/w+u") == "++x/*yzwu"


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("2^3^2", 2**3**2),
        ("9-5-2", 9 - 5 - 2),
        ("(1+2)*3", (1 + 2) * 3),
        ("2*3+4*5", 2 * 3 + 4 * 5),
        ("8-(3-1)", 8 - (3 - 1)),
    ],
)
def test_prefix_evaluates_like_infix(expr, expected):
    assert _eval_prefix(infix_to_prefix(expr)) == expected


def test_prefix_single_operand():
    assert infix_to_prefix("a") == "a"


@pytest.mark.parametrize("expr", ["(a+b", "a+b)"])
def test_prefix_rejects_unbalanced(expr):
    with pytest.raises(ExpressionError):
        infix_to_prefix(expr)


def test_evaluate_ignores_whitespace():
    assert evaluate_postfix("2 3\t+ 4 *") == evaluate_postfix("23+4*")
    assert evaluate_postfix("2 3\t+ 4 *") == (2 + 3) * 4


def test_evaluate_truncates_toward_zero():
    assert evaluate_postfix("27-3/") == int((2 - 7) / 3)
    assert evaluate_postfix("27-3%") == int(math.fmod(2 - 7, 3))


def test_evaluate_negative_exponent_truncates():
    assert evaluate_postfix("201-^") == int(2**-1)


@pytest.mark.parametrize("expr", ["2+", "23&", "20/", "", "234+", "20%"])
def test_evaluate_errors(expr):
    with pytest.raises(ExpressionError):
        evaluate_postfix(expr)


def test_expression_error_is_value_error():
    with pytest.raises(ValueError):
        evaluate_postfix("1#")