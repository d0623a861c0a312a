"""Conversion between infix, postfix and prefix notation, and postfix evaluation."""

from __future__ import annotations

from collections.abc import Callable

_SIMPLE_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


class ExpressionError(ValueError):
    """Raised for an expression that cannot be converted or evaluated."""


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def simple_infix_to_postfix(expression: str) -> str:
    """Convert an infix expression using only ``+ - * /`` to postfix.

    Every other character, parentheses included, is copied as an operand.
    Operators of equal precedence associate to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if ch not in _SIMPLE_PRECEDENCE:
            output.append(ch)
            continue
        while stack and _SIMPLE_PRECEDENCE[ch] <= _SIMPLE_PRECEDENCE[stack[-1]]:
            output.append(stack.pop())
        stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def _convert(expression: str, should_pop: Callable[[str, str], bool]) -> str:
    """Shunting-yard conversion; ``should_pop(incoming, top)`` decides popping."""
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched ')'")
            stack.pop()
        elif ch in _PRECEDENCE:
            while stack and stack[-1] != "(" and should_pop(ch, stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ExpressionError(f"unexpected character {ch!r}")
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unmatched '('")
        output.append(top)
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression with ``+ - * / ^`` and parentheses to postfix.

    Operands are single ASCII letters or digits; every operator, ``^``
    included, associates to the left.
    """
    return _convert(
        expression, lambda incoming, top: _PRECEDENCE[incoming] <= _PRECEDENCE[top]
    )


def _prefix_pop(incoming: str, top: str) -> bool:
    if incoming == "^":
        return _PRECEDENCE[incoming] <= _PRECEDENCE[top]
    return _PRECEDENCE[incoming] < _PRECEDENCE[top]


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix; ``^`` associates to the right."""
    swap = {"(": ")", ")": "("}
    mirrored = "".join(swap.get(ch, ch) for ch in reversed(expression))
    return _convert(mirrored, _prefix_pop)[::-1]


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise ExpressionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _remainder(left: int, right: int) -> int:
    return left - right * _truncating_div(left, right)


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise ExpressionError("zero raised to a negative power")
    return int(base**exponent)


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
    "%": _remainder,
    "^": _power,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Spaces and tabs are ignored. Division and remainder truncate toward
    zero. Raises ExpressionError for an unknown operator, too few operands,
    leftover operands or division by zero.
    """
    stack: list[int] = []
    for ch in expression:
        if ch in " \t":
            continue
        if ch.isascii() and ch.isdigit():
            stack.append(int(ch))
            continue
        operation = _OPERATIONS.get(ch)
        if operation is None:
            raise ExpressionError(f"invalid operator {ch!r}")
        if len(stack) < 2:
            raise ExpressionError(f"not enough operands for {ch!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if len(stack) != 1:
        raise ExpressionError("malformed postfix expression")
    return stack[0]