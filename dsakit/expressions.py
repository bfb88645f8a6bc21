"""Infix conversion, stack evaluation of postfix and prefix, bracket checks."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_DIGITS = frozenset("0123456789")
_OPENING = {"(": ")", "{": "}", "[": "]"}
_CLOSING = frozenset(_OPENING.values())


class BracketStatus(Enum):
    """Outcome of :func:`check_brackets`."""

    BALANCED = "brackets are well balanced"
    EXTRA_RIGHT = "right bracket is more than left bracket"
    MISMATCH = "mismatched bracket"
    EXTRA_LEFT = "left bracket is more than right bracket"

    @property
    def balanced(self) -> bool:
        return self is BracketStatus.BALANCED


def _precedence(symbol: str) -> int:
    return _PRECEDENCE.get(symbol, 0)


def _is_right_associative(symbol: str) -> bool:
    return symbol == "^"


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def _tokens(expression: str) -> Iterator[str]:
    for symbol in expression:
        if symbol.isspace():
            continue
        if _is_operand(symbol) or symbol in _PRECEDENCE or symbol in "()":
            yield symbol
        else:
            raise ValueError(f"unexpected character {symbol!r}")


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    output: list[str] = []
    stack: list[str] = []
    for symbol in _tokens(expression):
        if _is_operand(symbol):
            output.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        else:
            while stack and (
                _precedence(stack[-1]) > _precedence(symbol)
                or (
                    _precedence(stack[-1]) == _precedence(symbol)
                    and not _is_right_associative(symbol)
                )
            ):
                output.append(stack.pop())
            stack.append(symbol)
    while stack:
        symbol = stack.pop()
        if symbol == "(":
            raise ValueError("unbalanced parentheses")
        output.append(symbol)
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix by scanning it in reverse.

    Operators of equal precedence are never popped during the reversed scan,
    so chains of ``^`` come out grouped to the left.
    """
    output: list[str] = []
    stack: list[str] = []
    for symbol in reversed(list(_tokens(expression))):
        if _is_operand(symbol):
            output.append(symbol)
        elif symbol == ")":
            stack.append(symbol)
        elif symbol == "(":
            while stack and stack[-1] != ")":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        else:
            while (
                stack
                and _precedence(stack[-1]) > _precedence(symbol)
                and not _is_right_associative(symbol)
            ):
                output.append(stack.pop())
            stack.append(symbol)
    while stack:
        symbol = stack.pop()
        if symbol == ")":
            raise ValueError("unbalanced parentheses")
        output.append(symbol)
    return "".join(reversed(output))


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if right == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    if right >= 0:
        return left**right
    return int(left**right)


def _evaluate(symbols: Iterator[str], operands_reversed: bool) -> int:
    stack: list[int] = []
    for symbol in symbols:
        if symbol.isspace():
            continue
        if symbol in _DIGITS:
            stack.append(int(symbol))
        elif symbol in _PRECEDENCE:
            if len(stack) < 2:
                raise ValueError("stack underflow: missing operand")
            first, second = stack.pop(), stack.pop()
            left, right = (first, second) if operands_reversed else (second, first)
            stack.append(_apply(symbol, left, right))
        else:
            raise ValueError(f"invalid notation: {symbol!r}")
    if len(stack) != 1:
        raise ValueError("malformed expression")
    return stack[0]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands."""
    return _evaluate(iter(expression), operands_reversed=False)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands."""
    return _evaluate(reversed(expression), operands_reversed=True)


def check_brackets(expression: str) -> BracketStatus:
    """Check that (), {} and [] in ``expression`` are properly nested."""
    stack: list[str] = []
    for symbol in expression:
        if symbol in _OPENING:
            stack.append(symbol)
        elif symbol in _CLOSING:
            if not stack:
                return BracketStatus.EXTRA_RIGHT
            if _OPENING[stack.pop()] != symbol:
                return BracketStatus.MISMATCH
    return BracketStatus.BALANCED if not stack else BracketStatus.EXTRA_LEFT