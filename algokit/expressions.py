"""Bracket matching, infix-to-postfix conversion and polynomial addition."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

OPENERS = {")": "(", "]": "[", "}": "{"}
OPERATORS = frozenset("+-*/^")


class ExpressionError(ValueError):
    """Raised when an expression cannot be parsed."""


@dataclass(frozen=True)
class Term:
    """One polynomial term: ``coeff * x ** power``."""

    coeff: int
    power: int

    def __str__(self) -> str:
        return f"{self.coeff}x^{self.power}"


def is_balanced(expression: str) -> bool:
    """Tell whether every (, [ and { in *expression* is closed in the right order.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for ch in expression:
        if ch in "([{":
            stack.append(ch)
        elif ch in OPENERS:
            if not stack or stack.pop() != OPENERS[ch]:
                return False
    return not stack


def precedence(operator: str) -> int:
    """Return the binding strength of *operator*; higher binds tighter."""
    if operator == "^":
        return 11
    if operator in ("*", "/"):
        return 9
    return 7


def to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix.

    Supports + - * / ^ and parentheses; ^ is right associative. Whitespace
    is ignored. Raises ExpressionError on malformed input.
    """
    output: list[str] = []
    operators: list[str] = []
    expect_operand = True
    for ch in expression:
        if ch.isspace():
            continue
        if ch.isalpha():
            if not expect_operand:
                raise ExpressionError(f"unexpected operand {ch!r}")
            output.append(ch)
            expect_operand = False
        elif ch == "(":
            if not expect_operand:
                raise ExpressionError("unexpected '('")
            operators.append(ch)
        elif ch == ")":
            if expect_operand:
                raise ExpressionError("unexpected ')'")
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise ExpressionError("unmatched ')'")
            operators.pop()
        elif ch in OPERATORS:
            if expect_operand:
                raise ExpressionError(f"unexpected operator {ch!r}")
            while operators and operators[-1] != "(":
                top = precedence(operators[-1])
                current = precedence(ch)
                if top > current or (top == current and ch != "^"):
                    output.append(operators.pop())
                else:
                    break
            operators.append(ch)
            expect_operand = True
        else:
            raise ExpressionError(f"invalid character {ch!r}")
    if expect_operand:
        raise ExpressionError("expression is incomplete")
    while operators:
        op = operators.pop()
        if op == "(":
            raise ExpressionError("unmatched '('")
        output.append(op)
    return "".join(output)


def add_polynomials(first: Iterable[Term], second: Iterable[Term]) -> list[Term]:
    """Add two polynomials whose terms are listed by descending power.

    Terms of equal power are merged, even when their sum is zero.
    """
    a, b = list(first), list(second)
    result: list[Term] = []
    i = j = 0
    while i < len(a) and j < len(b):
        left, right = a[i], b[j]
        if left.power == right.power:
            result.append(Term(left.coeff + right.coeff, left.power))
            i += 1
            j += 1
        elif left.power > right.power:
            result.append(left)
            i += 1
        else:
            result.append(right)
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def format_polynomial(terms: Iterable[Term]) -> str:
    """Render terms as ``"CxP"`` pieces separated by two spaces."""
    return "  ".join(str(term) for term in terms)