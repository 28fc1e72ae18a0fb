"""Conversion of infix expressions to postfix notation."""

from __future__ import annotations

OPERATORS = frozenset("+-*/^")

_PRIORITY = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def priority(op: str) -> int:
    """Return the binding priority of an operator; 0 for anything else."""
    return _PRIORITY.get(op, 0)


def infix_to_postfix(formula: str) -> str:
    """Convert an infix expression to postfix.

    Every character that is not an operator or a parenthesis is treated as an
    operand and copied through. Operators of equal priority associate to the
    left. A closing parenthesis with no matching opening one raises ValueError.
    """
    stack: list[str] = []
    postfix: list[str] = []
    for char in formula:
        if char == "(":
            stack.append(char)
        elif char == ")":
            while True:
                if not stack:
                    raise ValueError("unbalanced ')' in expression")
                token = stack.pop()
                if token == "(":
                    break
                postfix.append(token)
        elif char in OPERATORS:
            while stack and priority(char) <= priority(stack[-1]):
                postfix.append(stack.pop())
            stack.append(char)
        else:
            postfix.append(char)
    postfix.extend(reversed(stack))
    return "".join(postfix)