"""Parenthesis checking and infix-to-postfix/prefix conversion."""

from __future__ import annotations

_OPENERS = "({["
_CLOSERS = ")}]"
_OPERATORS = "+-*/"


def _count_balanced(expression: str, openers: str, closers: str) -> bool:
    depth = 0
    for ch in expression:
        if ch in openers:
            depth += 1
        elif ch in closers:
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def is_balanced(expression: str) -> bool:
    """Return whether every ``(`` in ``expression`` has a matching ``)``."""
    return _count_balanced(expression, "(", ")")


def is_balanced_multi(expression: str) -> bool:
    """Return whether the brackets ``()``, ``{}`` and ``[]`` are balanced.

    Any closing bracket closes the most recent opening one; their kinds
    are not compared.
    """
    return _count_balanced(expression, _OPENERS, _CLOSERS)


def precedence(ch: str) -> int:
    """Return the binding strength of an operator, 0 for anything else."""
    if ch in ("*", "/"):
        return 3
    if ch in ("+", "-"):
        return 2
    return 0


def is_operator(ch: str) -> bool:
    return len(ch) == 1 and ch in _OPERATORS


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    stack: list[str] = []
    output: list[str] = []
    for ch in infix:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif is_operator(ch):
            while stack and precedence(ch) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(ch)
        else:
            output.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def infix_to_prefix(infix: str) -> str:
    """Convert an infix expression to prefix via the reversed postfix form."""
    mirrored = infix[::-1].translate(str.maketrans("()", ")("))
    return infix_to_postfix(mirrored)[::-1]