"""Stack-based structures and algorithms."""

import operator
from typing import Callable, Iterable

_PAIRS = {")": "(", "]": "[", "}": "{"}


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minima: list[int] = []

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        if not self._minima or val <= self._minima[-1]:
            self._minima.append(val)
        self._items.append(val)

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        val = self._items.pop()
        if self._minima[-1] == val:
            self._minima.pop()
        return val

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        if not self._minima:
            raise IndexError("minimum of empty stack")
        return self._minima[-1]

    def __len__(self) -> int:
        return len(self._items)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an expression in reverse Polish notation.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            try:
                stack.append(int(token))
            except ValueError:
                raise ValueError(f"invalid token: {token!r}") from None
            continue
        if len(stack) < 2:
            raise ValueError(f"not enough operands for {token!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(op(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character other than ``()[]{}`` makes the string invalid.
    """
    openers = set(_PAIRS.values())
    stack: list[str] = []
    for ch in s:
        if ch in openers:
            stack.append(ch)
        elif ch in _PAIRS and stack and stack[-1] == _PAIRS[ch]:
            stack.pop()
        else:
            return False
    return not stack