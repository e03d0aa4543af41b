"""Searching, matching and parsing algorithms on strings."""

import re
from collections import Counter
from itertools import pairwise
from typing import Sequence

NOT_FOUND = -1

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_SUBTRACTIVE_PAIRS = {"IV", "IX", "XL", "XC", "CD", "CM"}

_LEADING_INTEGER = re.compile(r" *([+-]?[0-9]+)")


def first_uniq_char(s: str) -> int:
    """Return the index of the first character that occurs once, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), NOT_FOUND)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1.

    An empty needle is found at index 0.
    """
    return haystack.find(needle)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest string that starts every string in ``strs``."""
    prefix = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def character_replacement(s: str, k: int) -> int:
    """Length of the longest run of one character reachable by changing at most ``k`` characters."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    counts: Counter[str] = Counter()
    best = 0
    most_common = 0
    left = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        most_common = max(most_common, counts[ch])
        while (right - left + 1) - most_common > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``.

    Characters of ``t`` count with their multiplicity. Among equally short
    windows the leftmost one is returned; "" if there is none.
    """
    if not t or len(t) > len(s):
        return ""
    need = Counter(t)
    missing = len(t)
    best: tuple[int, int] | None = None
    left = 0
    for right, ch in enumerate(s, start=1):
        if need[ch] > 0:
            missing -= 1
        need[ch] -= 1
        if missing:
            continue
        while need[s[left]] < 0:
            need[s[left]] += 1
            left += 1
        if best is None or right - left < best[1] - best[0]:
            best = (left, right)
        need[s[left]] += 1
        missing += 1
        left += 1
    if best is None:
        return ""
    return s[best[0]:best[1]]


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of ``s1`` is a substring of ``s2``."""
    width = len(s1)
    if width > len(s2):
        return False
    target = Counter(s1)
    window = Counter(s2[:width])
    if window == target:
        return True
    for outgoing, incoming in zip(s2, s2[width:]):
        window[incoming] += 1
        window[outgoing] -= 1
        if window == target:
            return True
    return False


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    Only the standard subtractive pairs (IV, IX, XL, XC, CD, CM) subtract.
    """
    try:
        total = sum(_ROMAN_VALUES[ch] for ch in s)
    except KeyError as exc:
        raise ValueError(f"invalid Roman digit: {exc.args[0]!r}") from None
    for first, second in pairwise(s):
        if first + second in _SUBTRACTIVE_PAIRS:
            total -= 2 * _ROMAN_VALUES[first]
    return total


def my_atoi(s: str) -> int:
    """Parse a leading signed integer, clamped to the signed 32-bit range.

    Leading spaces are skipped; anything that does not start a number gives 0.
    """
    match = _LEADING_INTEGER.match(s)
    if match is None:
        return 0
    return max(INT_MIN, min(INT_MAX, int(match.group(1))))