"""Generating combinatorial families: bracket strings, subsets, binomials."""

from typing import Iterator, Sequence


def _balanced(prefix: str, opened: int, closed: int, n: int) -> Iterator[str]:
    if opened == closed == n:
        yield prefix
        return
    if opened < n:
        yield from _balanced(prefix + "(", opened + 1, closed, n)
    if closed < opened:
        yield from _balanced(prefix + ")", opened, closed + 1, n)


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses.

    Strings come in lexicographic order with "(" before ")".
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return list(_balanced("", 0, 0, n))


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return all subsets of ``nums``, each element taken in input order."""
    result: list[list[int]] = [[]]
    for num in nums:
        result.extend([subset + [num] for subset in result])
    return result


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return all distinct sub-multisets of ``nums``, each in sorted order."""
    result: list[list[int]] = [[]]
    fresh = 0
    previous: object = object()
    for num in sorted(nums):
        base = result[-fresh:] if num == previous else result
        added = [subset + [num] for subset in base]
        result.extend(added)
        fresh = len(added)
        previous = num
    return result


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be at least 1, got {num_rows}")
    rows = [[1]]
    for _ in range(num_rows - 1):
        last = rows[-1]
        rows.append([1] + [a + b for a, b in zip(last, last[1:])] + [1])
    return rows