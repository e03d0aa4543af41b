"""Bit manipulation on 32-bit integers."""

_WIDTH = 32
_MASK = (1 << _WIDTH) - 1


def hamming_distance(x: int, y: int) -> int:
    """Count the bit positions in which the 32-bit forms of x and y differ."""
    return ((x ^ y) & _MASK).bit_count()


def reverse_bits(n: int) -> int:
    """Reverse the order of the bits of an unsigned 32-bit integer."""
    if not 0 <= n <= _MASK:
        raise ValueError(f"{n} is not an unsigned 32-bit integer")
    return int(f"{n:0{_WIDTH}b}"[::-1], 2)