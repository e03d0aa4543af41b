"""Classic algorithms and data structures: caching, stacks, linked lists,
trees, bits, strings, combinatorics, searching, arrays and grids."""

__version__ = "0.1.0"