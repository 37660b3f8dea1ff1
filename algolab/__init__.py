"""Classic algorithms and data structures: sorting, searching, stacks, expression parsing, AVL trees, hashing and graph partitioning."""

__version__ = "0.1.0"