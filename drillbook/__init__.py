"""Classic programming exercises: matrices, patterns, arrays, searching, sorting, numbers, strings, linked lists, stacks and word arithmetic."""

__version__ = "0.1.0"