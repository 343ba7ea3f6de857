"""Classic algorithm problems on arrays, strings, trees, linked lists, hashing and stacks."""

__version__ = "0.1.0"