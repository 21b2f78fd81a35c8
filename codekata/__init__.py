"""Classic coding exercises: binary trees, arrays, strings, linked lists, sorting, and small thread, file and chat patterns."""

__version__ = "0.1.0"