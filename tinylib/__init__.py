"""Small utilities for characters, numbers, strings, linked lists, line reading, output and formatting."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "output",
    "linked_list",
    "lines",
    "search",
    "strings",
    "printf",
]