"""Classic algorithms and data structures in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "library",
    "linked_list",
    "numbers",
    "sorting",
    "stacks",
    "strings",
    "tree",
]