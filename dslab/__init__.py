"""Classic data structures and graph algorithms with interactive command-line programs."""

__version__ = "0.1.0"

__all__ = [
    "binary_tree",
    "bitset",
    "bst",
    "circular_queue",
    "disjoint_set",
    "doubly_linked_list",
    "graphs",
    "linked_list",
    "stack",
]