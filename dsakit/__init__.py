"""Classic data structures and algorithms: sorts, searches, linked lists, stacks, queues, trees, hashing and graphs."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "circular_list",
    "doubly_linked_list",
    "graph",
    "hashtable",
    "linked_queue",
    "ordered_list",
    "postfix",
    "searching",
    "sorting",
    "stack",
    "unordered_list",
]