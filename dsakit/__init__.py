"""Classic data structures and algorithms in plain Python: arrays, searching,
sorting, dynamic programming, a bounded stack, graphs, Huffman coding, job
scheduling and linked lists."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "dp",
    "graph",
    "huffman",
    "linked_list",
    "scheduling",
    "searching",
    "sorting",
    "stack",
]