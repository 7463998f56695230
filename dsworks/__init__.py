"""Stacks, heaps and search trees with command-driven front ends and benchmarks."""

__version__ = "0.1.0"

__all__ = [
    "array_gen",
    "avl",
    "benchmarks",
    "bst",
    "float_hash",
    "indexed_heap",
    "kheap",
    "minmax_heap",
    "quicksort",
    "splay",
    "splay_map",
    "stack_commands",
    "stacks",
    "treap",
]