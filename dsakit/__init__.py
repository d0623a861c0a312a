"""Classic data structures and algorithms in plain Python: sorts, searches,
dynamic programming, expression conversion, stacks, queues, linked lists,
a binary search tree, a trie, an LRU cache and a snapshot array."""

__version__ = "0.1.0"