"""Classic algorithms and small data structures: searching, array problems,
greedy methods, backtracking, a text editor buffer, an LRU cache, tree
traversal, the Josephus problem and a small calculator."""

__version__ = "0.1.0"