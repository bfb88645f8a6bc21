"""Classic data structures and algorithms in plain Python: sorting, searching,
recursion, dynamic programming, Huffman codes, heaps, expressions, stacks,
queues, linked lists, records, trees and graphs."""

__version__ = "0.1.0"